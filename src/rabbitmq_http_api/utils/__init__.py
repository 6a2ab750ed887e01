"""Utility modules for the RabbitMQ HTTP API client."""

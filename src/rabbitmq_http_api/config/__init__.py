"""Configuration for the RabbitMQ HTTP API client."""

from .settings import Settings

__all__ = ["Settings"]

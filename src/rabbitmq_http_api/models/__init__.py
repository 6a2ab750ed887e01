"""Response models for the RabbitMQ HTTP API client."""

from .resource import Resource, decode_resource, decode_resource_collection

__all__ = [
    "Resource",
    "decode_resource",
    "decode_resource_collection",
]

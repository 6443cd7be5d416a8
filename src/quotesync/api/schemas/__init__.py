"""API request and response schemas."""

from .base import APIBaseSchema, to_camel_case
from .responses import HealthResponse

__all__ = [
    "APIBaseSchema",
    "HealthResponse",
    "to_camel_case",
]

"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .tag_service import TagService

__all__ = [
    "JWTService",
    "Service",
    "TagService",
]

"""Core utilities and shared components for vultr-tools."""

from .config import settings
from .exceptions import APIError, OperationError, ValidationError, VultrToolsError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "VultrToolsError",
    "ValidationError",
    "APIError",
    "OperationError",
    "get_logger",
    "get_tracer",
]

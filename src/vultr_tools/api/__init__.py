"""Vultr API client."""

from .client import VultrClient
from .object_storage import ObjectStorageService

__all__ = ["VultrClient", "ObjectStorageService"]

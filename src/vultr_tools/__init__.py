"""Command line tools for managing Vultr object storage.

This package wraps the object storage endpoints of the Vultr v2 API behind a
Typer command group. Every command validates its input locally, performs one
API call and prints the result.

Recommended Usage:
    From the shell:

        $ export VULTR_API_KEY=...
        $ vultr-tools object-storage list --per-page 50
        $ vultr-tools object-storage create --cluster-id 2 --label backups

    From Python:

    >>> from vultr_tools import VultrClient, list_object_storages
    >>> with VultrClient(api_key="...") as client:
    ...     storages, meta = list_object_storages(client)
"""

__version__ = "0.1.0"

from .api import ObjectStorageService, VultrClient
from .objectstorage import (
    create_object_storage,
    delete_object_storage,
    get_object_storage,
    list_cluster_tiers,
    list_clusters,
    list_object_storages,
    list_tiers,
    regenerate_object_storage_keys,
    update_object_storage_label,
)
from .schemas import (
    ListOptions,
    Meta,
    ObjectStorage,
    ObjectStorageCluster,
    ObjectStorageRequest,
    ObjectStorageTier,
    S3Keys,
)

__all__ = [
    # API client
    "VultrClient",
    "ObjectStorageService",
    # Schemas
    "ListOptions",
    "Meta",
    "ObjectStorage",
    "ObjectStorageCluster",
    "ObjectStorageRequest",
    "ObjectStorageTier",
    "S3Keys",
    # Operations
    "create_object_storage",
    "delete_object_storage",
    "get_object_storage",
    "list_cluster_tiers",
    "list_clusters",
    "list_object_storages",
    "list_tiers",
    "regenerate_object_storage_keys",
    "update_object_storage_label",
]

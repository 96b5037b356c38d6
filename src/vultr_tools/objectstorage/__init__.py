"""Object storage operations and commands."""

from .commands import object_storage_app
from .operations import (
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

__all__ = [
    "object_storage_app",
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

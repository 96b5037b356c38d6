"""Object storage endpoints of the Vultr API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from vultr_tools.core.exceptions import APIError
from vultr_tools.schemas import (
    ListOptions,
    Meta,
    ObjectStorage,
    ObjectStorageCluster,
    ObjectStorageRequest,
    ObjectStorageTier,
    S3Keys,
)

if TYPE_CHECKING:
    from .client import VultrClient

BASE_PATH = "/object-storage"


class ObjectStorageService:
    """Maps object storage operations onto REST endpoints.

    Every method performs exactly one request.
    """

    def __init__(self, client: "VultrClient"):
        self._client = client

    def list(
        self, options: Optional[ListOptions] = None
    ) -> tuple[list[ObjectStorage], Meta]:
        """List object storage subscriptions."""
        body = self._client.request("GET", BASE_PATH, params=_params(options))
        storages = _parse_list(ObjectStorage, body, "object_storages")
        return storages, _parse(Meta, body, "meta")

    def get(self, object_storage_id: str) -> ObjectStorage:
        """Get one object storage subscription."""
        body = self._client.request("GET", _item_path(object_storage_id))
        return _parse(ObjectStorage, body, "object_storage")

    def create(self, request: ObjectStorageRequest) -> ObjectStorage:
        """Create an object storage subscription."""
        body = self._client.request("POST", BASE_PATH, json=request.to_payload())
        return _parse(ObjectStorage, body, "object_storage")

    def update(self, object_storage_id: str, request: ObjectStorageRequest) -> None:
        """Update an object storage subscription."""
        self._client.request(
            "PUT", _item_path(object_storage_id), json=request.to_payload()
        )

    def delete(self, object_storage_id: str) -> None:
        """Delete an object storage subscription."""
        self._client.request("DELETE", _item_path(object_storage_id))

    def list_clusters(
        self, options: Optional[ListOptions] = None
    ) -> tuple[list[ObjectStorageCluster], Meta]:
        """List the clusters object storage can be deployed in."""
        body = self._client.request(
            "GET", f"{BASE_PATH}/clusters", params=_params(options)
        )
        clusters = _parse_list(ObjectStorageCluster, body, "clusters")
        return clusters, _parse(Meta, body, "meta")

    def list_tiers(self, options: Optional[ListOptions] = None) -> list[ObjectStorageTier]:
        """List all object storage tiers."""
        body = self._client.request("GET", f"{BASE_PATH}/tiers", params=_params(options))
        return _parse_list(ObjectStorageTier, body, "tiers")

    def list_cluster_tiers(self, cluster_id: int) -> list[ObjectStorageTier]:
        """List the tiers available on one cluster."""
        body = self._client.request("GET", f"{BASE_PATH}/clusters/{cluster_id}/tiers")
        return _parse_list(ObjectStorageTier, body, "tiers")

    def regenerate_keys(self, object_storage_id: str) -> S3Keys:
        """Regenerate the S3 credentials of a subscription."""
        body = self._client.request(
            "POST", f"{_item_path(object_storage_id)}/regenerate-keys"
        )
        return _parse(S3Keys, body, "s3_credentials")


def _item_path(object_storage_id: str) -> str:
    # IDs always stay a single path segment
    return f"{BASE_PATH}/{quote(object_storage_id, safe='')}"


def _params(options: Optional[ListOptions]) -> Optional[dict[str, Any]]:
    if options is None:
        return None
    return options.to_params() or None


def _parse(model, body: Any, key: str):
    if not isinstance(body, dict):
        raise APIError(f"unexpected response body, expected object with '{key}'")
    try:
        return model.model_validate(body.get(key) or {})
    except PydanticValidationError as e:
        raise APIError(f"unable to decode '{key}': {e}") from e


def _parse_list(model, body: Any, key: str) -> list:
    if not isinstance(body, dict):
        raise APIError(f"unexpected response body, expected object with '{key}'")
    try:
        return [model.model_validate(item) for item in body.get(key) or []]
    except PydanticValidationError as e:
        raise APIError(f"unable to decode '{key}': {e}") from e

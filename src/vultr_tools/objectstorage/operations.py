"""Object storage operations.

Each function performs a single API call through the given client. Any API
failure is logged and re-raised as an ``OperationError`` whose message starts
with a fixed prefix naming the operation, followed by the underlying error.
"""

from typing import Optional

from vultr_tools.api import VultrClient
from vultr_tools.core import get_logger
from vultr_tools.core.exceptions import APIError, OperationError
from vultr_tools.schemas import (
    ListOptions,
    Meta,
    ObjectStorage,
    ObjectStorageCluster,
    ObjectStorageRequest,
    ObjectStorageTier,
    S3Keys,
)

logger = get_logger(__name__)

DEFAULT_TIER_ID = 1


def _wrap(prefix: str, error: APIError) -> OperationError:
    error_msg = f"{prefix} : {error}"
    logger.error(error_msg, error=str(error), status_code=error.status_code)
    return OperationError(error_msg)


def list_object_storages(
    client: VultrClient,
    options: Optional[ListOptions] = None,
) -> tuple[list[ObjectStorage], Meta]:
    """
    List object storage subscriptions.

    Args:
        client: Authenticated API client
        options: Paging cursor and page size

    Returns:
        Tuple of (subscriptions, paging metadata)

    Raises:
        OperationError: If the API call fails
    """
    logger.info("Listing object storage", options=options)

    try:
        return client.object_storage.list(options)
    except APIError as e:
        raise _wrap("error retrieving object storage list", e) from e


def get_object_storage(client: VultrClient, object_storage_id: str) -> ObjectStorage:
    """Get one object storage subscription."""
    logger.info("Getting object storage", object_storage_id=object_storage_id)

    try:
        return client.object_storage.get(object_storage_id)
    except APIError as e:
        raise _wrap("error getting object storage info", e) from e


def create_object_storage(
    client: VultrClient,
    cluster_id: int,
    label: Optional[str] = None,
    tier_id: int = DEFAULT_TIER_ID,
) -> ObjectStorage:
    """
    Create an object storage subscription.

    Args:
        client: Authenticated API client
        cluster_id: Cluster to deploy in
        label: Optional label for the subscription
        tier_id: Tier to deploy with, defaults to tier 1

    Returns:
        The created subscription

    Raises:
        OperationError: If the API call fails
    """
    request = ObjectStorageRequest(cluster_id=cluster_id, tier_id=tier_id, label=label)
    logger.info("Creating object storage", **request.to_payload())

    try:
        return client.object_storage.create(request)
    except APIError as e:
        raise _wrap("error creating object storage", e) from e


def update_object_storage_label(
    client: VultrClient, object_storage_id: str, label: str
) -> None:
    """Set the label of an object storage subscription, leaving all else as is."""
    logger.info(
        "Updating object storage label", object_storage_id=object_storage_id, label=label
    )

    try:
        client.object_storage.update(object_storage_id, ObjectStorageRequest(label=label))
    except APIError as e:
        raise _wrap("error updating object storage label", e) from e


def delete_object_storage(client: VultrClient, object_storage_id: str) -> None:
    """Delete an object storage subscription."""
    logger.info("Deleting object storage", object_storage_id=object_storage_id)

    try:
        client.object_storage.delete(object_storage_id)
    except APIError as e:
        raise _wrap("unable to delete object storage", e) from e


def regenerate_object_storage_keys(client: VultrClient, object_storage_id: str) -> S3Keys:
    """Regenerate the S3 credentials of a subscription.

    The previous key pair stops working once this returns.
    """
    logger.info("Regenerating object storage keys", object_storage_id=object_storage_id)

    try:
        return client.object_storage.regenerate_keys(object_storage_id)
    except APIError as e:
        raise _wrap("unable to regenerate keys for object storage", e) from e


def list_clusters(
    client: VultrClient,
    options: Optional[ListOptions] = None,
) -> tuple[list[ObjectStorageCluster], Meta]:
    """List the clusters object storage can be deployed in."""
    logger.info("Listing object storage clusters", options=options)

    try:
        return client.object_storage.list_clusters(options)
    except APIError as e:
        raise _wrap("error retrieving object storage cluster list", e) from e


def list_cluster_tiers(client: VultrClient, cluster_id: int) -> list[ObjectStorageTier]:
    """List the tiers available on one cluster."""
    logger.info("Listing object storage cluster tiers", cluster_id=cluster_id)

    try:
        return client.object_storage.list_cluster_tiers(cluster_id)
    except APIError as e:
        raise _wrap("error retrieving object storage cluster tier list", e) from e


def list_tiers(
    client: VultrClient,
    options: Optional[ListOptions] = None,
) -> list[ObjectStorageTier]:
    """List all object storage tiers."""
    logger.info("Listing object storage tiers", options=options)

    try:
        return client.object_storage.list_tiers(options)
    except APIError as e:
        raise _wrap("error retrieving object storage tier list", e) from e

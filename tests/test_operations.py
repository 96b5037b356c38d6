"""Tests for object storage operations."""

import pytest

from vultr_tools.core.exceptions import APIError, OperationError
from vultr_tools.objectstorage.operations import (
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
from vultr_tools.schemas import ListOptions


class TestObjectStorageOperations:
    """Test operations call the API once and return its result."""

    def test_list_object_storages(self, mock_client):
        """Test listing returns subscriptions and meta."""
        options = ListOptions(per_page=20)
        storages, meta = list_object_storages(mock_client, options)

        mock_client.object_storage.list.assert_called_once_with(options)
        assert storages[0].label == "mybucket"
        assert meta.total == 1

    def test_get_object_storage(self, mock_client, object_storage_payload):
        """Test get returns the subscription unchanged."""
        storage = get_object_storage(mock_client, "abc")

        mock_client.object_storage.get.assert_called_once_with("abc")
        assert storage.to_dict() == object_storage_payload

    def test_create_defaults_to_tier_one(self, mock_client):
        """Test create uses tier 1 unless told otherwise."""
        create_object_storage(mock_client, cluster_id=5, label="mybucket")

        request = mock_client.object_storage.create.call_args.args[0]
        assert request.to_payload() == {"cluster_id": 5, "tier_id": 1, "label": "mybucket"}

    def test_create_without_label(self, mock_client):
        """Test create omits the label when none is given."""
        create_object_storage(mock_client, cluster_id=5, tier_id=2)

        request = mock_client.object_storage.create.call_args.args[0]
        assert request.to_payload() == {"cluster_id": 5, "tier_id": 2}

    def test_update_label_only(self, mock_client):
        """Test label update leaves cluster and tier unset."""
        update_object_storage_label(mock_client, "abc", "renamed")

        object_storage_id, request = mock_client.object_storage.update.call_args.args
        assert object_storage_id == "abc"
        assert request.cluster_id is None
        assert request.tier_id is None
        assert request.to_payload() == {"label": "renamed"}

    def test_delete(self, mock_client):
        """Test delete passes the ID through."""
        assert delete_object_storage(mock_client, "abc") is None
        mock_client.object_storage.delete.assert_called_once_with("abc")

    def test_regenerate_keys(self, mock_client, keys_payload):
        """Test regenerate returns the new key pair."""
        keys = regenerate_object_storage_keys(mock_client, "abc")
        assert keys.to_dict() == keys_payload

    def test_list_clusters(self, mock_client):
        """Test listing clusters."""
        clusters, meta = list_clusters(mock_client)
        mock_client.object_storage.list_clusters.assert_called_once_with(None)
        assert clusters[0].id == 2

    def test_list_cluster_tiers(self, mock_client):
        """Test listing tiers for a cluster."""
        tiers = list_cluster_tiers(mock_client, 2)
        mock_client.object_storage.list_cluster_tiers.assert_called_once_with(2)
        assert tiers[0].sales_name == "Standard"

    def test_list_tiers(self, mock_client):
        """Test listing all tiers."""
        tiers = list_tiers(mock_client)
        mock_client.object_storage.list_tiers.assert_called_once_with(None)
        assert len(tiers) == 1


class TestOperationErrors:
    """Test API failures are wrapped with the operation prefix."""

    @pytest.mark.parametrize(
        "method,call,prefix",
        [
            (
                "list",
                lambda c: list_object_storages(c),
                "error retrieving object storage list",
            ),
            (
                "get",
                lambda c: get_object_storage(c, "abc"),
                "error getting object storage info",
            ),
            (
                "create",
                lambda c: create_object_storage(c, cluster_id=2),
                "error creating object storage",
            ),
            (
                "update",
                lambda c: update_object_storage_label(c, "abc", "x"),
                "error updating object storage label",
            ),
            (
                "delete",
                lambda c: delete_object_storage(c, "abc"),
                "unable to delete object storage",
            ),
            (
                "regenerate_keys",
                lambda c: regenerate_object_storage_keys(c, "abc"),
                "unable to regenerate keys for object storage",
            ),
            (
                "list_clusters",
                lambda c: list_clusters(c),
                "error retrieving object storage cluster list",
            ),
            (
                "list_cluster_tiers",
                lambda c: list_cluster_tiers(c, 2),
                "error retrieving object storage cluster tier list",
            ),
            (
                "list_tiers",
                lambda c: list_tiers(c),
                "error retrieving object storage tier list",
            ),
        ],
    )
    def test_wraps_api_error(self, mock_client, method, call, prefix):
        """Test the message carries the prefix and the API's text."""
        error = APIError("GET /object-storage: 401 Invalid API token", status_code=401)
        getattr(mock_client.object_storage, method).side_effect = error

        with pytest.raises(OperationError) as exc_info:
            call(mock_client)

        assert str(exc_info.value) == f"{prefix} : {error}"
        assert exc_info.value.__cause__ is error

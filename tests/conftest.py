"""Test configuration and fixtures for vultr-tools."""

from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from vultr_tools.cli_state import CLIState
from vultr_tools.core.config import settings
from vultr_tools.schemas import (
    Meta,
    ObjectStorage,
    ObjectStorageCluster,
    ObjectStorageTier,
    S3Keys,
)


@pytest.fixture
def object_storage_payload():
    """An object storage as returned by the API."""
    return {
        "id": "cb676a46-66fd-4dfb-b839-443f2e6c0b60",
        "date_created": "2020-10-10T01:56:20+00:00",
        "cluster_id": 2,
        "region": "ewr",
        "location": "New Jersey",
        "status": "active",
        "label": "mybucket",
        "s3_hostname": "ewr1.vultrobjects.com",
        "s3_access_key": "00example11223344",
        "s3_secret_key": "00example1122334455667788990011",
    }


@pytest.fixture
def cluster_payload():
    """An object storage cluster as returned by the API."""
    return {
        "id": 2,
        "region": "ewr",
        "hostname": "ewr1.vultrobjects.com",
        "deploy": "yes",
    }


@pytest.fixture
def tier_payload(cluster_payload):
    """An object storage tier as returned by the API."""
    return {
        "id": 1,
        "sales_name": "Standard",
        "sales_desc": "Standard object storage",
        "price": 6,
        "bw_gb_price": 0.01,
        "disk_gb_price": 0.006,
        "is_default": "yes",
        "ratelimit_ops_secs": 400,
        "ratelimit_ops_bytes": 100000,
        "locations": [cluster_payload],
    }


@pytest.fixture
def keys_payload():
    """A regenerated S3 key pair as returned by the API."""
    return {
        "s3_hostname": "ewr1.vultrobjects.com",
        "s3_access_key": "99newaccess8877",
        "s3_secret_key": "99newsecret887766554433",
    }


@pytest.fixture
def mock_client(object_storage_payload, cluster_payload, tier_payload, keys_payload):
    """Create a stand-in API client with canned object storage responses."""
    client = MagicMock()
    service = client.object_storage
    storage = ObjectStorage.model_validate(object_storage_payload)
    meta = Meta.model_validate({"total": 1, "links": {"next": "", "prev": ""}})
    tier = ObjectStorageTier.model_validate(tier_payload)

    service.list.return_value = ([storage], meta)
    service.get.return_value = storage
    service.create.return_value = storage
    service.update.return_value = None
    service.delete.return_value = None
    service.regenerate_keys.return_value = S3Keys.model_validate(keys_payload)
    service.list_clusters.return_value = (
        [ObjectStorageCluster.model_validate(cluster_payload)],
        meta,
    )
    service.list_tiers.return_value = [tier]
    service.list_cluster_tiers.return_value = [tier]
    return client


@pytest.fixture
def cli_state(mock_client):
    """CLI state with an API key and the stand-in client."""
    return CLIState(api_key="test-api-key", api_client=mock_client)


@pytest.fixture
def runner():
    """Create a CLI runner for invoking commands."""
    return CliRunner()


@pytest.fixture
def no_api_key(monkeypatch):
    """Ensure no API key is picked up from the environment."""
    monkeypatch.setattr(settings, "api_key", None)

"""Tests for API request and response schemas."""

import pytest
from pydantic import ValidationError

from vultr_tools.schemas import (
    ListOptions,
    Meta,
    ObjectStorage,
    ObjectStorageRequest,
    ObjectStorageTier,
)


class TestObjectStorageRequest:
    """Test request body construction."""

    def test_create_payload(self):
        """Test all create fields are sent."""
        request = ObjectStorageRequest(cluster_id=2, tier_id=1, label="mybucket")
        assert request.to_payload() == {"cluster_id": 2, "tier_id": 1, "label": "mybucket"}

    def test_update_payload(self):
        """Test unset fields are omitted."""
        request = ObjectStorageRequest(label="renamed")
        assert request.to_payload() == {"label": "renamed"}

    def test_rejects_unknown_fields(self):
        """Test typos in field names are caught."""
        with pytest.raises(ValidationError):
            ObjectStorageRequest(clusterid=2)


class TestListOptions:
    """Test paging options."""

    def test_params_omit_unset(self):
        """Test only given options become query parameters."""
        assert ListOptions().to_params() == {}
        assert ListOptions(per_page=50).to_params() == {"per_page": 50}
        assert ListOptions(cursor="abc", per_page=10).to_params() == {
            "cursor": "abc",
            "per_page": 10,
        }

    @pytest.mark.parametrize("per_page", [0, 501])
    def test_per_page_bounds(self, per_page):
        """Test per_page must be between 1 and 500."""
        with pytest.raises(ValidationError):
            ListOptions(per_page=per_page)


class TestResponseModels:
    """Test response parsing."""

    def test_object_storage_round_trip(self, object_storage_payload):
        """Test only received fields are dumped."""
        storage = ObjectStorage.model_validate(object_storage_payload)
        assert storage.tier_id is None
        assert storage.to_dict() == object_storage_payload

    def test_object_storage_partial(self):
        """Test missing fields fall back to defaults but are not dumped."""
        storage = ObjectStorage.model_validate({"id": "abc"})
        assert storage.label == ""
        assert storage.to_dict() == {"id": "abc"}

    def test_tier_locations(self, tier_payload):
        """Test nested cluster locations are parsed."""
        tier = ObjectStorageTier.model_validate(tier_payload)
        assert tier.locations[0].hostname == "ewr1.vultrobjects.com"

    def test_meta_defaults(self):
        """Test empty meta has zero total and blank cursors."""
        meta = Meta.model_validate({})
        assert meta.total == 0
        assert meta.links.next == ""
        assert meta.links.prev == ""

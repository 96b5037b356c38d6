"""Request and response schemas for the Vultr object storage API.

Response models accept fields they do not declare and keep track of which
fields the API actually sent, so ``model_dump(exclude_unset=True)`` returns
the payload exactly as it was received.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class APIModel(BaseModel):
    """Base for models parsed from API responses."""

    model_config = ConfigDict(extra="allow")

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as received from the API."""
        return self.model_dump(mode="json", exclude_unset=True)


class S3Keys(APIModel):
    """S3 credential pair for an object storage subscription."""

    s3_hostname: str = ""
    s3_access_key: str = ""
    s3_secret_key: str = ""


class ObjectStorage(APIModel):
    """An object storage subscription."""

    id: str = ""
    date_created: str = ""
    cluster_id: int = 0
    tier_id: Optional[int] = None
    region: str = ""
    location: str = ""
    status: str = ""
    label: str = ""
    s3_hostname: str = ""
    s3_access_key: str = ""
    s3_secret_key: str = ""


class ObjectStorageCluster(APIModel):
    """A cluster where object storage can be deployed."""

    id: int = 0
    region: str = ""
    hostname: str = ""
    deploy: str = ""


class ObjectStorageTier(APIModel):
    """A service tier for object storage."""

    id: int = 0
    sales_name: str = ""
    sales_desc: str = ""
    price: float = 0
    bw_gb_price: float = 0
    disk_gb_price: float = 0
    is_default: str = ""
    ratelimit_ops_secs: int = 0
    ratelimit_ops_bytes: int = 0
    locations: list[ObjectStorageCluster] = Field(default_factory=list)


class Links(APIModel):
    """Cursors for the neighbouring pages."""

    next: str = ""
    prev: str = ""


class Meta(APIModel):
    """Pagination metadata returned with list responses."""

    total: int = 0
    links: Links = Field(default_factory=Links)


class ListOptions(BaseModel):
    """Paging parameters forwarded to list endpoints."""

    model_config = ConfigDict(extra="forbid")

    cursor: Optional[str] = Field(None, description="Cursor for paging")
    per_page: Optional[int] = Field(
        None, ge=1, le=500, description="Number of items requested per page"
    )

    def to_params(self) -> dict[str, Any]:
        """Return query parameters, omitting unset values."""
        return self.model_dump(exclude_none=True)


class ObjectStorageRequest(BaseModel):
    """Body of create and update requests."""

    model_config = ConfigDict(extra="forbid")

    cluster_id: Optional[int] = Field(None, description="Cluster to deploy in")
    tier_id: Optional[int] = Field(None, description="Tier to deploy with")
    label: Optional[str] = Field(None, description="Label for the subscription")

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body, omitting fields that were not given."""
        return self.model_dump(exclude_none=True)

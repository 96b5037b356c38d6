"""Per-invocation state shared by all commands."""

from dataclasses import dataclass
from typing import Optional

from vultr_tools.api import VultrClient
from vultr_tools.core.config import settings
from vultr_tools.core.exceptions import ValidationError

API_KEY_ERROR = (
    "Please export your VULTR API key as an environment variable or pass "
    "--api-key, eg: export VULTR_API_KEY='<api_key_from_vultr_account>'"
)


@dataclass
class CLIState:
    """Options resolved by the root command and the lazily built API client."""

    api_key: Optional[str] = None
    output: str = "text"
    api_client: Optional[VultrClient] = None

    @property
    def client(self) -> VultrClient:
        """Get or create the API client.

        Raises:
            ValidationError: If no API key is configured
        """
        if self.api_client is None:
            if not self.api_key:
                raise ValidationError(API_KEY_ERROR)
            self.api_client = VultrClient(
                api_key=self.api_key,
                base_url=settings.api_url,
                timeout=settings.timeout,
            )
        return self.api_client

    def close(self) -> None:
        """Close the API client if one was created."""
        if self.api_client is not None:
            self.api_client.close()

"""HTTP client for the Vultr v2 REST API.

The client is a thin synchronous wrapper around ``httpx.Client``: it adds the
bearer token, decodes JSON bodies, and turns every failure (non-2xx status or
transport error) into an ``APIError``. It does not retry.
"""

from typing import Any, Optional

import httpx

from vultr_tools import __version__
from vultr_tools.core import get_logger, get_tracer
from vultr_tools.core.config import settings
from vultr_tools.core.exceptions import APIError

from .object_storage import ObjectStorageService

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class VultrClient:
    """Authenticated client for the Vultr API.

    Example:
        with VultrClient(api_key="...") as client:
            storages, meta = client.object_storage.list()
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_key: Vultr API key sent as a bearer token
            base_url: API root, defaults to the configured ``api_url``
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for testing
        """
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers={
                "Authorization": f"Bearer {api_key}",
                "User-Agent": f"vultr-tools/{__version__}",
                "Accept": "application/json",
            },
            transport=transport,
        )
        self.object_storage = ObjectStorageService(self)
        logger.debug("Vultr client initialized", base_url=self.base_url)

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def __enter__(self) -> "VultrClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Returns:
            The decoded body, or None when the response has no content

        Raises:
            APIError: On transport failure or non-2xx status
        """
        with tracer.start_as_current_span("vultr.api.request") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("vultr.api.path", path)
            logger.info("API request", method=method, path=path, params=params)

            try:
                response = self._http.request(method, path, params=params, json=json)
            except httpx.HTTPError as e:
                logger.error(
                    "API request failed", method=method, path=path, error=str(e)
                )
                raise APIError(f"{method} {path}: {e}") from e

            span.set_attribute("http.status_code", response.status_code)
            logger.info(
                "API response",
                method=method,
                path=path,
                status_code=response.status_code,
            )

            if response.is_error:
                raise APIError(
                    f"{method} {path}: {response.status_code} {_error_message(response)}",
                    status_code=response.status_code,
                )

            if response.status_code == 204 or not response.content:
                return None

            try:
                return response.json()
            except ValueError as e:
                raise APIError(
                    f"{method} {path}: invalid JSON in response: {e}",
                    status_code=response.status_code,
                ) from e


def _error_message(response: httpx.Response) -> str:
    """Extract the API's error text from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase

    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.text.strip()

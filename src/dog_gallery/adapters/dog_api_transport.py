"""HTTP transport for The Dog API."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from dog_gallery.domain.outcomes import Failure, FailureKind, RequestOutcome, Success

_logger = logging.getLogger(__name__)

NO_ERROR_MESSAGE = "No error message provided by API."
UNKNOWN_ERROR_MESSAGE = "Unknown error"


class DogApiTransport(Protocol):
    """Interface for sending requests to The Dog API."""

    async def send(
        self,
        path: str,
        method: str = "GET",
        params: dict[str, object] | None = None,
        json: dict[str, object] | None = None,
    ) -> RequestOutcome[object]:
        """Send a request and return a normalized outcome."""


@dataclass
class HttpxDogApiTransport(DogApiTransport):
    """HTTPX-backed Dog API transport."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout: float = 10
    ) -> "HttpxDogApiTransport":
        """Create a transport with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def send(
        self,
        path: str,
        method: str = "GET",
        params: dict[str, object] | None = None,
        json: dict[str, object] | None = None,
    ) -> RequestOutcome[object]:
        """Send a request with the API key attached."""
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.request(
                method,
                url,
                params=params,
                json=json,
                headers={
                    "x-api-key": self.api_key,
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            _logger.warning("Dog API %s %s failed: %s", method, path, exc)
            return Failure(
                FailureKind.TRANSPORT_ERROR,
                f"{type(exc).__name__}: {exc}".strip(),
            )

        if not response.is_success:
            return _api_failure(response)

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            return Success(
                {
                    "success": True,
                    "message": "Operation successful",
                    "status": response.status_code,
                }
            )
        try:
            return Success(response.json())
        except ValueError as exc:
            _logger.warning("Dog API %s %s returned invalid JSON: %s", method, path, exc)
            return Failure(
                FailureKind.TRANSPORT_ERROR,
                f"Invalid JSON in response: {exc}",
                status_code=response.status_code,
            )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _api_failure(response: httpx.Response) -> Failure:
    """Build an API failure from a non-success response."""
    try:
        payload = response.json()
    except ValueError:
        message = NO_ERROR_MESSAGE
    else:
        message = UNKNOWN_ERROR_MESSAGE
        if isinstance(payload, dict) and payload.get("message"):
            message = str(payload["message"])
    _logger.warning(
        "Dog API returned %s for %s: %s",
        response.status_code,
        response.request.url.path,
        message,
    )
    return Failure(
        FailureKind.API_ERROR,
        f"API Error: {response.status_code} {response.reason_phrase} - {message}",
        status_code=response.status_code,
    )

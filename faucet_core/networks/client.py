"""LearnWeb3 faucet API client."""

import os
from typing import Protocol

import httpx
from pydantic import ValidationError

from ..config import DEFAULT_LEARNWEB3_API_URL
from ..exceptions import ServiceError
from ..logging_config import get_logger
from ..models import DripResult, NetworkCatalogEntry

logger = get_logger(__name__)


class INetworkClient(Protocol):
    """Access to the external network information / dispensing service."""

    async def get_networks(self) -> list[NetworkCatalogEntry]:
        """Fetch the full list of supported networks."""
        ...

    async def drip_tokens(
        self, network_id: str, recipient_address: str
    ) -> DripResult:
        """Request test tokens for recipient_address on network_id."""
        ...


class LearnWeb3Client:
    """HTTP client for the LearnWeb3 faucet API."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key or os.getenv("LEARNWEB3_API_KEY")
        if not self._api_key:
            raise ValueError("LEARNWEB3_API_KEY environment variable not set")

        self._base_url = (
            base_url or os.getenv("LEARNWEB3_API_URL") or DEFAULT_LEARNWEB3_API_URL
        ).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Authorization": f"Bearer {self._api_key}"},
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def get_networks(self) -> list[NetworkCatalogEntry]:
        """Fetch the full list of supported networks."""
        try:
            response = await self._client.get("/networks")
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise ServiceError(f"Failed to fetch networks: {e}") from e
        except ValueError as e:
            raise ServiceError(f"Invalid networks response: {e}") from e

        if isinstance(payload, dict):
            payload = payload.get("networks")
        if not isinstance(payload, list):
            raise ServiceError("Invalid networks response: expected a list")

        try:
            networks = [NetworkCatalogEntry.model_validate(item) for item in payload]
        except ValidationError as e:
            raise ServiceError(f"Invalid network entry: {e}") from e

        logger.info("Fetched %s supported networks", len(networks))
        return networks

    async def drip_tokens(
        self, network_id: str, recipient_address: str
    ) -> DripResult:
        """
        Request test tokens for recipient_address on network_id.

        Business failures (unknown network, quota exceeded, ...) come back as
        DripResult(ok=False). Only transport failures raise ServiceError.
        """
        try:
            response = await self._client.post(
                "/drip",
                json={"networkId": network_id, "recipientAddress": recipient_address},
            )
        except httpx.HTTPError as e:
            raise ServiceError(f"Drip request failed: {e}") from e

        status_text = f"{response.status_code} {response.reason_phrase}"
        try:
            body = response.json()
        except ValueError as e:
            if response.is_success:
                raise ServiceError(f"Invalid drip response: {e}") from e
            body = None

        reason = _error_reason(body)
        if isinstance(body, dict) and "ok" in body:
            try:
                result = DripResult.model_validate(body)
            except ValidationError as e:
                raise ServiceError(f"Invalid drip response: {e}") from e
            if not result.ok and not result.error and reason:
                result = DripResult(ok=False, error=reason)
        elif reason is not None:
            # {"error": "..."} without an ok flag, with any status
            result = DripResult(ok=False, error=reason)
        elif response.is_success:
            raise ServiceError("Invalid drip response: missing ok flag")
        else:
            result = DripResult(ok=False, error=status_text)

        if not response.is_success and result.ok:
            result = DripResult(ok=False, error=result.error or status_text)

        logger.info(
            "Drip on %s for %s: ok=%s",
            network_id,
            recipient_address,
            result.ok,
        )
        return result


def _error_reason(body) -> str | None:
    """Service-supplied failure reason from an "error" or "message" field."""
    if not isinstance(body, dict):
        return None
    for key in ("error", "message"):
        value = body.get(key)
        if value:
            return str(value)
    return None

"""Public IP Lookup — asks an external echo service for the server's public address.

Invariants:
    - Returns {"ip": <str>} or raises ExternalServiceError
    - No retries; one request per call, bounded by the configured timeout
"""

import logging

import httpx

from petadoption.core.errors import ExternalServiceError

logger = logging.getLogger(__name__)


class IpLookupClient:
    """Thin httpx wrapper around an ipify-compatible endpoint."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def lookup(self) -> dict:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport,
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                ip = response.json().get("ip")
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.error(
                f"Error fetching IP: {e}", extra={"service": "ip_lookup"},
            )
            raise ExternalServiceError("Error fetching IP", "ip_lookup") from e
        if not ip:
            logger.error(
                "IP lookup response had no ip field",
                extra={"service": "ip_lookup"},
            )
            raise ExternalServiceError("Error fetching IP", "ip_lookup")
        return {"ip": ip}

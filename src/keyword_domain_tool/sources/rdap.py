"""
RDAP lookup source

Queries an RDAP redirector (rdap.org by default) with httpx and renders
the JSON answer as WHOIS-style "key: value" lines, so the same text
classifier handles both sources.

RDAP returns:
    200 = registered (taken)
    404 = not found (likely available)
"""

import logging
from typing import List, Optional

import httpx

from .base import (
    LookupSource, SourceConnectionError, SourceResponseError, SourceTimeoutError
)
from ..config import config

logger = logging.getLogger(__name__)

# RDAP event actions -> WHOIS-style labels
EVENT_LABELS = {
    "registration": "creation date",
    "expiration": "expiration date",
    "last changed": "updated date",
}


def find_registrar(data: dict) -> Optional[str]:
    """Registrar name from the RDAP entities list, falling back to its handle."""
    for entity in data.get("entities", []):
        if "registrar" not in entity.get("roles", []):
            continue
        vcard = entity.get("vcardArray", [])
        if len(vcard) > 1:
            for item in vcard[1]:
                if item and item[0] == "fn":
                    return item[3]
        return entity.get("handle")
    return None


def render_rdap(data: dict, domain: str) -> str:
    """Render an RDAP domain object as WHOIS-style lines."""
    lines: List[str] = [f"Domain Name: {data.get('ldhName', domain).upper()}"]

    registrar = find_registrar(data)
    if registrar:
        lines.append(f"Registrar: {registrar}")

    for event in data.get("events", []):
        label = EVENT_LABELS.get(event.get("eventAction"))
        if label:
            lines.append(f"{label.title()}: {event.get('eventDate', '')}")

    for status in data.get("status", []):
        lines.append(f"Domain Status: {status}")

    return "\n".join(lines)


class RdapSource(LookupSource):
    """
    RDAP source over HTTPS.

    The client is created lazily and reused for every lookup in a run.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize RDAP source.

        Args:
            base_url: RDAP service root (defaults to config, https://rdap.org)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = (base_url or config.lookup.rdap_base_url).rstrip("/")
        self.timeout = timeout or config.lookup.timeout_seconds
        self._transport = transport
        self._client = None

    @property
    def name(self) -> str:
        return "rdap"

    def _get_client(self) -> httpx.AsyncClient:
        """Lazy initialization of HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "User-Agent": config.lookup.user_agent,
                    "Accept": "application/rdap+json, application/json",
                },
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def lookup(self, domain: str) -> str:
        client = self._get_client()
        url = f"{self.base_url}/domain/{domain}"

        try:
            response = await client.get(url)
        except httpx.TimeoutException:
            raise SourceTimeoutError(f"RDAP request for {domain} timed out")
        except httpx.HTTPError as e:
            raise SourceConnectionError(f"RDAP request for {domain} failed: {e}")

        if response.status_code == 404:
            return f"{domain}: not found"
        if response.status_code == 429:
            raise SourceResponseError("Rate limited - try again later")
        if response.status_code != 200:
            raise SourceResponseError(f"HTTP {response.status_code} from {response.url.host}")

        try:
            data = response.json()
        except ValueError as e:
            raise SourceResponseError(f"Invalid RDAP JSON for {domain}: {e}")

        return render_rdap(data, domain)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

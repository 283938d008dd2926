"""
WHOIS lookup source

Plain WHOIS over TCP port 43. The TLD's registry server is discovered
through the IANA root server's "refer:" line and cached per TLD.
"""

import asyncio
import logging
import re
from typing import Dict, Optional

from .base import LookupSource, SourceConnectionError, SourceTimeoutError
from ..config import config

logger = logging.getLogger(__name__)

REFER_PATTERN = re.compile(r"^\s*(?:refer|whois):\s*(\S+)", re.IGNORECASE | re.MULTILINE)


def parse_referral(text: str) -> Optional[str]:
    """Extract the referred WHOIS server from an IANA response, if any."""
    match = REFER_PATTERN.search(text)
    return match.group(1).strip().rstrip(".") if match else None


class WhoisSource(LookupSource):
    """
    WHOIS source using asyncio streams.

    Each lookup asks the root server which registry answers for the
    domain's TLD, then queries that registry for the domain itself.
    """

    def __init__(
        self,
        server: Optional[str] = None,
        port: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize WHOIS source.

        Args:
            server: Root WHOIS server (defaults to config, whois.iana.org)
            port: WHOIS port
            timeout: Seconds allowed for connecting and for reading a response
        """
        self.server = server or config.lookup.whois_server
        self.port = port or config.lookup.whois_port
        self.timeout = timeout or config.lookup.timeout_seconds
        self._referrals: Dict[str, Optional[str]] = {}
        self._referral_locks: Dict[str, asyncio.Lock] = {}

    @property
    def name(self) -> str:
        return "whois"

    async def query(self, server: str, query: str) -> str:
        """
        Send one WHOIS query and read the response until the server closes.

        Raises:
            SourceTimeoutError: Connecting or reading took too long
            SourceConnectionError: The server could not be reached
        """
        try:
            reader, writer = await asyncio.wait_for(
                asyncio.open_connection(server, self.port),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            raise SourceTimeoutError(f"Timed out connecting to {server}")
        except OSError as e:
            raise SourceConnectionError(f"Could not connect to {server}: {e}")

        try:
            writer.write(f"{query}\r\n".encode())
            await writer.drain()
            data = await asyncio.wait_for(reader.read(), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise SourceTimeoutError(f"Timed out reading from {server}")
        except OSError as e:
            raise SourceConnectionError(f"Connection to {server} failed: {e}")
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError as e:
                logger.debug(f"Error closing connection to {server}: {e}")

        return data.decode("utf-8", errors="replace")

    async def referral_for(self, tld: str) -> Optional[str]:
        """
        Registry WHOIS server for a TLD, from the root server.

        Concurrent callers for the same TLD wait on one root query. A failed
        root query is not cached, so the next caller asks again.
        """
        lock = self._referral_locks.setdefault(tld, asyncio.Lock())
        async with lock:
            if tld not in self._referrals:
                text = await self.query(self.server, tld)
                self._referrals[tld] = parse_referral(text)
                logger.debug(f"WHOIS referral for .{tld}: {self._referrals[tld]}")
        return self._referrals[tld]

    async def lookup(self, domain: str) -> str:
        tld = domain.rsplit(".", 1)[-1].lower()
        server = await self.referral_for(tld) or self.server
        return await self.query(server, domain)

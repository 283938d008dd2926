"""
Mock source for testing

Returns configurable responses without touching the network.
"""

import asyncio
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set

from .base import LookupSource, SourceError


AVAILABLE_RESPONSE = "No match for domain"
TAKEN_RESPONSE = "Domain Name: EXAMPLE.COM\nRegistrar: Mock Registrar, Inc.\n"


@dataclass
class MockSource(LookupSource):
    """
    Mock source for testing.

    Responses come from, in order: fail_domains, responses,
    response_generator, then default_response.
    """

    _name: str = "mock"
    responses: Dict[str, str] = field(default_factory=dict)
    default_response: str = TAKEN_RESPONSE
    response_generator: Optional[Callable[[str], str]] = None
    fail_domains: Set[str] = field(default_factory=set)
    fail_rate: float = 0.0  # Probability of raising an error
    delay_seconds: float = 0.0
    calls: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self._name

    async def lookup(self, domain: str) -> str:
        self.calls.append(domain)

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        if domain in self.fail_domains:
            raise SourceError(f"Simulated lookup failure for {domain}")
        if self.fail_rate > 0 and random.random() < self.fail_rate:
            raise SourceError("Simulated mock source failure")

        if domain in self.responses:
            return self.responses[domain]
        if self.response_generator is not None:
            return self.response_generator(domain)
        return self.default_response


def create_available_mock(available: Set[str]) -> MockSource:
    """Mock source that reports only the given domains as available."""
    return MockSource(
        responses={domain: AVAILABLE_RESPONSE for domain in available},
        default_response=TAKEN_RESPONSE,
    )

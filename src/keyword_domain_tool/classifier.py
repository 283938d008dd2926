"""
Availability classification

Maps raw directory text to a verdict with substring heuristics. This is a
best-effort guess, never a registration guarantee: responses that match
neither indicator set are treated as taken.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Checked first; any match means the name looks unregistered
AVAILABLE_INDICATORS = (
    "no match",
    "not found",
    "no entries found",
    "no data found",
    "available for registration",
    "status: free",
)

TAKEN_INDICATORS = (
    "domain name:",
    "registrar:",
    "creation date:",
    "expiration date:",
    "updated date:",
)


class Availability(str, Enum):
    """Verdict for a successfully looked-up domain."""
    AVAILABLE = "available"
    TAKEN = "taken"


@dataclass
class LookupResult:
    """Outcome of looking up one domain name."""
    domain: str
    availability: Optional[Availability] = None
    error: Optional[str] = None
    source: str = ""
    duration_seconds: float = 0.0

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def available(self) -> bool:
        return not self.failed and self.availability == Availability.AVAILABLE

    @property
    def taken(self) -> bool:
        return not self.failed and self.availability == Availability.TAKEN

    def to_dict(self) -> dict:
        return {
            "domain": self.domain,
            "availability": self.availability.value if self.availability else None,
            "error": self.error,
            "source": self.source,
            "duration_seconds": round(self.duration_seconds, 3),
        }


def classify(raw_text: str) -> Availability:
    """
    Classify raw lookup text.

    Args:
        raw_text: Response text from the lookup source

    Returns:
        AVAILABLE if an available indicator matches, otherwise TAKEN
        (including unrecognised response formats)
    """
    text = raw_text.lower()

    if any(indicator in text for indicator in AVAILABLE_INDICATORS):
        return Availability.AVAILABLE

    if any(indicator in text for indicator in TAKEN_INDICATORS):
        return Availability.TAKEN

    # Unknown format: assume taken rather than claim availability
    return Availability.TAKEN


def classify_lookup(
    domain: str,
    raw_text: Optional[str] = None,
    error: Optional[BaseException] = None,
    source: str = "",
    started_at: Optional[float] = None,
) -> LookupResult:
    """
    Build the result for one lookup.

    A failed lookup carries the failure description and no verdict.
    """
    duration = time.monotonic() - started_at if started_at is not None else 0.0

    if error is not None:
        return LookupResult(
            domain=domain,
            error=str(error) or error.__class__.__name__,
            source=source,
            duration_seconds=duration,
        )

    return LookupResult(
        domain=domain,
        availability=classify(raw_text or ""),
        source=source,
        duration_seconds=duration,
    )

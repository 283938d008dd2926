"""
Lookup sources for keyword-domain-tool

Supports multiple directory protocols with a common interface.
Sources: WHOIS (port 43), RDAP (HTTPS), blocking functions, mock
"""

from .base import (
    LookupSource, FunctionSource, SourceError, SourceTimeoutError,
    SourceConnectionError, SourceResponseError
)
from .whois import WhoisSource
from .rdap import RdapSource
from .mock import MockSource, create_available_mock

__all__ = [
    # Base classes and errors
    "LookupSource",
    "FunctionSource",
    "SourceError",
    "SourceTimeoutError",
    "SourceConnectionError",
    "SourceResponseError",
    # Sources
    "WhoisSource",
    "RdapSource",
    "MockSource",
    "create_available_mock",
]


def get_source(name: str, **kwargs) -> LookupSource:
    """
    Factory function to get a source by name.

    Args:
        name: Source name ('whois', 'rdap', 'mock')
        **kwargs: Source-specific options

    Returns:
        Configured LookupSource instance

    Raises:
        ValueError: If source name is unknown
    """
    sources = {
        "whois": WhoisSource,
        "rdap": RdapSource,
        "mock": MockSource,
    }

    if name not in sources:
        raise ValueError(f"Unknown source: {name}. Valid options: {list(sources.keys())}")

    return sources[name](**kwargs)

"""
keyword-domain-tool configuration

All magic numbers, lookup settings, and generator defaults live here.
Environment variables override defaults for deployment flexibility.
"""

import os
from dataclasses import dataclass, field
from typing import List, Literal, Optional


class InputError(ValueError):
    """Keyword or worker input that cannot be used for a search."""
    pass


@dataclass
class LookupConfig:
    """How we talk to the directory servers"""
    workers: int = int(os.getenv("DOMAIN_WORKERS", "10"))
    timeout_seconds: float = float(os.getenv("LOOKUP_TIMEOUT", "10.0"))
    source: Literal["whois", "rdap"] = os.getenv("LOOKUP_SOURCE", "whois")
    whois_server: str = os.getenv("WHOIS_SERVER", "whois.iana.org")
    whois_port: int = int(os.getenv("WHOIS_PORT", "43"))
    rdap_base_url: str = os.getenv("RDAP_BASE_URL", "https://rdap.org")
    user_agent: str = os.getenv("LOOKUP_USER_AGENT", "keyword-domain-tool/0.1")


@dataclass
class GeneratorConfig:
    """Defaults for candidate generation"""
    combinations: int = int(os.getenv("COMBINATIONS", "2"))
    tlds: str = os.getenv("DEFAULT_TLDS", "com")


@dataclass
class Config:
    """Master config — import this"""
    lookup: LookupConfig = field(default_factory=LookupConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    @classmethod
    def fast_mode(cls) -> "Config":
        """For development/testing — short timeouts, more workers"""
        cfg = cls()
        cfg.lookup.timeout_seconds = 2.0
        cfg.lookup.workers = 25
        return cfg


@dataclass
class SearchConfig:
    """
    Everything a single run needs, passed explicitly into the generator
    and dispatcher.

    keyword_sets holds one list for combination mode, or two or more
    lists for cross-product mode.
    """
    keyword_sets: List[List[str]] = field(default_factory=list)
    combinations: int = 2
    tlds: List[str] = field(default_factory=lambda: ["com"])
    separator: str = ""
    workers: int = 10
    source: str = "whois"
    timeout_seconds: Optional[float] = None

    @property
    def cross_product_mode(self) -> bool:
        """Multiple keyword lists are combined one-from-each."""
        return len(self.keyword_sets) > 1

    def validate(self) -> None:
        """
        Reject configurations that must stop the run before any lookup.

        An out-of-range combination size or an empty TLD list is not
        rejected here; either simply produces no domains.

        Raises:
            InputError: On missing keywords, empty keyword lists or a
                worker count below one
        """
        if not self.keyword_sets:
            raise InputError("No keywords provided")
        for keywords in self.keyword_sets:
            if not keywords:
                raise InputError("Keyword lists must not be empty")
        if self.workers < 1:
            raise InputError(f"Worker count must be at least 1, got {self.workers}")


# Singleton
config = Config()

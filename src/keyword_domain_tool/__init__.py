"""
keyword-domain-tool: concurrent domain availability checks for keyword combinations.

Builds candidate names from keyword combinations or cross products and
checks them against WHOIS or RDAP with a pool of workers.
"""

__version__ = "0.1.0"

from .classifier import Availability, LookupResult, classify
from .config import config, Config, SearchConfig, InputError
from .dispatcher import check_domains, dispatch
from .generator import (
    generate_candidates,
    generate_combinations,
    cross_product,
    build_domain_names,
    generate_domains,
)
from .reporter import Report, build_report, format_report

__all__ = [
    # Generation
    "generate_candidates",
    "generate_combinations",
    "cross_product",
    "build_domain_names",
    "generate_domains",
    # Lookup
    "check_domains",
    "dispatch",
    "classify",
    "Availability",
    "LookupResult",
    # Reporting
    "Report",
    "build_report",
    "format_report",
    # Config
    "config",
    "Config",
    "SearchConfig",
    "InputError",
]

"""
Candidate generation

Turns keyword input into domain names:
1. Parse comma / semicolon separated keyword input into keyword sets
2. Pick n keywords from a single set (combinations), or one keyword from
   each of several sets (cross product)
3. Join each candidate with the separator and append every TLD

Output order is deterministic: lexicographic over source indices, then
TLD order.
"""

import logging
from itertools import combinations, product
from typing import List, Sequence, Tuple

from .config import SearchConfig

logger = logging.getLogger(__name__)

Candidate = Tuple[str, ...]


def parse_keywords(value: str) -> List[str]:
    """
    Split a comma-separated keyword string.

    Whitespace around each keyword is trimmed and empty entries are dropped.
    """
    return [keyword.strip() for keyword in value.split(",") if keyword.strip()]


def parse_keyword_lists(value: str) -> List[List[str]]:
    """Split a semicolon-separated string of comma lists, dropping empty lists."""
    lists = [parse_keywords(part) for part in value.split(";")]
    return [keywords for keywords in lists if keywords]


def parse_tlds(value: str) -> List[str]:
    """Split a comma-separated TLD string, stripping any leading dot."""
    return [tld for tld in (normalize_tld(t) for t in parse_keywords(value)) if tld]


def normalize_tld(tld: str) -> str:
    return tld.strip().lstrip(".")


def generate_combinations(keywords: Sequence[str], n: int) -> List[Candidate]:
    """
    All n-keyword subsets of a single keyword set.

    Keywords keep their original relative order inside each candidate and
    no keyword is repeated. Sizes outside [1, len(keywords)] yield nothing.

    Args:
        keywords: Source keyword set
        n: Keywords per candidate

    Returns:
        C(len(keywords), n) candidates, lexicographic over source indices
    """
    if n < 1 or n > len(keywords):
        logger.debug(f"Combination size {n} out of range for {len(keywords)} keywords")
        return []
    return list(combinations(keywords, n))


def cross_product(keyword_sets: Sequence[Sequence[str]]) -> List[Candidate]:
    """One keyword from each set, in set order."""
    if not keyword_sets:
        return []
    return list(product(*keyword_sets))


def generate_candidates(keyword_sets: Sequence[Sequence[str]], n: int) -> List[Candidate]:
    """
    Generate candidates in the mode implied by the number of keyword sets.

    A single set produces n-keyword combinations; two or more sets produce
    their cross product and n is ignored.
    """
    if not keyword_sets:
        return []
    if len(keyword_sets) == 1:
        return generate_combinations(keyword_sets[0], n)
    return cross_product(keyword_sets)


def build_domain_names(candidate: Sequence[str], separator: str, tlds: Sequence[str]) -> List[str]:
    """
    Expand one candidate into a domain name per TLD.

    >>> build_domain_names(("one", "two"), "-", ["com", ".net"])
    ['one-two.com', 'one-two.net']
    """
    name = separator.join(candidate)
    return [f"{name}.{normalize_tld(tld)}" for tld in tlds]


def generate_domains(search: SearchConfig) -> List[str]:
    """All domain names to check for a search, candidate-major then TLD order."""
    candidates = generate_candidates(search.keyword_sets, search.combinations)

    domains = []
    for candidate in candidates:
        domains.extend(build_domain_names(candidate, search.separator, search.tlds))

    mode = "cross product" if search.cross_product_mode else f"{search.combinations}-combinations"
    logger.info(f"Generated {len(candidates)} candidates ({mode}), {len(domains)} domains")
    return domains

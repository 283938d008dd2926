"""
Command-line interface for keyword-domain-tool

Generates domain names from keyword combinations, checks them
concurrently and prints available / taken / error sections.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .classifier import LookupResult
from .config import InputError, SearchConfig, config
from .dispatcher import check_domains
from .generator import generate_domains, parse_keyword_lists, parse_keywords, parse_tlds
from .reporter import build_report, print_report

logger = logging.getLogger(__name__)

EXAMPLES = """\
Examples:
  # Check 2-word combinations from a single list
  keyword-domain-tool --keywords=super,fast,cloud

  # Check combinations between two lists
  keyword-domain-tool --lists="super,fast;cloud,service"

  # Use dash separator and check multiple TLDs
  keyword-domain-tool --keywords=my,app --dash --tlds=com,net,org

  # Check 3-word combinations
  keyword-domain-tool --keywords=get,my,app,now --combinations=3
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyword-domain-tool",
        description="Domain Checker - Check domain availability for keyword combinations",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--keywords",
        default="",
        help="Comma-separated keywords (e.g., 'one,two,three')"
    )
    parser.add_argument(
        "--lists",
        default="",
        help="Semicolon-separated lists of keywords (e.g., 'one,two;three,four')"
    )
    parser.add_argument(
        "--combinations",
        type=int,
        default=config.generator.combinations,
        help="Number of keywords to combine (ignored if --lists provided)"
    )
    parser.add_argument(
        "--tlds",
        default=config.generator.tlds,
        help="Comma-separated TLDs to check (e.g., 'com,net,org')"
    )
    parser.add_argument(
        "--dash",
        action="store_true",
        help="Use dash separator (e.g., 'one-two' instead of 'onetwo')"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=config.lookup.workers,
        help=f"Number of concurrent workers (default: {config.lookup.workers})"
    )
    parser.add_argument(
        "--source",
        choices=["whois", "rdap"],
        default=config.lookup.source,
        help=f"Lookup protocol (default: {config.lookup.source})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.lookup.timeout_seconds,
        help=f"Seconds allowed per lookup request (default: {config.lookup.timeout_seconds})"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )
    return parser


def search_config_from_args(args: argparse.Namespace) -> SearchConfig:
    """
    Build the run configuration from parsed arguments.

    Raises:
        InputError: On missing or conflicting keyword input
    """
    if not args.keywords and not args.lists:
        raise InputError("Either --keywords or --lists must be provided")
    if args.keywords and args.lists:
        raise InputError("Cannot use both --keywords and --lists at the same time")

    if args.lists:
        keyword_sets = parse_keyword_lists(args.lists)
    else:
        keyword_sets = [parse_keywords(args.keywords)]

    search = SearchConfig(
        keyword_sets=keyword_sets,
        combinations=args.combinations,
        tlds=parse_tlds(args.tlds),
        separator="-" if args.dash else "",
        workers=args.workers,
        source=args.source,
        timeout_seconds=args.timeout,
    )
    search.validate()
    return search


def log_progress(result: LookupResult):
    """Per-result progress line, shown with --verbose."""
    if result.failed:
        logger.info(f"{result.domain}: error ({result.error})")
    else:
        logger.info(f"{result.domain}: {result.availability.value}")


def configure_logging(verbose: bool = False, quiet: bool = False):
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        search = search_config_from_args(args)
    except InputError as e:
        print(f"Error: {e}\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    logger.debug(f"Search config: {search}")
    domains = generate_domains(search)
    if not domains:
        print("No domains to check")
        return 0

    if not args.json:
        print(f"Checking {len(domains)} domains...\n")

    results = check_domains(
        domains,
        source=search.source,
        workers=search.workers,
        timeout=search.timeout_seconds,
        on_result=log_progress,
    )

    print_report(build_report(results), as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Result reporting

Partitions lookup results into available, taken and failed buckets and
renders them for the terminal or as JSON.
"""

import json
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, TextIO


@dataclass
class Report:
    """Lookup results split into three disjoint buckets, each sorted by domain."""
    available: List = field(default_factory=list)
    taken: List = field(default_factory=list)
    failed: List = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.available) + len(self.taken) + len(self.failed)

    @property
    def counts(self) -> dict:
        return {
            "available": len(self.available),
            "taken": len(self.taken),
            "failed": len(self.failed),
            "total": self.total,
        }

    def to_dict(self) -> dict:
        return {
            "available": [r.domain for r in self.available],
            "taken": [r.domain for r in self.taken],
            "failed": [{"domain": r.domain, "error": r.error} for r in self.failed],
            "summary": self.counts,
        }


def build_report(results: Iterable) -> Report:
    """Partition results; failures win over any verdict."""
    report = Report()

    for result in results:
        if result.failed:
            report.failed.append(result)
        elif result.available:
            report.available.append(result)
        else:
            report.taken.append(result)

    for bucket in (report.available, report.taken, report.failed):
        bucket.sort(key=lambda r: r.domain)

    return report


def format_report(report: Report) -> str:
    """Render the three sections and the summary line."""
    lines: List[str] = []

    if report.available:
        lines.append(f"✓ AVAILABLE ({len(report.available)}):")
        lines.extend(f"  {r.domain}" for r in report.available)
        lines.append("")

    if report.taken:
        lines.append(f"✗ TAKEN ({len(report.taken)}):")
        lines.extend(f"  {r.domain}" for r in report.taken)
        lines.append("")

    if report.failed:
        lines.append(f"⚠ ERRORS ({len(report.failed)}):")
        lines.extend(f"  {r.domain}: {r.error}" for r in report.failed)
        lines.append("")

    lines.append(
        f"Summary: {len(report.available)} available, {len(report.taken)} taken, "
        f"{len(report.failed)} errors (total: {report.total})"
    )
    return "\n".join(lines)


def format_report_json(report: Report) -> str:
    return json.dumps(report.to_dict(), indent=2)


def print_report(report: Report, as_json: bool = False, stream: TextIO = None):
    """Print a report to stdout (or the given stream)."""
    output = format_report_json(report) if as_json else format_report(report)
    print(output, file=stream or sys.stdout)

"""Machine-readable report for CI."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import asdict, dataclass

from thin.rules.base import Finding, Severity


@dataclass(frozen=True)
class Counts:
    total: int
    errors: int
    warnings: int
    info: int


def counts(findings: Sequence[Finding]) -> Counts:
    """Tally findings by severity."""
    tally = Counter(f.severity for f in findings)
    return Counts(
        total=len(findings),
        errors=tally[Severity.ERROR],
        warnings=tally[Severity.WARNING],
        info=tally[Severity.INFO],
    )


def file_report(path: str, findings: Sequence[Finding]) -> dict:
    """Build the JSON-ready report for one file."""
    return {
        "path": path,
        "findings": [f.to_dict() for f in findings],
        "counts": asdict(counts(findings)),
    }
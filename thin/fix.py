"""Safe auto-replacement of findings that carry a fix."""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter

from thin.rules.base import Finding


def apply_fixes(src: str, findings: Iterable[Finding]) -> tuple[str, int]:
    """Apply non-overlapping fixes; return the patched text and the count applied."""
    fixes = sorted((f for f in findings if f.fix is not None), key=attrgetter("start"))
    parts: list[str] = []
    cursor = 0
    applied = 0
    for finding in fixes:
        if finding.start < cursor:
            continue
        parts.append(src[cursor:finding.start])
        parts.append(case_match(src[finding.start:finding.end], finding.fix))
        cursor = finding.end
        applied += 1
    parts.append(src[cursor:])
    return "".join(parts), applied


def case_match(original: str, replacement: str) -> str:
    """Capitalise ``replacement`` when ``original`` starts with an upper-case letter."""
    if original and original[0].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement
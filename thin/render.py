"""Human-readable, optionally coloured, inline output."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from thin.rules.base import Finding, Severity

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_DIM = "\x1b[2m"
_GREEN = "\x1b[32m"
_SEVERITY_STYLE = {
    Severity.ERROR: _BOLD + "\x1b[31m",
    Severity.WARNING: _BOLD + "\x1b[33m",
    Severity.INFO: _BOLD + "\x1b[34m",
}


def render(path: str, src: str, findings: Sequence[Finding], use_color: bool) -> str:
    """Render the findings of one file as text."""

    def paint(style: str, text: str) -> str:
        return f"{style}{text}{_RESET}" if use_color else text

    out = [paint(_BOLD, path) + "\n"]
    if not findings:
        out.append(f"  {paint(_GREEN, 'clean.')}\n")
        return "".join(out)

    lines = src.split("\n")
    for f in findings:
        index = max(f.line - 1, 0)
        line = lines[index] if index < len(lines) else ""
        col = max(f.col - 1, 0)
        span = max(f.end - f.start, 1)
        style = _SEVERITY_STYLE[f.severity]
        gutter = f"{f.line:>4}"
        pad = " " * col
        underline = "~" * min(span, max(len(line) - col, 1))
        out.append(f"  {paint(_DIM, gutter)} │ {line}\n")
        out.append(f"       │ {pad}{paint(style, underline)}\n")
        out.append(
            f"       │ {pad}{paint(style, f.rule_id)} · {f.message} "
            f"{paint(_DIM, f'[{f.severity.value}]')}\n"
        )

    tally = Counter(f.severity for f in findings)
    out.append(
        f"  {len(findings)} issues · {tally[Severity.ERROR]} errors · "
        f"{tally[Severity.WARNING]} warnings · {tally[Severity.INFO]} info\n"
    )
    return "".join(out)
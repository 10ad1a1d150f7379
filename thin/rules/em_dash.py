"""Em-dash cluster detector: three or more em-dashes in one paragraph."""

from __future__ import annotations

from collections.abc import Sequence

from thin.rules.base import Category, Finding, Rule, Severity
from thin.tokenize import Paragraph

_EM_DASH = "\u2014"

_MESSAGES = (
    "three em-dashes. your keyboard has commas.",
    "em-dash cluster. pick a lane.",
    "three em-dashes in one breath. breathe.",
)


class EmDashCluster(Rule):
    """Flags paragraphs holding three or more em-dashes."""

    id = "thin.em-dash.cluster"
    name = "em-dash cluster"
    category = Category.PUNCTUATION
    default_severity = Severity.ERROR
    description = "three or more em-dashes in a single paragraph. strongest ai-prose signal."
    examples = (
        "our product — fast, reliable — built with care — and yours.",
        "our product is fast and reliable. built with care. yours.",
    )

    def scan(self, src: str, paragraphs: Sequence[Paragraph]) -> list[Finding]:
        out: list[Finding] = []
        for para in paragraphs:
            positions = [i for i, ch in enumerate(para.text) if ch == _EM_DASH]
            if len(positions) < 3:
                continue
            start = para.start + positions[0]
            end = para.start + positions[-1] + len(_EM_DASH)
            out.append(self._finding(src, start, end, src[start:end], _MESSAGES))
        return out
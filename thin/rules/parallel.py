"""Parallel sophistry: "not x. it's y." and its variants."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from thin.rules.base import Category, Finding, Rule, Severity
from thin.tokenize import Paragraph, sentences

_MESSAGES_NOT_ITS = (
    "this phrasing dominates llm training. break it.",
    "parallel sophistry. say one thing, mean it.",
    "pick one: not x, or it's y. both = generated-feeling.",
)

_MESSAGES_NOT_JUST = (
    "'not just x, but y.' the oldest trick. cut.",
    "not-just-but is ad-copy. pick one clause.",
)

_MESSAGES_ITS_NOT = (
    "'it's not x, it's y.' recognizable ai cadence.",
    "it's-not-it's. rewrite as one claim.",
)

_NEGATIONS = (" not ", "isn't", "aren't", "is not")


class NotItsIs(Rule):
    """Flags a negating sentence directly followed by one opening with "it's"."""

    id = "thin.parallel.not-its"
    name = "not x. it's y."
    category = Category.PARALLEL
    default_severity = Severity.ERROR
    description = "the 'not x. it's y.' pattern. overrepresented in ai prose."
    examples = (
        "this isn't a database. it's a memory.",
        "a small in-process key-value store.",
    )

    def scan(self, src: str, paragraphs: Sequence[Paragraph]) -> list[Finding]:
        out: list[Finding] = []
        for para in paragraphs:
            for first, second in pairwise(sentences(para.text, para.start)):
                a = first.text.lower()
                b = second.text.lower().lstrip()
                if any(neg in a for neg in _NEGATIONS) and b.startswith(("it's ", "its ")):
                    start, end = first.start, second.end
                    out.append(
                        self._finding(src, start, end, src[start:end], _MESSAGES_NOT_ITS)
                    )
        return out


class NotJustBut(Rule):
    """Flags sentences with "not just" followed later by "but"."""

    id = "thin.parallel.not-just-but"
    name = "not just x, but y."
    category = Category.PARALLEL
    default_severity = Severity.WARNING
    description = "the 'not just x, but y' pattern."
    examples = ("not just fast, but fast enough.", "fast enough.")

    def scan(self, src: str, paragraphs: Sequence[Paragraph]) -> list[Finding]:
        out: list[Finding] = []
        for para in paragraphs:
            for sent in sentences(para.text, para.start):
                lower = sent.text.lower()
                pos = lower.find("not just ")
                if pos != -1 and lower.find("but ", pos) != -1:
                    out.append(
                        self._finding(
                            src,
                            sent.start,
                            sent.end,
                            src[sent.start:sent.end],
                            _MESSAGES_NOT_JUST,
                        )
                    )
        return out


class ItsNotIts(Rule):
    """Flags sentences with "it's not" followed later by "it's"."""

    id = "thin.parallel.its-not-its"
    name = "it's not x, it's y."
    category = Category.PARALLEL
    default_severity = Severity.ERROR
    description = "the 'it's not x, it's y' pattern."
    examples = ("it's not a toy, it's a tool.", "it's a tool.")

    def scan(self, src: str, paragraphs: Sequence[Paragraph]) -> list[Finding]:
        out: list[Finding] = []
        marker = "it's not "
        for para in paragraphs:
            for sent in sentences(para.text, para.start):
                lower = sent.text.lower()
                pos = lower.find(marker)
                if pos != -1 and "it's " in lower[pos + len(marker):]:
                    out.append(
                        self._finding(
                            src,
                            sent.start,
                            sent.end,
                            src[sent.start:sent.end],
                            _MESSAGES_ITS_NOT,
                        )
                    )
        return out


def rules() -> list[Rule]:
    """All parallel-pattern rules, in registry order."""
    return [NotItsIs(), NotJustBut(), ItsNotIts()]
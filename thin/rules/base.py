"""Rule interface, findings and shared matching helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from thin.tokenize import Paragraph


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Category(StrEnum):
    FILLER = "filler"
    AI_PHRASE = "ai-phrase"
    PASSIVE = "passive"
    LENGTH = "length"
    REDUNDANCY = "redundancy"
    CORPORATE = "corporate"
    PUNCTUATION = "punctuation"
    EMPTY_ADJECTIVE = "empty-adjective"
    PARALLEL = "parallel"


@dataclass
class Finding:
    """One flagged span of the source."""

    rule_id: str
    category: Category
    severity: Severity
    message: str
    start: int
    end: int
    line: int
    col: int
    snippet: str
    fix: str | None = None

    def to_dict(self) -> dict:
        """Return a JSON-ready mapping."""
        return {
            "rule_id": self.rule_id,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "start": self.start,
            "end": self.end,
            "line": self.line,
            "col": self.col,
            "snippet": self.snippet,
            "fix": self.fix,
        }


class Rule(ABC):
    """A single detector."""

    id: str
    name: str
    category: Category
    default_severity: Severity
    description: str
    examples: tuple[str, str]

    @abstractmethod
    def scan(self, src: str, paragraphs: Sequence[Paragraph]) -> list[Finding]:
        """Scan the whole source; ``paragraphs`` are precomputed."""

    def _finding(
        self,
        src: str,
        start: int,
        end: int,
        snippet: str,
        messages: Sequence[str],
        fix: str | None = None,
    ) -> Finding:
        line, col = line_col(src, start)
        return Finding(
            rule_id=self.id,
            category=self.category,
            severity=self.default_severity,
            message=rotate(messages, snippet),
            start=start,
            end=end,
            line=line,
            col=col,
            snippet=snippet,
            fix=fix,
        )


@dataclass(frozen=True)
class PhraseRule(Rule):
    """Flags every word-bounded, case-insensitive occurrence of a phrase."""

    id: str
    phrase: str
    category: Category
    default_severity: Severity
    description: str
    messages: tuple[str, ...]
    examples: tuple[str, str]
    fix: str | None = None

    @property
    def name(self) -> str:
        return self.phrase

    def scan(self, src: str, paragraphs: Sequence[Paragraph]) -> list[Finding]:
        return [
            self._finding(src, start, end, src[start:end], self.messages, self.fix)
            for start, end in find_phrase(src, self.phrase)
        ]


def rotate(messages: Sequence[str], key: str) -> str:
    """Pick a message by an FNV-1a hash of ``key`` so repeated flags vary."""
    if not messages:
        return ""
    h = 2166136261
    for byte in key.encode("utf-8"):
        h ^= byte
        h = (h * 16777619) & 0xFFFFFFFF
    return messages[h % len(messages)]


def line_col(src: str, offset: int) -> tuple[int, int]:
    """Return the 1-indexed (line, column) of ``offset`` in ``src``."""
    offset = min(max(offset, 0), len(src))
    line = src.count("\n", 0, offset) + 1
    line_start = src.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def _is_word_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch in "_'-"


def _fold(text: str) -> str:
    # lowercase char by char, keeping every char's position intact
    return "".join(
        lowered if len(lowered := ch.lower()) == 1 else ch for ch in text
    )


def find_phrase(haystack: str, needle: str) -> list[tuple[int, int]]:
    """Case-insensitive, non-overlapping, word-bounded matches of ``needle``."""
    if not needle:
        return []
    hay = _fold(haystack)
    pattern = needle.lower()
    size = len(pattern)
    out: list[tuple[int, int]] = []
    pos = hay.find(pattern)
    while pos != -1:
        end = pos + size
        before_ok = pos == 0 or not _is_word_char(hay[pos - 1])
        after_ok = end == len(hay) or not _is_word_char(hay[end])
        if before_ok and after_ok:
            out.append((pos, end))
            pos = hay.find(pattern, end)
        else:
            pos = hay.find(pattern, pos + 1)
    return out
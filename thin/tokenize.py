"""Paragraph and sentence splitting. Plain heuristics, no NLP."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LEADING_NEWLINES = re.compile(r"[\r\n]*")
# a newline followed by a whitespace-only line (or the end of input) closes a paragraph
_PARAGRAPH_BREAK = re.compile(r"\n[ \t\r]*(?=\n|\Z)")
_SENTENCE_END = re.compile(r"[.!?]+(?=[ \n\t]|\Z)")
_SENTENCE_GAP = re.compile(r"[ \n\t]*")


@dataclass(frozen=True)
class Paragraph:
    """A paragraph with its offsets in the source."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Sentence:
    """A sentence with its offsets in the source."""

    text: str
    start: int
    end: int


def paragraphs(src: str) -> list[Paragraph]:
    """Split ``src`` into paragraphs separated by blank lines."""
    out: list[Paragraph] = []
    pos = 0
    size = len(src)
    while True:
        pos = _LEADING_NEWLINES.match(src, pos).end()
        if pos >= size:
            break
        brk = _PARAGRAPH_BREAK.search(src, pos)
        end = brk.start() if brk else size
        text = src[pos:end]
        if text.strip():
            out.append(Paragraph(text, pos, end))
        pos = end
    return out


def sentences(text: str, paragraph_start: int) -> list[Sentence]:
    """Split a paragraph into sentences on ``.``, ``!`` or ``?`` followed by whitespace or the end.

    ``paragraph_start`` is the offset of ``text`` in the full source.
    """
    out: list[Sentence] = []
    start = 0
    for match in _SENTENCE_END.finditer(text):
        end = match.end()
        if end <= start:
            continue
        piece = text[start:end]
        if piece.strip():
            out.append(Sentence(piece, paragraph_start + start, paragraph_start + end))
        start = _SENTENCE_GAP.match(text, end).end()
    if start < len(text):
        piece = text[start:]
        if piece.strip():
            out.append(Sentence(piece, paragraph_start + start, paragraph_start + len(text)))
    return out


def word_count(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())
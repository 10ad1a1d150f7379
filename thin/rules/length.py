"""Long-sentence detectors: 35 to 50 words is info, more than 50 a warning."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from thin.rules.base import Category, Finding, Rule, Severity
from thin.tokenize import Paragraph, Sentence, sentences, word_count

_MESSAGES = (
    "this sentence needs a full stop or three.",
    "long sentence. break it.",
    "one thought per sentence.",
)

_SNIPPET_CHARS = 60


def _all_sentences(paragraphs: Sequence[Paragraph]) -> Iterator[Sentence]:
    for para in paragraphs:
        yield from sentences(para.text, para.start)


class _LongSentence(Rule):
    category = Category.LENGTH

    def _flags(self, words: int) -> bool:
        raise NotImplementedError

    def scan(self, src: str, paragraphs: Sequence[Paragraph]) -> list[Finding]:
        return [
            self._finding(
                src, sent.start, sent.end, sent.text[:_SNIPPET_CHARS], _MESSAGES
            )
            for sent in _all_sentences(paragraphs)
            if self._flags(word_count(sent.text))
        ]


class LongSentenceInfo(_LongSentence):
    """Flags sentences of 35 to 50 words."""

    id = "thin.length.sentence-35"
    name = "long sentence (35+ words)"
    default_severity = Severity.INFO
    description = "a sentence over 35 words. hard to follow."
    examples = (
        "one long sentence that keeps going and going without pause covering multiple "
        "ideas in a single breath that the reader can barely follow because there is no break.",
        "shorter. sentences. each one an idea.",
    )

    def _flags(self, words: int) -> bool:
        return 35 <= words <= 50

    def scan(self, src: str, paragraphs: Sequence[Paragraph]) -> list[Finding]:
        return super().scan(src, paragraphs)


class LongSentenceWarn(_LongSentence):
    """Flags sentences of more than 50 words."""

    id = "thin.length.sentence-50"
    name = "very long sentence (50+ words)"
    default_severity = Severity.WARNING
    description = "a sentence over 50 words. almost certainly should be split."
    examples = ("(50+ word sentence)", "split into two or three.")

    def _flags(self, words: int) -> bool:
        return words > 50

    def scan(self, src: str, paragraphs: Sequence[Paragraph]) -> list[Finding]:
        return super().scan(src, paragraphs)


def rules() -> list[Rule]:
    """Both length rules, in registry order."""
    return [LongSentenceInfo(), LongSentenceWarn()]
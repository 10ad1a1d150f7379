"""Passive-voice heuristic: flag paragraphs where most sentences are passive."""

from __future__ import annotations

import re
from collections.abc import Sequence

from thin.rules.base import Category, Finding, Rule, Severity
from thin.tokenize import Paragraph, sentences

_MESSAGES = (
    "passive. who did it?",
    "3 passives in a row. pick subjects.",
    "passive cluster. name the actor.",
)

_BE_VERBS = frozenset({"is", "was", "were", "been", "being", "are", "be"})

_IRREGULAR_PARTICIPLES = frozenset(
    {
        "done", "made", "built", "seen", "written", "taken", "given", "shown",
        "held", "kept", "left", "found", "brought", "thought", "bought", "caught",
        "taught", "said", "sent", "set", "put", "run", "paid", "known", "gone",
        "come", "chosen", "broken", "spoken", "driven", "risen", "fallen",
        "hidden", "eaten", "forgotten", "forgiven", "cut", "read", "lost", "met",
        "led",
    }
)

_TRAILING_NON_ALNUM = re.compile(r"[\W_]+$")


def is_past_participle(word: str) -> bool:
    """Heuristic: ends in "ed" (three letters or more) or is a common irregular."""
    w = _TRAILING_NON_ALNUM.sub("", word).lower()
    if len(w) >= 3 and w.endswith("ed"):
        return True
    return w in _IRREGULAR_PARTICIPLES


def is_passive(sentence: str) -> bool:
    """True when a be-verb is followed by a participle, directly or one word later."""
    words = sentence.lower().split()
    if any(
        be in _BE_VERBS and is_past_participle(nxt)
        for be, nxt in zip(words, words[1:])
    ):
        return True
    return any(
        be in _BE_VERBS and is_past_participle(third)
        for be, third in zip(words, words[2:])
    )


class PassiveCluster(Rule):
    """Flags paragraphs where more than half of the sentences are passive."""

    id = "thin.passive.cluster"
    name = "passive-heavy paragraph"
    category = Category.PASSIVE
    default_severity = Severity.WARNING
    description = "a paragraph where more than half of sentences are passive voice."
    examples = (
        "the file was opened. the bytes were read. the data was parsed.",
        "we opened the file. we read the bytes. we parsed the data.",
    )

    def scan(self, src: str, paragraphs: Sequence[Paragraph]) -> list[Finding]:
        out: list[Finding] = []
        for para in paragraphs:
            sents = sentences(para.text, para.start)
            if len(sents) < 2:
                continue
            passive = sum(1 for s in sents if is_passive(s.text))
            if passive * 2 > len(sents):
                out.append(
                    self._finding(src, para.start, para.end, para.text[:60], _MESSAGES)
                )
        return out
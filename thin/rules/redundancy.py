"""Redundant pairs: one word does the job."""

from __future__ import annotations

from thin.rules.base import Category, PhraseRule, Severity

_DESCRIPTION = "redundant phrase. one word does the job."

# (id suffix, phrase, fix, messages, bad example, good example)
_TABLE: tuple[tuple[str, str, str, tuple[str, ...], str, str], ...] = (
    (
        "end-result",
        "end result",
        "result",
        ("end result = result.", "end result. the end is implied."),
        "the end result was clear.",
        "the result was clear.",
    ),
    (
        "past-history",
        "past history",
        "history",
        ("past history = history.", "past history. all history is past."),
        "check past history.",
        "check history.",
    ),
    (
        "future-plans",
        "future plans",
        "plans",
        ("future plans = plans.", "future plans. plans are already future."),
        "future plans include x.",
        "plans include x.",
    ),
    (
        "basic-fundamentals",
        "basic fundamentals",
        "fundamentals",
        ("fundamentals are basic by definition.", "basic fundamentals. pick one."),
        "learn the basic fundamentals.",
        "learn the fundamentals.",
    ),
    (
        "completely-finished",
        "completely finished",
        "finished",
        ("finished is already complete.", "completely finished. cut one."),
        "it's completely finished.",
        "it's finished.",
    ),
    (
        "each-and-every",
        "each and every",
        "every",
        ("each and every = every.", "each and every. redundant pair."),
        "each and every user.",
        "every user.",
    ),
    (
        "free-gift",
        "free gift",
        "gift",
        ("gifts are free by definition.", "free gift. pick one."),
        "get a free gift.",
        "get a gift.",
    ),
    (
        "mutual-cooperation",
        "mutual cooperation",
        "cooperation",
        ("cooperation is mutual already.", "mutual cooperation. trim."),
        "mutual cooperation is key.",
        "cooperation is key.",
    ),
    (
        "advance-forward",
        "advance forward",
        "advance",
        ("advance is forward already.", "advance forward. pick one."),
        "advance forward in line.",
        "advance in line.",
    ),
    (
        "in-order-to",
        "in order to",
        "to",
        ("in order to = to.", "in order to. three extra words."),
        "in order to compile, run x.",
        "to compile, run x.",
    ),
)


def rules() -> list[PhraseRule]:
    """All redundancy rules, in registry order."""
    return [
        PhraseRule(
            id=f"thin.redundancy.{suffix}",
            phrase=phrase,
            category=Category.REDUNDANCY,
            default_severity=Severity.WARNING,
            description=_DESCRIPTION,
            messages=messages,
            examples=(bad, good),
            fix=fix,
        )
        for suffix, phrase, fix, messages, bad, good in _TABLE
    ]
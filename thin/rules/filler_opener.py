"""Filler openers: phrases that stall before saying anything."""

from __future__ import annotations

from thin.rules.base import Category, PhraseRule, Severity

_DESCRIPTION = "filler opener. start closer to the point."

# (id suffix, phrase, severity, messages, bad example, good example)
_TABLE: tuple[tuple[str, str, Severity, tuple[str, ...], str, str], ...] = (
    (
        "todays-fast-paced",
        "in today's fast-paced world",
        Severity.ERROR,
        ("every day is today. cut this.", "in today's fast-paced. sure. cut."),
        "in today's fast-paced world, developers need speed.",
        "developers need speed.",
    ),
    (
        "digital-age",
        "in the digital age",
        Severity.WARNING,
        ("we've been digital since 1960. cut.", "in the digital age. every age is."),
        "in the digital age, data matters.",
        "data matters.",
    ),
    (
        "when-it-comes-to",
        "when it comes to",
        Severity.WARNING,
        ("when it comes to. cut the preamble.", "when it comes to. just name the thing."),
        "when it comes to parsers, speed matters.",
        "for parsers, speed matters.",
    ),
    (
        "in-this-article",
        "in this article",
        Severity.WARNING,
        ("don't announce. just say it.", "in this article. the reader knows."),
        "in this article, we explore x.",
        "here's x.",
    ),
    (
        "realm-of",
        "in the realm of",
        Severity.WARNING,
        ("realm of. not a fantasy novel.", "in the realm of. tavern-speak. cut."),
        "in the realm of databases.",
        "among databases.",
    ),
    (
        "dive-deep",
        "dive deep into",
        Severity.ERROR,
        ("water metaphor. no water here.", "dive deep into a cli tool. dry."),
        "let's dive deep into sql.",
        "here's sql.",
    ),
    (
        "without-further-ado",
        "without further ado",
        Severity.WARNING,
        ("without further ado = with further ado.", "ado. stop ado-ing."),
        "without further ado, here's the code.",
        "here's the code.",
    ),
    (
        "goes-without-saying",
        "it goes without saying",
        Severity.WARNING,
        ("then don't say it.", "goes without saying. so skip it."),
        "it goes without saying that tests matter.",
        "tests matter.",
    ),
    (
        "end-of-the-day",
        "at the end of the day",
        Severity.WARNING,
        ("at the end of the day = 'anyway'.", "at the end of the day. morning still has a point."),
        "at the end of the day, simplicity wins.",
        "simplicity wins.",
    ),
)


def rules() -> list[PhraseRule]:
    """All filler-opener rules, in registry order."""
    return [
        PhraseRule(
            id=f"thin.filler-opener.{suffix}",
            phrase=phrase,
            category=Category.FILLER,
            default_severity=severity,
            description=_DESCRIPTION,
            messages=messages,
            examples=(bad, good),
        )
        for suffix, phrase, severity, messages, bad, good in _TABLE
    ]
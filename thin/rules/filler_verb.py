"""Filler verbs: corporate verbs that inflate meaning."""

from __future__ import annotations

from thin.rules.base import Category, PhraseRule, Severity

_DESCRIPTION = "filler verb. replace with a concrete one."

# (id suffix, phrase, severity, fix, messages, bad example, good example)
_TABLE: tuple[tuple[str, str, Severity, str | None, tuple[str, ...], str, str], ...] = (
    (
        "leverages",
        "leverages",
        Severity.ERROR,
        "uses",
        ("you're not a forklift. use 'uses'.", "leverages. we're not in 2014 consulting."),
        "leverages rust's type system.",
        "uses rust's type system.",
    ),
    (
        "utilizes",
        "utilizes",
        Severity.ERROR,
        "uses",
        ("utilizes = uses + hubris.", "utilizes. say 'uses'."),
        "utilizes a cache.",
        "uses a cache.",
    ),
    (
        "harnesses-the-power-of",
        "harnesses the power of",
        Severity.ERROR,
        None,
        ("not training horses. say the word.", "harnesses. drop it, you're not in a saddle."),
        "harnesses the power of simd.",
        "uses simd.",
    ),
    (
        "empowers",
        "empowers",
        Severity.WARNING,
        None,
        ("empower is a ted-talk word. drop it.", "empowers. pick a verb."),
        "empowers developers to ship.",
        "lets developers ship.",
    ),
    (
        "enables-you-to",
        "enables you to",
        Severity.WARNING,
        "lets you",
        ("enables you to = lets you.", "enables you to. just say 'lets'."),
        "enables you to query.",
        "lets you query.",
    ),
    (
        "facilitates",
        "facilitates",
        Severity.WARNING,
        None,
        ("facilitates is a hr word. replace.", "facilitates. use a real verb."),
        "facilitates collaboration.",
        "puts a shared cursor in the doc.",
    ),
    (
        "streamlines",
        "streamlines",
        Severity.WARNING,
        None,
        ("streamlines. name the step you cut.", "streamlines = 'did something'."),
        "streamlines your workflow.",
        "cuts two steps from the deploy.",
    ),
    (
        "unlocks",
        "unlocks",
        Severity.WARNING,
        None,
        ("unlocks. there's no lock here.", "unlocks. name the door."),
        "unlocks new possibilities.",
        "you can now chain pipes.",
    ),
    (
        "revolutionizes",
        "revolutionizes",
        Severity.ERROR,
        None,
        ("revolutionizes. no. cut.", "revolutionizes. please."),
        "revolutionizes logging.",
        "writes logs as sqlite rows.",
    ),
    (
        "transforms-your",
        "transforms your",
        Severity.WARNING,
        None,
        ("transforms your. sales-deck phrasing.", "transforms your. pick a concrete verb."),
        "transforms your stack.",
        "replaces three services with one binary.",
    ),
)


def rules() -> list[PhraseRule]:
    """All filler-verb rules, in registry order."""
    return [
        PhraseRule(
            id=f"thin.filler.{suffix}",
            phrase=phrase,
            category=Category.FILLER,
            default_severity=severity,
            description=_DESCRIPTION,
            messages=messages,
            examples=(bad, good),
            fix=fix,
        )
        for suffix, phrase, severity, fix, messages, bad, good in _TABLE
    ]
"""Empty adjectives: words that say nothing."""

from __future__ import annotations

from thin.rules.base import Category, PhraseRule, Severity

_DESCRIPTION = "empty adjective. carries no information."

# (id suffix, phrase, severity, messages, bad example, good example)
_TABLE: tuple[tuple[str, str, Severity, tuple[str, ...], str, str], ...] = (
    (
        "seamless",
        "seamless",
        Severity.ERROR,
        ("seamless is a jacket thing. cut.", "nothing is seamless. name the seam."),
        "a seamless experience.",
        "no setup, no config, runs on launch.",
    ),
    (
        "robust",
        "robust",
        Severity.WARNING,
        ("robust means nothing. pick a property.", "robust is a stand-in word. replace."),
        "a robust system.",
        "handles 10k rps without dropping.",
    ),
    (
        "blazingly-fast",
        "blazingly fast",
        Severity.ERROR,
        ("every rust readme ever. show a number.", "blazingly fast says 'no benchmarks'."),
        "blazingly fast parser.",
        "parses 400mb/s on an m2.",
    ),
    (
        "lightning-fast",
        "lightning fast",
        Severity.WARNING,
        ("lightning is hot plasma. your binary isn't.", "lightning fast. show the number."),
        "lightning fast queries.",
        "p99 under 3ms on 10m rows.",
    ),
    (
        "powerful",
        "powerful",
        Severity.WARNING,
        ("powerful is filler. name the power.", "powerful. name one thing it does."),
        "a powerful toolkit.",
        "a toolkit that diffs binaries.",
    ),
    (
        "intelligent",
        "intelligent",
        Severity.WARNING,
        ("intelligent means nothing here. cut.", "intelligent. show the logic."),
        "intelligent search.",
        "search that matches by prefix and by body.",
    ),
    (
        "elegant",
        "elegant",
        Severity.INFO,
        ("elegant is a compliment, not a feature.", "elegant code. prove it."),
        "elegant api.",
        "one function. two args. returns a stream.",
    ),
    (
        "modern",
        "modern",
        Severity.WARNING,
        ("modern = when? pick a year.", "modern. name the decade."),
        "a modern approach.",
        "uses tokio, no locks.",
    ),
    (
        "cutting-edge",
        "cutting-edge",
        Severity.WARNING,
        ("cutting-edge ages in two weeks.", "cutting-edge. specify."),
        "cutting-edge tech.",
        "built on wgpu + wayland.",
    ),
    (
        "state-of-the-art",
        "state-of-the-art",
        Severity.WARNING,
        ("state-of-the-art. cite the paper.", "state-of-the-art according to whom."),
        "state-of-the-art compression.",
        "beats zstd -19 by 8% on text.",
    ),
    (
        "next-gen",
        "next-gen",
        Severity.WARNING,
        ("next-gen. which gen are we on.", "next-gen = last-gen + marketing."),
        "next-gen platform.",
        "an http server, written this year.",
    ),
    (
        "revolutionary",
        "revolutionary",
        Severity.ERROR,
        ("nothing is revolutionary. cut.", "revolutionary is a press release word."),
        "a revolutionary approach.",
        "a slightly-smaller json parser.",
    ),
    (
        "game-changing",
        "game-changing",
        Severity.ERROR,
        ("every saas says this. skip.", "game-changing. which game."),
        "game-changing workflow.",
        "one command instead of four.",
    ),
    (
        "industry-leading",
        "industry-leading",
        Severity.WARNING,
        ("which industry. leading who.", "industry-leading. compared to?"),
        "industry-leading speed.",
        "faster than ripgrep on 1gb logs.",
    ),
    (
        "best-in-class",
        "best-in-class",
        Severity.WARNING,
        ("best-in-class. what class. who judges.", "best-in-class. receipts?"),
        "best-in-class security.",
        "memory-safe by construction. audited in march.",
    ),
    (
        "world-class",
        "world-class",
        Severity.WARNING,
        ("world-class. olympics of what.", "world-class. drop it."),
        "world-class performance.",
        "runs in 300ms cold start.",
    ),
)


def rules() -> list[PhraseRule]:
    """All empty-adjective rules, in registry order."""
    return [
        PhraseRule(
            id=f"thin.empty-adjective.{suffix}",
            phrase=phrase,
            category=Category.EMPTY_ADJECTIVE,
            default_severity=severity,
            description=_DESCRIPTION,
            messages=messages,
            examples=(bad, good),
        )
        for suffix, phrase, severity, messages, bad, good in _TABLE
    ]
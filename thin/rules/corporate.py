"""Corporate-speak: meeting words in prose."""

from __future__ import annotations

from thin.rules.base import Category, PhraseRule, Severity

_DESCRIPTION = "corporate-speak. belongs in slack, not docs."

# (id suffix, phrase, severity, messages, bad example, good example)
_TABLE: tuple[tuple[str, str, Severity, tuple[str, ...], str, str], ...] = (
    (
        "synergy",
        "synergy",
        Severity.ERROR,
        ("synergy. belongs in a deck, not docs.", "synergy. it's 2026."),
        "team synergy is key.",
        "the team works well together.",
    ),
    (
        "circle-back",
        "circle back",
        Severity.WARNING,
        ("circle back = 'i'll reply later'.", "circle back. we're not cars."),
        "let's circle back.",
        "i'll reply tomorrow.",
    ),
    (
        "touch-base",
        "touch base",
        Severity.WARNING,
        ("touch base. sports metaphor; cut.", "touch base = talk."),
        "let's touch base soon.",
        "let's talk soon.",
    ),
    (
        "move-the-needle",
        "move the needle",
        Severity.WARNING,
        ("move the needle. meeting-speak.", "move the needle. no gauges here."),
        "this moves the needle.",
        "this matters to users.",
    ),
    (
        "low-hanging-fruit",
        "low-hanging fruit",
        Severity.WARNING,
        ("low-hanging fruit. tired metaphor.", "low-hanging fruit. pick the task."),
        "grab the low-hanging fruit.",
        "fix the easy bugs first.",
    ),
    (
        "paradigm-shift",
        "paradigm shift",
        Severity.WARNING,
        ("paradigm shift. kuhn hated this use.", "paradigm shift. overstated."),
        "a paradigm shift in x.",
        "a different way to do x.",
    ),
    (
        "mission-critical",
        "mission-critical",
        Severity.WARNING,
        ("mission-critical. we're not nasa.", "mission-critical. just say 'important'."),
        "mission-critical system.",
        "important system.",
    ),
    (
        "best-practices",
        "best practices",
        Severity.INFO,
        ("best practices = 'stuff i do'.", "best practices. name them."),
        "follow best practices.",
        "use structured logs, pin versions.",
    ),
    (
        "core-competency",
        "core competency",
        Severity.WARNING,
        ("core competency. consultant word.", "core competency = 'what we do'."),
        "our core competency is data.",
        "we work on data.",
    ),
)


def rules() -> list[PhraseRule]:
    """All corporate-speak rules, in registry order."""
    return [
        PhraseRule(
            id=f"thin.corporate.{suffix}",
            phrase=phrase,
            category=Category.CORPORATE,
            default_severity=severity,
            description=_DESCRIPTION,
            messages=messages,
            examples=(bad, good),
        )
        for suffix, phrase, severity, messages, bad, good in _TABLE
    ]
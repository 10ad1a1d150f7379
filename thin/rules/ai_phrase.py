"""AI-signature phrases: the highest-signal single words and short phrases."""

from __future__ import annotations

from thin.rules.base import Category, PhraseRule, Severity

_DESCRIPTION = "ai-signature phrase. common in generated text."

# (id suffix, phrase, severity, messages, bad example, good example)
_TABLE: tuple[tuple[str, str, Severity, tuple[str, ...], str, str], ...] = (
    (
        "delve",
        "delve",
        Severity.ERROR,
        ("delve is a red flag in 2026. rewrite.", "delve. every llm loves this word."),
        "let's delve into the api.",
        "here's the api.",
    ),
    (
        "important-to-note",
        "it's important to note",
        Severity.ERROR,
        ("if it's important, just say it.", "important to note = note."),
        "it's important to note that caching helps.",
        "caching helps.",
    ),
    (
        "worth-mentioning",
        "it's worth mentioning",
        Severity.WARNING,
        ("worth mentioning = mention.", "worth mentioning. just mention."),
        "it's worth mentioning the trade-off.",
        "there's a trade-off.",
    ),
    (
        "crucial-to-understand",
        "it's crucial to understand",
        Severity.WARNING,
        ("crucial to understand = note.", "crucial to understand. just explain."),
        "it's crucial to understand atomicity.",
        "atomicity matters here.",
    ),
    (
        "in-conclusion",
        "in conclusion",
        Severity.ERROR,
        (
            "the reader sees the end coming. don't announce.",
            "in conclusion. stop narrating.",
        ),
        "in conclusion, sqlite wins.",
        "sqlite wins.",
    ),
    (
        "to-summarize",
        "to summarize",
        Severity.WARNING,
        ("to summarize. or just summarize.", "to summarize. cut; write the summary."),
        "to summarize, it's fast.",
        "it's fast.",
    ),
    (
        "certainly",
        "certainly!",
        Severity.ERROR,
        ("certainly! chatbot opener. cut.", "certainly! dead giveaway."),
        "certainly! here's the code.",
        "here's the code.",
    ),
    (
        "of-course",
        "of course!",
        Severity.WARNING,
        ("of course! reads as assistant boilerplate.", "of course! skip the greeting."),
        "of course! here are three options.",
        "three options:",
    ),
    (
        "testament-to",
        "a testament to",
        Severity.ERROR,
        ("testament to. biblical phrasing. cut.", "testament to. name the evidence."),
        "a testament to rust's design.",
        "proof: the binary is 200kb.",
    ),
    (
        "navigate-complexities",
        "navigate the complexities of",
        Severity.ERROR,
        ("navigate is for ships. drop it.", "navigate the complexities of. pick a verb."),
        "navigate the complexities of oauth.",
        "handle oauth.",
    ),
    (
        "crux-of-the-matter",
        "the crux of the matter",
        Severity.WARNING,
        ("crux of the matter. overwritten phrasing.", "crux of the matter. cut."),
        "the crux of the matter is throughput.",
        "throughput is the problem.",
    ),
    (
        "ever-evolving-landscape",
        "in the ever-evolving landscape of",
        Severity.ERROR,
        ("ever-evolving landscape. every ai blog.", "ever-evolving landscape. cut entirely."),
        "in the ever-evolving landscape of web dev.",
        "web dev keeps changing.",
    ),
    (
        "journey-through",
        "a journey through",
        Severity.WARNING,
        ("not a journey. a tutorial.", "a journey through. we're not on a bus."),
        "a journey through the codebase.",
        "a tour of the codebase.",
    ),
    (
        "unlocking-the-potential",
        "unlocking the potential of",
        Severity.WARNING,
        ("unlocking the potential. ad-copy. cut.", "unlocking the potential. no locks here."),
        "unlocking the potential of your team.",
        "your team ships faster.",
    ),
)


def rules() -> list[PhraseRule]:
    """All AI-phrase rules, in registry order."""
    return [
        PhraseRule(
            id=f"thin.ai-phrase.{suffix}",
            phrase=phrase,
            category=Category.AI_PHRASE,
            default_severity=severity,
            description=_DESCRIPTION,
            messages=messages,
            examples=(bad, good),
        )
        for suffix, phrase, severity, messages, bad, good in _TABLE
    ]
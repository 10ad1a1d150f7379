"""The full, ordered set of rules."""

from __future__ import annotations

from thin.rules import (
    ai_phrase,
    corporate,
    empty_adjective,
    filler_opener,
    filler_verb,
    length,
    parallel,
    redundancy,
)
from thin.rules.base import Finding, Rule
from thin.rules.em_dash import EmDashCluster
from thin.rules.passive import PassiveCluster
from thin.tokenize import paragraphs


def registry() -> list[Rule]:
    """Every rule, in reporting order."""
    return [
        EmDashCluster(),
        *empty_adjective.rules(),
        *filler_verb.rules(),
        *filler_opener.rules(),
        *parallel.rules(),
        *ai_phrase.rules(),
        PassiveCluster(),
        *length.rules(),
        *redundancy.rules(),
        *corporate.rules(),
    ]


def find_rule(rule_id: str) -> Rule:
    """Return the rule with ``rule_id``; raise KeyError when there is none."""
    for rule in registry():
        if rule.id == rule_id:
            return rule
    raise KeyError(rule_id)


def scan_all(src: str) -> list[Finding]:
    """Run every rule at its default severity over ``src``."""
    paras = paragraphs(src)
    return [finding for rule in registry() for finding in rule.scan(src, paras)]
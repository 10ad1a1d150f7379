import pytest

from thin.rules.ai_phrase import rules
from thin.rules.base import Category, Severity
from thin.tokenize import paragraphs


def _rule(rule_id):
    return next(r for r in rules() if r.id == rule_id)


def _scan(rule_id, src):
    return _rule(rule_id).scan(src, paragraphs(src))


@pytest.mark.parametrize(
    ("rule_id", "src"),
    [
        ("thin.ai-phrase.delve", "let's delve into sql."),
        ("thin.ai-phrase.important-to-note", "it's important to note that x."),
        ("thin.ai-phrase.in-conclusion", "in conclusion, we win."),
        ("thin.ai-phrase.testament-to", "a testament to design."),
        ("thin.ai-phrase.navigate-complexities", "navigate the complexities of oauth."),
        ("thin.ai-phrase.ever-evolving-landscape", "in the ever-evolving landscape of ml."),
    ],
)
def test_flags_phrase_once(rule_id, src):
    assert len(_scan(rule_id, src)) == 1


def test_delve_finding_fields():
    src = "let's delve into sql."
    (finding,) = _scan("thin.ai-phrase.delve", src)
    assert (finding.start, finding.end) == (6, 11)
    assert (finding.line, finding.col) == (1, 7)
    assert finding.snippet == "delve"
    assert finding.severity == Severity.ERROR
    assert finding.category == Category.AI_PHRASE
    assert finding.fix is None
    assert finding.message in _rule("thin.ai-phrase.delve").messages


def test_certainly_matches_with_bang():
    assert len(_scan("thin.ai-phrase.certainly", "Certainly! here it is.")) == 1
    assert _scan("thin.ai-phrase.certainly", "it certainly works.") == []


def test_word_boundary():
    assert _scan("thin.ai-phrase.delve", "delved into it.") == []


def test_rule_count_and_unique_ids():
    ids = [r.id for r in rules()]
    assert len(ids) == 14
    assert len(set(ids)) == 14


def test_worth_mentioning_is_warning():
    assert _rule("thin.ai-phrase.worth-mentioning").default_severity == Severity.WARNING


def test_bad_examples_trigger_and_good_do_not():
    for rule in rules():
        bad, good = rule.examples
        assert len(rule.scan(bad, paragraphs(bad))) >= 1, rule.id
        assert rule.scan(good, paragraphs(good)) == [], rule.id


def test_name_is_phrase():
    assert _rule("thin.ai-phrase.journey-through").name == "a journey through"
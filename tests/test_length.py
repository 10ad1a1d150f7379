import pytest

from thin.rules.base import Category, Severity
from thin.rules.length import LongSentenceInfo, LongSentenceWarn, rules
from thin.tokenize import paragraphs


def _sentence(words: int) -> str:
    return " ".join(["word"] * words) + "."


def _scan(rule, src):
    return rule.scan(src, paragraphs(src))


def test_info_flags_40_word_sentence():
    src = _sentence(40)
    assert len(_scan(LongSentenceInfo(), src)) == 1


def test_warn_flags_55_word_sentence():
    src = _sentence(55)
    assert len(_scan(LongSentenceWarn(), src)) == 1
    assert len(_scan(LongSentenceInfo(), src)) == 0


def test_skips_short_sentence():
    src = "one two three."
    assert _scan(LongSentenceInfo(), src) == []
    assert _scan(LongSentenceWarn(), src) == []


@pytest.mark.parametrize(
    ("words", "info", "warn"),
    [(34, 0, 0), (35, 1, 0), (50, 1, 0), (51, 0, 1)],
)
def test_boundaries(words, info, warn):
    src = _sentence(words)
    assert len(_scan(LongSentenceInfo(), src)) == info
    assert len(_scan(LongSentenceWarn(), src)) == warn


def test_finding_fields():
    src = "short one. " + _sentence(40)
    [finding] = _scan(LongSentenceInfo(), src)
    assert finding.start == 11
    assert finding.end == len(src)
    assert finding.line == 1
    assert finding.col == 12
    assert finding.snippet == src[11:71]
    assert len(finding.snippet) == 60
    assert finding.severity is Severity.INFO
    assert finding.category is Category.LENGTH
    assert finding.fix is None


def test_rules_order():
    assert [r.id for r in rules()] == ["thin.length.sentence-35", "thin.length.sentence-50"]
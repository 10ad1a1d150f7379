import pytest

from thin.fix import apply_fixes
from thin.rules.base import Severity
from thin.rules.registry import find_rule, registry, scan_all
from thin.tokenize import paragraphs


def test_fix_replaces_utilizes_with_uses():
    src = "we utilizes a cache."
    out, n = apply_fixes(src, scan_all(src))
    assert n >= 1
    assert "uses" in out
    assert "utilizes" not in out


def test_fix_handles_in_order_to():
    src = "run it in order to compile."
    out, _ = apply_fixes(src, scan_all(src))
    assert out == "run it to compile."


def test_fix_preserves_capitalization():
    src = "Utilizes a cache."
    out, _ = apply_fixes(src, scan_all(src))
    assert out.startswith("Uses")


def test_fix_skips_rules_without_replacement():
    src = "a — b — c — d."
    out, n = apply_fixes(src, scan_all(src))
    assert n == 0
    assert out == src


def test_corporate_text_catches_phrases():
    src = "our team synergy keeps this mission-critical service alive."
    ids = {f.rule_id for f in scan_all(src)}
    assert "thin.corporate.synergy" in ids
    assert "thin.corporate.mission-critical" in ids


def test_ai_text_lights_up():
    src = (
        "In today's fast-paced world, this tool leverages a seamless, blazingly fast core. "
        "It's important to note that we delve into revolutionary ideas."
    )
    findings = scan_all(src)
    errors = [f for f in findings if f.severity is Severity.ERROR]
    assert len(findings) >= 6
    assert len(errors) >= 5
    assert all(0 < len(f.message) < 80 for f in findings)


def test_rule_count_at_least_thirty():
    assert len(registry()) >= 30


def test_all_rules_have_unique_ids():
    ids = [r.id for r in registry()]
    assert len(set(ids)) == len(ids)


def test_registry_order_starts_with_em_dash():
    rules = registry()
    assert rules[0].id == "thin.em-dash.cluster"
    assert rules[-1].id == "thin.corporate.core-competency"


def test_em_dash_message_appears():
    src = "one — two — three — four."
    rule = find_rule("thin.em-dash.cluster")
    out = rule.scan(src, paragraphs(src))
    assert len(out) == 1
    assert any(word in out[0].message for word in ("commas", "lane", "breathe"))


def test_find_rule_returns_match():
    assert find_rule("thin.filler.leverages").name == "leverages"


def test_find_rule_unknown_raises():
    with pytest.raises(KeyError):
        find_rule("thin.no-such-rule")


def test_scan_all_clean_text_is_quiet():
    assert scan_all("the parser reads a file and prints the tokens.") == []
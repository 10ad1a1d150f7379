import re

from thin.render import render
from thin.rules.base import Category, Finding, Severity

SRC = "first line\nsecond robust line"


def _robust_finding():
    start = SRC.index("robust")
    return Finding(
        rule_id="thin.empty-adjective.robust",
        category=Category.EMPTY_ADJECTIVE,
        severity=Severity.WARNING,
        message="robust means nothing. pick a property.",
        start=start,
        end=start + len("robust"),
        line=2,
        col=len("second ") + 1,
        snippet="robust",
    )


def test_clean_file():
    out = render("README.md", "all good.", [], False)
    assert out.startswith("README.md\n")
    assert "  clean." in out
    assert "issues" not in out


def test_plain_output_lists_finding():
    out = render("README.md", SRC, [_robust_finding()], False)
    assert out.startswith("README.md\n")
    assert "│ second robust line\n" in out
    assert " " * len("second ") + "~" * len("robust") + "\n" in out
    assert "thin.empty-adjective.robust · robust means nothing. pick a property. [warning]" in out
    assert "  1 issues · 0 errors · 1 warnings · 0 info\n" in out
    assert "\x1b" not in out


def test_underline_is_clamped_to_line():
    src = "ab\ncd"
    finding = Finding(
        rule_id="thin.passive.cluster",
        category=Category.PASSIVE,
        severity=Severity.INFO,
        message="m",
        start=0,
        end=len(src),
        line=1,
        col=1,
        snippet=src,
    )
    out = render("x.md", src, [finding], False)
    assert "│ ~~\n" in out
    assert "~~~" not in out


def test_colour_output_matches_plain_without_escapes():
    findings = [_robust_finding()]
    plain = render("README.md", SRC, findings, False)
    coloured = render("README.md", SRC, findings, True)
    assert "\x1b[" in coloured
    assert re.sub(r"\x1b\[[0-9;]*m", "", coloured) == plain


def test_colour_clean_matches_plain_without_escapes():
    coloured = render("a.md", "fine.", [], True)
    assert "\x1b[" in coloured
    assert re.sub(r"\x1b\[[0-9;]*m", "", coloured) == render("a.md", "fine.", [], False)
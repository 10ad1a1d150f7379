import json

from thin.report import Counts, counts, file_report
from thin.rules.base import Category, Finding, Severity


def _finding(severity, start=0):
    return Finding(
        rule_id="thin.filler.utilizes",
        category=Category.FILLER,
        severity=severity,
        message="utilizes. say 'uses'.",
        start=start,
        end=start + 8,
        line=1,
        col=start + 1,
        snippet="utilizes",
        fix="uses",
    )


def test_counts_by_severity():
    findings = [
        _finding(Severity.ERROR),
        _finding(Severity.ERROR),
        _finding(Severity.WARNING),
        _finding(Severity.INFO),
    ]
    c = counts(findings)
    assert c == Counts(total=len(findings), errors=2, warnings=1, info=1)


def test_counts_total_is_sum():
    findings = [_finding(s) for s in (Severity.INFO, Severity.WARNING, Severity.INFO)]
    c = counts(findings)
    assert c.total == c.errors + c.warnings + c.info


def test_counts_empty():
    assert counts([]) == Counts(total=0, errors=0, warnings=0, info=0)


def test_file_report_round_trips_through_json():
    findings = [_finding(Severity.ERROR), _finding(Severity.WARNING, start=10)]
    report = file_report("README.md", findings)
    data = json.loads(json.dumps(report))
    assert list(data) == ["path", "findings", "counts"]
    assert data["path"] == "README.md"
    assert [f["severity"] for f in data["findings"]] == ["error", "warning"]
    assert data["findings"][0]["fix"] == "uses"
    assert data["counts"]["total"] == len(findings)
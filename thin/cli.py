"""Command-line entry point and dispatch."""

from __future__ import annotations

import argparse
import dataclasses
import glob
import json
import sys
from collections import defaultdict
from collections.abc import Iterable, Sequence
from pathlib import Path

from thin.fix import apply_fixes
from thin.profile import Config, Preset, effective_severity, load_config, parse_preset
from thin.render import render
from thin.report import file_report
from thin.rules.base import Finding, Rule, Severity
from thin.rules.registry import registry
from thin.tokenize import paragraphs

_STDIN_NAME = "<stdin>"
_DEFAULT_CONFIG = Path("thin.toml")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``thin`` command."""
    parser = argparse.ArgumentParser(
        prog="thin",
        description="finds ai writing in your readmes. without using ai.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("paths", nargs="*", help="file(s) or glob(s) to lint.")
    parser.add_argument("--stdin", action="store_true", help="read from stdin.")
    parser.add_argument(
        "--fix", action="store_true", help="apply safe auto-replacements in place."
    )
    parser.add_argument("--format", default="pretty", help="output format.")
    parser.add_argument(
        "--profile",
        default="balanced",
        help="preset profile: balanced | frkhd | relaxed | corporate.",
    )
    parser.add_argument("--config", type=Path, help="path to a thin.toml config.")
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="list every rule with id and description.",
    )
    parser.add_argument("--rule", help="show details for one rule by id.")
    parser.add_argument("--no-color", action="store_true", help="disable colors.")
    return parser


def _error(message: str) -> None:
    print(f"thin: {message}", file=sys.stderr)


def _read(path: str | Path) -> str:
    with open(path, encoding="utf-8", newline="") as fh:
        return fh.read()


def _load_settings(config_path: Path | None) -> Config:
    if config_path is not None:
        return load_config(config_path)
    if _DEFAULT_CONFIG.exists():
        try:
            return load_config(_DEFAULT_CONFIG)
        except (OSError, ValueError):
            return Config()
    return Config()


def _collect_inputs(args: argparse.Namespace) -> list[tuple[str, str]] | None:
    """Gather (name, text) pairs; None means a fatal error was reported."""
    if args.stdin:
        try:
            return [(_STDIN_NAME, sys.stdin.read())]
        except (OSError, UnicodeDecodeError) as exc:
            _error(f"stdin error: {exc}")
            return None

    if not args.paths:
        _error("no input. pass a file, a glob, or --stdin.")
        return None

    inputs: list[tuple[str, str]] = []
    for pattern in args.paths:
        path = Path(pattern)
        if path.is_file():
            try:
                inputs.append((pattern, _read(path)))
            except (OSError, UnicodeDecodeError) as exc:
                _error(f"{pattern}: {exc}")
                return None
            continue
        matched = False
        for entry in sorted(glob.glob(pattern, recursive=True)):
            if not Path(entry).is_file():
                continue
            matched = True
            try:
                inputs.append((entry, _read(entry)))
            except (OSError, UnicodeDecodeError) as exc:
                _error(f"{entry}: {exc}")
        if not matched and not path.exists():
            _error(f"no files match '{pattern}'")
    return inputs


def _lint(src: str, rules: Sequence[Rule], preset: Preset, cfg: Config) -> list[Finding]:
    paras = paragraphs(src)
    findings: list[Finding] = []
    for rule in rules:
        severity = effective_severity(
            rule.id, rule.category, rule.default_severity, preset, cfg.rule_overrides
        )
        if severity is None:
            continue
        findings.extend(
            dataclasses.replace(f, severity=severity) for f in rule.scan(src, paras)
        )
    findings = filter_inline_ignores(src, findings)
    findings.sort(key=lambda f: (f.start, f.end))
    return findings


def run(args: argparse.Namespace) -> int:
    """Carry out a parsed command line; return the process exit code."""
    rules = registry()

    if args.list_rules:
        list_rules(rules)
        return 0
    if args.rule is not None:
        return show_rule(rules, args.rule)

    try:
        cfg = _load_settings(args.config)
    except (OSError, ValueError) as exc:
        _error(f"config error: {exc}")
        return 2
    preset = parse_preset(args.profile) or cfg.preset or Preset.BALANCED
    cfg.preset = preset

    inputs = _collect_inputs(args)
    if inputs is None:
        return 2

    use_color = not args.no_color and sys.stdout.isatty()
    json_mode = args.format == "json"
    total_all = 0
    total_errors = 0
    reports: list[dict] = []

    for path, src in inputs:
        if any(p in path for p in cfg.ignore_paths):
            continue
        if any(pat in src and "ignore-file" in pat for pat in cfg.ignore_patterns):
            continue

        findings = _lint(src, rules, preset, cfg)

        if args.fix and path != _STDIN_NAME:
            patched, applied = apply_fixes(src, findings)
            if applied:
                try:
                    with open(path, "w", encoding="utf-8", newline="") as fh:
                        fh.write(patched)
                except OSError as exc:
                    _error(f"write {path}: {exc}")
                    return 2
                print(f"{path}: applied {applied} fix(es)")
            else:
                print(f"{path}: no auto-fixable findings")
            continue

        total_all += len(findings)
        total_errors += sum(1 for f in findings if f.severity is Severity.ERROR)

        if json_mode:
            reports.append(file_report(path, findings))
        else:
            print(render(path, src, findings, use_color), end="")

    if json_mode:
        print(json.dumps(reports, indent=2, ensure_ascii=False))
    elif not args.fix:
        print(
            f"\nthin: {total_all} total · {total_errors} errors across "
            f"{len(inputs)} file(s)",
            file=sys.stderr,
        )

    return 1 if total_errors else 0


def filter_inline_ignores(src: str, findings: Iterable[Finding]) -> list[Finding]:
    """Drop findings silenced by ``thin: ignore-line``, ``ignore-next`` or ``ignore-rule``."""
    ignored_lines: set[int] = set()
    ignored_rules: defaultdict[int, list[str]] = defaultdict(list)
    marker = "thin: ignore-rule "
    for number, line in enumerate(src.split("\n"), start=1):
        lower = line.lower()
        if "thin: ignore-line" in lower:
            ignored_lines.add(number)
        if "thin: ignore-next" in lower:
            ignored_lines.add(number + 1)
        pos = lower.find(marker)
        if pos != -1:
            words = line[pos + len(marker):].split()
            rule_id = words[0] if words else ""
            ignored_rules[number].append(rule_id)
            ignored_rules[number + 1].append(rule_id)
    return [
        f
        for f in findings
        if f.line not in ignored_lines and f.rule_id not in ignored_rules.get(f.line, ())
    ]


def list_rules(rules: Sequence[Rule]) -> None:
    """Print every rule with its id, category and description."""
    print(f"thin rules · {len(rules)} total")
    for rule in rules:
        print(f"  {rule.id:<45} [{rule.category.value}] {rule.description}")


def show_rule(rules: Sequence[Rule], rule_id: str) -> int:
    """Print the details of one rule; return the exit code."""
    rule = next((r for r in rules if r.id == rule_id), None)
    if rule is None:
        _error(f"no rule '{rule_id}'")
        return 2
    bad, good = rule.examples
    print(f"{rule.id} — {rule.name}")
    print(f"  category: {rule.category.value}")
    print(f"  default:  {rule.default_severity.value}")
    print(f"  detail:   {rule.description}")
    print(f"  bad:      {bad}")
    print(f"  good:     {good}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run; return the exit code."""
    return run(build_parser().parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
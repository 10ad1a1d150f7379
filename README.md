# thin

Finds AI-sounding writing in your READMEs, without using AI.

`thin` is an opinionated, rule-based prose linter. It flags the phrases,
cadences and punctuation habits that show up again and again in generated
text: "delve", "it's important to note", "blazingly fast", em-dash clusters,
"it's not x, it's y", passive-heavy paragraphs, very long sentences,
corporate-speak and redundant pairs. Every rule is a plain, deterministic
check; there is no model and no network access.

## Installing

```
pip install .
```

This installs the `thin` command. It needs Python 3.11 or later and nothing
beyond the standard library. The tests run with `pip install .[test]` and
then `pytest`.

## Using the command

Lint one or more files, or globs (`**` matches across directories):

```
thin README.md
thin "docs/**/*.md"
```

Read from standard input:

```
cat README.md | thin --stdin
```

Each finding is printed under its line with an underline, the rule id, a
short message and the severity, followed by a per-file tally. A one-line
total goes to standard error.

Options:

| option              | meaning                                                          |
|---------------------|------------------------------------------------------------------|
| `--stdin`           | read the text from standard input                                |
| `--fix`             | apply safe replacements in place (files only, not stdin)         |
| `--format json`     | print a JSON report instead of the pretty output                 |
| `--profile NAME`    | `balanced` (default), `frkhd`, `relaxed` or `corporate`          |
| `--config PATH`     | read settings from a TOML file (default: `thin.toml` if present) |
| `--list-rules`      | list every rule with its id, category and description            |
| `--rule ID`         | show one rule: category, default severity, bad and good example  |
| `--no-color`        | plain output; colour is also off when stdout is not a terminal   |
| `--version`         | print the version                                                |

Any `--format` value other than `json` gives the pretty output.

Exit codes: `0` when no finding has severity `error`, `1` when at least one
does, `2` when there is no input, a named file cannot be read, the config
passed with `--config` cannot be read or parsed, a fixed file cannot be
written, or `--rule` names an unknown rule. A glob that matches nothing only
prints a warning.

### Examples

```
thin --list-rules
thin --rule thin.filler.leverages
thin --format json --no-color README.md
thin --profile relaxed README.md
thin --fix README.md
```

`--fix` only touches findings whose rule carries a fixed replacement, such
as `utilizes` → `uses`, `enables you to` → `lets you` or `in order to` → `to`.
Overlapping fixes are skipped after the first. A capital first letter in the
original is kept. For each file it prints how many fixes were applied.

The JSON report is a list with one object per file, holding `path`,
`findings` (each with `rule_id`, `category`, `severity`, `message`, `start`,
`end`, `line`, `col`, `snippet` and `fix`) and `counts` (`total`, `errors`,
`warnings`, `info`).

## Profiles

- `balanced`: every rule at its default severity.
- `frkhd`: every rule raised to `error`.
- `relaxed`: only AI phrases, parallel patterns and punctuation rules.
- `corporate`: only AI phrases and punctuation rules.

## Configuration

`thin` reads `thin.toml` from the current directory, or the file passed with
`--config`:

```toml
[profile]
name = "balanced"

[rules]
"thin.corporate.best-practices" = "off"
"thin.empty-adjective.modern" = { severity = "info" }

[ignore]
paths = ["CHANGELOG", "vendor/"]
patterns = ["thin: ignore-file"]
```

A rule set to `"off"` never reports; a table with `severity` sets its level
to `error`, `warning` or `info` whatever the profile. Files whose path
contains one of `ignore.paths` are skipped, as are files containing a pattern
from `ignore.patterns` that itself contains `ignore-file`. A valid
`--profile` on the command line takes precedence over the config's profile.
A `thin.toml` found by default that cannot be parsed is ignored silently.

## Inline ignores

Write these anywhere on a line, for example inside an HTML comment:

- `thin: ignore-line` drops every finding on that line.
- `thin: ignore-next` drops every finding on the following line.
- `thin: ignore-rule RULE_ID` drops that rule's findings on this line and the next.

```markdown
<!-- thin: ignore-next -->
A seamless, blazingly fast experience.
```

## Using it from Python

```python
from thin.rules.registry import scan_all, find_rule
from thin.fix import apply_fixes
from thin.report import counts

src = "we utilizes a cache in order to go fast."
findings = scan_all(src)
for f in findings:
    print(f.line, f.col, f.rule_id, f.message)

patched, applied = apply_fixes(src, findings)
print(patched)          # "we uses a cache to go fast."
print(counts(findings))
```

`scan_all` runs every rule at its default severity, without profiles,
config or inline ignores; those are applied by the command.
`find_rule(rule_id)` returns one rule and raises `KeyError` for an unknown
id; `registry()` returns them all. `thin.tokenize` exposes the paragraph and
sentence splitters the rules use, `thin.profile` the presets and
`load_config`, `thin.report.file_report` the JSON report of one file, and
`thin.render.render` the text the command prints.
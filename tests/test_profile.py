import pytest

from thin.profile import (
    Config,
    Preset,
    effective_severity,
    load_config,
    parse_preset,
    parse_severity,
)
from thin.rules.base import Category, Severity


@pytest.mark.parametrize("name", ["frkhd", "balanced", "relaxed", "corporate"])
def test_parse_preset_round_trip(name):
    assert parse_preset(name).value == name


def test_parse_preset_unknown():
    assert parse_preset("Balanced") is None
    assert parse_preset("loud") is None


def test_parse_severity():
    assert parse_severity("error") is Severity.ERROR
    assert parse_severity("warning") is Severity.WARNING
    assert parse_severity("info") is Severity.INFO
    assert parse_severity("fatal") is None


def _write(tmp_path, text):
    path = tmp_path / "thin.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_full_config(tmp_path):
    path = _write(
        tmp_path,
        """
[profile]
name = "relaxed"

[rules]
"thin.filler.leverages" = "off"
"thin.corporate.synergy" = { severity = "info" }
"thin.empty-adjective.robust" = { severity = "loud" }
"thin.ai-phrase.delve" = "on"

[ignore]
paths = ["vendor/"]
patterns = ["thin: ignore-file"]
""",
    )
    cfg = load_config(path)
    assert cfg.preset is Preset.RELAXED
    assert cfg.rule_overrides == {
        "thin.filler.leverages": None,
        "thin.corporate.synergy": Severity.INFO,
    }
    assert cfg.ignore_paths == ["vendor/"]
    assert cfg.ignore_patterns == ["thin: ignore-file"]


def test_empty_file_gives_default_config(tmp_path):
    assert load_config(_write(tmp_path, "")) == Config()


def test_unknown_preset_name_is_none(tmp_path):
    cfg = load_config(_write(tmp_path, '[profile]\nname = "loud"\n'))
    assert cfg.preset is None


def test_bad_toml_raises(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "[profile\nname = "))


def test_wrong_type_raises(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "[ignore]\npaths = \"vendor\"\n"))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.toml")


def test_override_wins_over_preset():
    overrides = {"r": Severity.INFO, "off": None}
    assert effective_severity("r", Category.FILLER, Severity.ERROR, Preset.FRKHD, overrides) is Severity.INFO
    assert effective_severity("off", Category.AI_PHRASE, Severity.ERROR, Preset.BALANCED, overrides) is None


def test_frkhd_makes_everything_error():
    assert effective_severity("r", Category.LENGTH, Severity.INFO, Preset.FRKHD, {}) is Severity.ERROR


def test_balanced_keeps_default():
    assert effective_severity("r", Category.LENGTH, Severity.INFO, Preset.BALANCED, {}) is Severity.INFO


@pytest.mark.parametrize(
    ("preset", "category", "kept"),
    [
        (Preset.RELAXED, Category.AI_PHRASE, True),
        (Preset.RELAXED, Category.PARALLEL, True),
        (Preset.RELAXED, Category.PUNCTUATION, True),
        (Preset.RELAXED, Category.CORPORATE, False),
        (Preset.CORPORATE, Category.AI_PHRASE, True),
        (Preset.CORPORATE, Category.PUNCTUATION, True),
        (Preset.CORPORATE, Category.PARALLEL, False),
        (Preset.CORPORATE, Category.FILLER, False),
    ],
)
def test_narrow_presets(preset, category, kept):
    result = effective_severity("r", category, Severity.WARNING, preset, {})
    assert result == (Severity.WARNING if kept else None)
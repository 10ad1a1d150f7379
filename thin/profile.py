"""Preset profiles and the TOML config loader."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from os import PathLike

from thin.rules.base import Category, Severity


class Preset(StrEnum):
    FRKHD = "frkhd"
    BALANCED = "balanced"
    RELAXED = "relaxed"
    CORPORATE = "corporate"


_PRESET_CATEGORIES = {
    Preset.RELAXED: frozenset({Category.AI_PHRASE, Category.PARALLEL, Category.PUNCTUATION}),
    Preset.CORPORATE: frozenset({Category.AI_PHRASE, Category.PUNCTUATION}),
}


@dataclass
class Config:
    """Loaded settings. A rule override of ``None`` turns the rule off."""

    preset: Preset | None = None
    rule_overrides: dict[str, Severity | None] = field(default_factory=dict)
    ignore_paths: list[str] = field(default_factory=list)
    ignore_patterns: list[str] = field(default_factory=list)


def parse_preset(text: str) -> Preset | None:
    try:
        return Preset(text)
    except ValueError:
        return None


def parse_severity(text: str) -> Severity | None:
    try:
        return Severity(text)
    except ValueError:
        return None


def _table(data: Mapping, key: str) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"invalid type for `{key}`: expected a table")
    return value


def _string_list(data: Mapping, key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"invalid type for `{key}`: expected a list of strings")
    return list(value)


def load_config(path: str | PathLike) -> Config:
    """Read a thin.toml file.

    Raises OSError when the file cannot be read and ValueError when it is not valid.
    """
    with open(path, "rb") as fh:
        data = tomllib.load(fh)

    name = _table(data, "profile").get("name")
    if name is not None and not isinstance(name, str):
        raise ValueError("invalid type for `profile.name`: expected a string")
    preset = parse_preset(name) if name is not None else None

    overrides: dict[str, Severity | None] = {}
    for rule_id, value in _table(data, "rules").items():
        if value == "off":
            overrides[rule_id] = None
        elif isinstance(value, dict) and isinstance(value.get("severity"), str):
            severity = parse_severity(value["severity"])
            if severity is not None:
                overrides[rule_id] = severity

    ignore = _table(data, "ignore")
    return Config(
        preset=preset,
        rule_overrides=overrides,
        ignore_paths=_string_list(ignore, "paths"),
        ignore_patterns=_string_list(ignore, "patterns"),
    )


def effective_severity(
    rule_id: str,
    category: Category,
    default: Severity,
    preset: Preset,
    overrides: Mapping[str, Severity | None],
) -> Severity | None:
    """Severity a rule reports at, or None when it is switched off."""
    if rule_id in overrides:
        return overrides[rule_id]
    if preset is Preset.FRKHD:
        return Severity.ERROR
    if preset is Preset.BALANCED:
        return default
    return default if category in _PRESET_CATEGORIES[preset] else None
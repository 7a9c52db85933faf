"""Rules that choose which fields of rendered output get coloured, and how."""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

COLORS_FILE_ENV = "TERRASCAN_COLORS_FILE"
DEFAULT_VALUE_PATTERN = ".*?"


@dataclass(frozen=True)
class FieldStyle:
    """Styles for the key and the value of an output field."""

    key_style: str = ""
    value_style: str = ""


@dataclass(frozen=True)
class FieldSpec:
    """Regular expressions for the key and the value of an output field."""

    key_pattern: str
    value_pattern: str


DEFAULT_COLOR_PATTERNS: dict[FieldSpec, FieldStyle] = {
    FieldSpec("description", DEFAULT_VALUE_PATTERN): FieldStyle("", "Fg#0c0"),
    FieldSpec("severity", DEFAULT_VALUE_PATTERN): FieldStyle(
        "", "?HIGH=Fg#f00?MEDIUM=Fg#c84?LOW=Fg#cc0"
    ),
    FieldSpec("resource_name", DEFAULT_VALUE_PATTERN): FieldStyle("", "Fg#0ff|Bold"),
    FieldSpec("resource_type", DEFAULT_VALUE_PATTERN): FieldStyle("", "Fg#0cc"),
    FieldSpec("file", DEFAULT_VALUE_PATTERN): FieldStyle("", "Fg#fff|Bold"),
    FieldSpec("low", r"\d+"): FieldStyle("Fg#cc0", "Fg#cc0"),
    FieldSpec("medium", r"\d+"): FieldStyle("Fg#c84", "Fg#c84"),
    FieldSpec("high", r"\d+"): FieldStyle("Fg#f00", "Fg#f00"),
    FieldSpec("count", ""): FieldStyle("Bg#ccc|Fg#000", ""),
    FieldSpec("rule_name", DEFAULT_VALUE_PATTERN): FieldStyle("Bg#ccc|Fg#000", ""),
}

# Loaded rules; filled on first lookup and emptied by reset_color_patterns().
_color_patterns: dict[re.Pattern[str], FieldStyle] = {}


def _string_field(item: dict[str, Any], key: str) -> str:
    value = item.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


def _load_patterns() -> dict[FieldSpec, FieldStyle]:
    pattern_file = os.environ.get(COLORS_FILE_ENV, "")
    content = ""
    if pattern_file:
        try:
            content = Path(pattern_file).read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Unable to read color patterns: %s", exc)
            logger.warning("Will proceed with defaults")

    if not content:
        return dict(DEFAULT_COLOR_PATTERNS)

    try:
        items = json.loads(content)
        if items is None:
            items = []
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            raise ValueError("expected a list of objects")
        entries = [
            (
                _string_field(item, "key-pattern"),
                _string_field(item, "value-pattern"),
                FieldStyle(_string_field(item, "key-style"), _string_field(item, "value-style")),
            )
            for item in items
        ]
    except ValueError as exc:
        logger.warning("Unable to process color patterns from %s: %s", pattern_file, exc)
        logger.warning("Will proceed with defaults")
        return dict(DEFAULT_COLOR_PATTERNS)

    patterns: dict[FieldSpec, FieldStyle] = {}
    for key_pattern, value_pattern, style in entries:
        if not value_pattern:
            value_pattern = DEFAULT_VALUE_PATTERN
        elif value_pattern == "-":
            value_pattern = ""
        patterns[FieldSpec(key_pattern, value_pattern)] = style
    return patterns


def _compile(spec: FieldSpec) -> re.Pattern[str]:
    # Each expression spans a whole line and has five groups:
    # prefix, key, separator, value, suffix.
    if not spec.value_pattern:
        source = rf'^([-\s]*"?)({spec.key_pattern})("?:\s*?)()(.*?)\s*$'
    else:
        source = rf'^([-\s]*"?)({spec.key_pattern})("?: "?)({spec.value_pattern})("?,?)\s*$'
    return re.compile(source, re.MULTILINE)


def get_color_patterns() -> dict[re.Pattern[str], FieldStyle]:
    """Return the compiled colouring rules, loading them on first use.

    Rules come from the JSON file named by ``TERRASCAN_COLORS_FILE`` when
    it is set and readable, and from the built-in defaults otherwise.
    """
    if not _color_patterns:
        _color_patterns.update(
            (_compile(spec), style) for spec, style in _load_patterns().items()
        )
    return _color_patterns


def reset_color_patterns() -> None:
    """Forget the loaded rules so that the next lookup loads them again."""
    _color_patterns.clear()
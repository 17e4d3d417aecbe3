"""Helpers for resolving the optional mdwi.json build settings."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

DEFAULT_CONFIG_NAME = "mdwi.json"


class ConfigError(Exception):
    """Raised when the build settings file cannot be loaded."""


@dataclass(frozen=True, slots=True)
class BuildSettings:
    """Names and patterns controlling where a wiki build reads and writes."""

    output_dir: str = "_site"
    listing_file: str = "_list.md"
    document_extensions: Tuple[str, ...] = (".md",)
    asset_patterns: Tuple[str, ...] = ("*.png", "*.jpg")
    pandoc_executable: str = "pandoc"


_STRING_KEYS = {
    "output_dir",
    "listing_file",
    "pandoc_executable",
}
_LIST_KEYS = {"document_extensions", "asset_patterns"}
_PLAIN_NAME_KEYS = {"output_dir", "listing_file"}
_GLOB_CHARS = frozenset("*?[]")


def _check_plain_name(key: str, value: str) -> str:
    """Reject names that could point outside the working directory."""
    if value in (".", "..") or Path(value).is_absolute():
        raise ConfigError(
            f"{key} must be a plain name inside the working directory"
        )
    if "/" in value or "\\" in value:
        raise ConfigError(f"{key} must not contain a path separator")
    if key == "listing_file" and _GLOB_CHARS.intersection(value):
        raise ConfigError(f"{key} must not contain glob characters")
    return value


def _normalize_extension(value: str) -> str:
    return value if value.startswith(".") else f".{value}"


def _coerce(key: str, value: Any) -> Any:
    """Validate a single settings value and convert it to its field type."""
    if key in _STRING_KEYS:
        if not isinstance(value, str) or not value:
            raise ConfigError(f"{key} must be a non-empty string")
        if key in _PLAIN_NAME_KEYS:
            return _check_plain_name(key, value)
        return value

    if not isinstance(value, list) or not all(
        isinstance(item, str) and item for item in value
    ):
        raise ConfigError(f"{key} must be a list of non-empty strings")
    if key == "document_extensions":
        return tuple(_normalize_extension(item) for item in value)
    return tuple(value)


def parse_settings(data: Dict[str, Any]) -> BuildSettings:
    """Return settings with the recognized keys of ``data`` applied."""
    if not isinstance(data, dict):
        raise ConfigError("settings file must contain a JSON object")

    known = _STRING_KEYS | _LIST_KEYS
    overrides: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            continue
        overrides[key] = _coerce(key, value)
    return replace(BuildSettings(), **overrides)


def load_settings(root: Optional[Path] = None) -> BuildSettings:
    """Load ``mdwi.json`` from ``root`` (default: cwd), or return defaults."""
    config_path = (root or Path.cwd()) / DEFAULT_CONFIG_NAME
    if not config_path.is_file():
        return BuildSettings()

    try:
        with config_path.open("r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"{config_path.name}: {exc}") from exc

    return parse_settings(data)

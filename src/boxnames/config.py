"""Load box-name tool defaults from TOML files."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import tomllib

from .byte_views import VALID_BYTE_ORDERS, VALID_WORD_SIZES
from .charmaps import GameLanguage
from .table_patches import GameVersion

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a box-name configuration file fails validation."""


@dataclass(frozen=True)
class ViewSettings:
    """How the word view groups and orders bytes."""

    word_size: int = 2
    byte_order: str = "little"


@dataclass(frozen=True)
class BoxNamesConfig:
    """Release, language and rendering defaults for the command-line tools."""

    version: GameVersion = GameVersion.E
    language: GameLanguage = GameLanguage.ENG
    strict: bool = False
    views: ViewSettings = field(default_factory=ViewSettings)

    @classmethod
    def defaults(cls) -> "BoxNamesConfig":
        return cls()


def load_config(config_path: Path) -> BoxNamesConfig:
    """Parse and validate the configuration stored at ``config_path``."""

    try:
        with config_path.open("rb") as stream:
            raw_data = tomllib.load(stream)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc

    box_names = _optional_table(raw_data, "box_names")
    views = _optional_table(raw_data, "views")

    config = BoxNamesConfig(
        version=_parse_enum(GameVersion, box_names.get("version", GameVersion.E.value), "version"),
        language=_parse_enum(
            GameLanguage, box_names.get("language", GameLanguage.ENG.value), "language"
        ),
        strict=_parse_bool(box_names.get("strict", False), "strict"),
        views=_parse_views(views),
    )
    logger.debug("loaded configuration from %s: %s", config_path, config)
    return config


def _optional_table(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    table = data.get(name, {})
    if not isinstance(table, Mapping):
        raise ConfigError(f"[{name}] section must be a mapping")
    return table


def _parse_enum(enum_type: Any, raw_value: Any, key: str) -> Any:
    if not isinstance(raw_value, str):
        raise ConfigError(f"{key} must be a string")
    try:
        return enum_type(raw_value.strip().upper())
    except ValueError as exc:
        choices = ", ".join(member.value for member in enum_type)
        raise ConfigError(f"unsupported {key} {raw_value!r} (expected one of {choices})") from exc


def _parse_bool(raw_value: Any, key: str) -> bool:
    if not isinstance(raw_value, bool):
        raise ConfigError(f"{key} must be a boolean")
    return raw_value


def _parse_views(views: Mapping[str, Any]) -> ViewSettings:
    word_size = views.get("word_size", 2)
    if not isinstance(word_size, int) or isinstance(word_size, bool) or word_size not in VALID_WORD_SIZES:
        raise ConfigError(f"word_size must be one of {VALID_WORD_SIZES}")

    byte_order = views.get("byte_order", "little")
    if not isinstance(byte_order, str) or byte_order.lower() not in VALID_BYTE_ORDERS:
        raise ConfigError("byte_order must be 'little' or 'big'")
    return ViewSettings(word_size=word_size, byte_order=byte_order.lower())


__all__ = [
    "BoxNamesConfig",
    "ConfigError",
    "ViewSettings",
    "load_config",
]

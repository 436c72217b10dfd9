"""Decode and encode the PC box names stored in Generation III save files."""
from __future__ import annotations

from .box_names import (
    BUFFER_LENGTH,
    SLOT_COUNT,
    SLOT_LENGTH,
    BoxNameError,
    BoxNames,
    InvalidCharacterError,
    MalformedBufferError,
    NameTooLongError,
)
from .byte_views import (
    format_byte_rows,
    format_word_literals,
    format_word_view,
    load_hex_view,
    parse_hex_view,
)
from .charmaps import GameLanguage, get_forward_table, get_reverse_table
from .config import BoxNamesConfig, ConfigError, load_config
from .table_patches import EffectiveTables, GameVersion, derive_effective_tables

__all__ = [
    "BUFFER_LENGTH",
    "BoxNameError",
    "BoxNames",
    "BoxNamesConfig",
    "ConfigError",
    "EffectiveTables",
    "GameLanguage",
    "GameVersion",
    "InvalidCharacterError",
    "MalformedBufferError",
    "NameTooLongError",
    "SLOT_COUNT",
    "SLOT_LENGTH",
    "derive_effective_tables",
    "format_byte_rows",
    "format_word_literals",
    "format_word_view",
    "get_forward_table",
    "get_reverse_table",
    "load_config",
    "load_hex_view",
    "parse_hex_view",
]

"""Canonical glyph tables for the box-name character sets of each localisation.

The tables describe what the Emerald release renders. Adjustments for the
other releases live in :mod:`boxnames.table_patches`.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Final, Iterable, Mapping

TERMINATOR: Final[str] = "\0"
BLANK: Final[str] = " "
TERMINATOR_BYTE: Final[int] = 0xFF

GlyphTable = Mapping[int, str]
ReverseGlyphTable = Mapping[str, int]


class GameLanguage(Enum):
    """Localisations whose character sets the codec understands."""

    JPN = "JPN"
    ENG = "ENG"
    FRA = "FRA"
    ITA = "ITA"
    GER = "GER"
    SPA = "SPA"

    @property
    def is_japanese(self) -> bool:
        return self is GameLanguage.JPN


def coerce_language(language: GameLanguage | str) -> GameLanguage:
    """Return the :class:`GameLanguage` for ``language`` or raise ``ValueError``."""

    return GameLanguage(language)


_HIRAGANA: Final[str] = (
    "あいうえお"
    "かきくけこ"
    "さしすせそ"
    "たちつてと"
    "なにぬねの"
    "はひふへほ"
    "まみむめも"
    "やゆよ"
    "らりるれろ"
    "わをん"
    "ぁぃぅぇぉ"
    "ゃゅょ"
    "がぎぐげご"
    "ざじずぜぞ"
    "だぢづでど"
    "ばびぶべぼ"
    "ぱぴぷぺぽ"
    "っ"
)

_KATAKANA: Final[str] = (
    "アイウエオ"
    "カキクケコ"
    "サシスセソ"
    "タチツテト"
    "ナニヌネノ"
    "ハヒフヘホ"
    "マミムメモ"
    "ヤユヨ"
    "ラリルレロ"
    "ワヲン"
    "ァィゥェォ"
    "ャュョ"
    "ガギグゲゴ"
    "ザジズゼゾ"
    "ダヂヅデド"
    "バビブベボ"
    "パピプペポ"
    "ッ"
)

_UPPERCASE: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWERCASE: Final[str] = "abcdefghijklmnopqrstuvwxyz"
_DIGITS: Final[str] = "0123456789"

# 0xF7-0xFF: control codes shared by every character set.
_CONTROL_TAIL: Final[tuple[str, ...]] = (
    BLANK, BLANK, BLANK,
    TERMINATOR, TERMINATOR,
    BLANK, BLANK,
    TERMINATOR, TERMINATOR,
)

_WESTERN_ACCENTS: Final[dict[int, str]] = {
    0x00: " ", 0x01: "À", 0x02: "Á", 0x03: "Â", 0x04: "Ç",
    0x05: "È", 0x06: "É", 0x07: "Ê", 0x08: "Ë", 0x09: "Ì",
    0x0B: "Î", 0x0C: "Ï", 0x0D: "Ò", 0x0E: "Ó", 0x0F: "Ô",
    0x10: "Œ", 0x11: "Ù", 0x12: "Ú", 0x13: "Û", 0x14: "Ñ",
    0x15: "ß", 0x16: "à", 0x17: "á", 0x19: "ç", 0x1A: "è",
    0x1B: "é", 0x1C: "ê", 0x1D: "ë", 0x1E: "ì", 0x20: "î",
    0x21: "ï", 0x22: "ò", 0x23: "ó", 0x24: "ô", 0x25: "œ",
    0x26: "ù", 0x27: "ú", 0x28: "û", 0x29: "ñ", 0x2A: "º",
    0x2B: "ª", 0x2C: " ", 0x2D: "&", 0x2E: "+", 0x2F: " ",
    0x34: " ", 0x35: "=", 0x36: ";",
    0x50: "▯", 0x51: "¿", 0x52: "¡",
    0x5A: "Í", 0x5B: "%", 0x5C: "(", 0x5D: ")",
    0x68: "â", 0x6F: "í",
    0x79: "↑", 0x7A: "↓", 0x7B: "←", 0x7C: "→",
    0x84: "ᵉ", 0x85: "<", 0x86: ">",
    0xA0: " ",
}

_WESTERN_ALIASES: Final[dict[str, int]] = {"‥": 0xB0, "–": 0xAE}

_JAPANESE_ALIASES: Final[dict[str, int]] = {
    " ": 0x00,
    **{digit: 0xA1 + offset for offset, digit in enumerate(_DIGITS)},
    "!": 0xAB, "?": 0xAC, "¥": 0xB7,
    "-": 0xAE, "–": 0xAE, "…": 0xB0, ".": 0xB8,
    **{letter: 0xBB + offset for offset, letter in enumerate(_UPPERCASE)},
    **{letter: 0xD5 + offset for offset, letter in enumerate(_LOWERCASE)},
    ":": 0xF0,
}


def _assign(table: Dict[int, str], start: int, glyphs: Iterable[str]) -> None:
    for offset, glyph in enumerate(glyphs):
        table[start + offset] = glyph


def _build_japanese_glyphs() -> dict[int, str]:
    table: dict[int, str] = {0x00: "　"}
    _assign(table, 0x01, _HIRAGANA)
    _assign(table, 0x51, _KATAKANA)
    _assign(table, 0xA1, "０１２３４５６７８９！？。ー・‥『』「」♂♀円．×／")
    _assign(table, 0xBB, (chr(0xFF21 + offset) for offset in range(26)))
    _assign(table, 0xD5, (chr(0xFF41 + offset) for offset in range(26)))
    _assign(table, 0xEF, "►：ÄÖÜäöü")
    _assign(table, 0xF7, _CONTROL_TAIL)
    return table


def _build_western_glyphs(
    quotes: str, *, extra_blanks: Iterable[int] = ()
) -> dict[int, str]:
    table = dict(_WESTERN_ACCENTS)
    _assign(table, 0x53, BLANK * 7)
    _assign(table, 0x7D, "*" * 7)
    _assign(table, 0xA1, _DIGITS + "!?.-・…")
    _assign(table, 0xB1, quotes)
    _assign(table, 0xB3, "‘’♂♀$,×/")
    _assign(table, 0xBB, _UPPERCASE)
    _assign(table, 0xD5, _LOWERCASE)
    _assign(table, 0xEF, "►:ÄÖÜäöü")
    _assign(table, 0xF7, _CONTROL_TAIL)
    for code in extra_blanks:
        table[code] = BLANK
    return table


def _invert(forward: GlyphTable, aliases: Mapping[str, int]) -> dict[str, int]:
    # Duplicate glyphs resolve to their lowest code; the terminator always
    # writes 0xFF.
    reverse: dict[str, int] = {}
    for code, glyph in sorted(forward.items()):
        reverse.setdefault(glyph, code)
    reverse[TERMINATOR] = TERMINATOR_BYTE
    reverse.update(aliases)
    return reverse


_JAPANESE: Final[GlyphTable] = MappingProxyType(_build_japanese_glyphs())
_ENGLISH: Final[GlyphTable] = MappingProxyType(_build_western_glyphs("“”"))
_FRENCH: Final[GlyphTable] = MappingProxyType(
    _build_western_glyphs("«»", extra_blanks=(0x64,))
)
_GERMAN: Final[GlyphTable] = MappingProxyType(_build_western_glyphs("„“"))
_ITALIAN: Final[GlyphTable] = MappingProxyType(
    _build_western_glyphs("“”", extra_blanks=range(0x5E, 0x64))
)

_REVERSE_JAPANESE: Final[ReverseGlyphTable] = MappingProxyType(
    _invert(_JAPANESE, _JAPANESE_ALIASES)
)
_REVERSE_ENGLISH: Final[ReverseGlyphTable] = MappingProxyType(
    _invert(_ENGLISH, _WESTERN_ALIASES)
)
_REVERSE_FRENCH: Final[ReverseGlyphTable] = MappingProxyType(
    _invert(_FRENCH, _WESTERN_ALIASES)
)
_REVERSE_GERMAN: Final[ReverseGlyphTable] = MappingProxyType(
    _invert(_GERMAN, _WESTERN_ALIASES)
)

FORWARD_TABLES: Final[Mapping[GameLanguage, GlyphTable]] = MappingProxyType(
    {
        GameLanguage.JPN: _JAPANESE,
        GameLanguage.ENG: _ENGLISH,
        GameLanguage.FRA: _FRENCH,
        GameLanguage.ITA: _ITALIAN,
        GameLanguage.GER: _GERMAN,
        GameLanguage.SPA: _ENGLISH,
    }
)

# Italian keeps its own forward table but accepts the English input set.
REVERSE_TABLES: Final[Mapping[GameLanguage, ReverseGlyphTable]] = MappingProxyType(
    {
        GameLanguage.JPN: _REVERSE_JAPANESE,
        GameLanguage.ENG: _REVERSE_ENGLISH,
        GameLanguage.FRA: _REVERSE_FRENCH,
        GameLanguage.ITA: _REVERSE_ENGLISH,
        GameLanguage.GER: _REVERSE_GERMAN,
        GameLanguage.SPA: _REVERSE_ENGLISH,
    }
)


def get_forward_table(language: GameLanguage | str) -> GlyphTable:
    """Return the canonical byte-to-glyph table for ``language``."""

    return FORWARD_TABLES[coerce_language(language)]


def get_reverse_table(language: GameLanguage | str) -> ReverseGlyphTable:
    """Return the canonical glyph-to-byte table for ``language``."""

    return REVERSE_TABLES[coerce_language(language)]


__all__ = [
    "BLANK",
    "FORWARD_TABLES",
    "GameLanguage",
    "GlyphTable",
    "REVERSE_TABLES",
    "ReverseGlyphTable",
    "TERMINATOR",
    "TERMINATOR_BYTE",
    "coerce_language",
    "get_forward_table",
    "get_reverse_table",
]

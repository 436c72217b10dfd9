"""Derive per-release glyph tables from the canonical Emerald tables.

Ruby/Sapphire and FireRed/LeafGreen render a handful of codes differently
from Emerald. Each difference is expressed as a small named rule; a release
maps to an ordered :class:`PatchSet` of those rules, which is applied to
fresh copies of the canonical tables. The canonical tables are never
mutated.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Final, Iterable, Mapping, Protocol, TypeVar

from .charmaps import (
    BLANK,
    GameLanguage,
    GlyphTable,
    ReverseGlyphTable,
    coerce_language,
    get_forward_table,
    get_reverse_table,
)

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class GameVersion(Enum):
    """Game releases whose text rendering quirks the codec reproduces."""

    RS = "RS"
    FRLG = "FRLG"
    E = "E"


def coerce_version(version: GameVersion | str) -> GameVersion:
    """Return the :class:`GameVersion` for ``version`` or raise ``ValueError``."""

    return GameVersion(version)


# Codes that only carry glyphs from Emerald's extended western set onwards.
EMERALD_ONLY_CODES: Final[frozenset[int]] = frozenset({0x50, *range(0x7D, 0x84)})

# Ruby/Sapphire western releases fill undefined codes here with kana.
BACKFILL_CODES: Final[range] = range(0x0A, 0xA0)

WILDCARD_GLYPHS: Final[frozenset[str]] = frozenset({"▯", "*"})

RS_ARROW_GLYPHS: Final[Mapping[int, str]] = MappingProxyType(
    {0xF7: "↑", 0xF8: "↓", 0xF9: "←"}
)


class TablePatch(Protocol[K, V]):
    """Rule that returns a patched copy of a glyph table."""

    def apply(self, table: Mapping[K, V]) -> dict[K, V]:
        ...


@dataclass(frozen=True)
class OverrideGlyphs:
    """Render ``glyphs`` at their byte codes, replacing any existing glyph."""

    glyphs: Mapping[int, str]

    def apply(self, table: Mapping[int, str]) -> dict[int, str]:
        patched = dict(table)
        patched.update(self.glyphs)
        return patched


@dataclass(frozen=True)
class DeleteCodes:
    """Mark ``codes`` as unused."""

    codes: frozenset[int]

    def apply(self, table: Mapping[int, str]) -> dict[int, str]:
        return {code: glyph for code, glyph in table.items() if code not in self.codes}


@dataclass(frozen=True)
class BackfillRange:
    """Fill undefined ``codes`` with the glyphs ``source`` shows there."""

    codes: range
    source: GameLanguage
    fallback: str = BLANK

    def apply(self, table: Mapping[int, str]) -> dict[int, str]:
        source_table = get_forward_table(self.source)
        patched = dict(table)
        for code in self.codes:
            if code not in patched:
                patched[code] = source_table.get(code, self.fallback)
        return patched


@dataclass(frozen=True)
class RegisterGlyphs:
    """Accept ``glyphs`` as input, writing the mapped byte codes."""

    glyphs: Mapping[str, int]

    def apply(self, table: Mapping[str, int]) -> dict[str, int]:
        patched = dict(table)
        patched.update(self.glyphs)
        return patched


@dataclass(frozen=True)
class DeleteGlyphs:
    """Stop accepting ``glyphs`` as input."""

    glyphs: frozenset[str]

    def apply(self, table: Mapping[str, int]) -> dict[str, int]:
        return {glyph: code for glyph, code in table.items() if glyph not in self.glyphs}


@dataclass(frozen=True)
class BackfillReverseRange:
    """Accept ``source`` glyphs for codes in ``codes`` absent from ``defined``.

    Codes the source table leaves undefined are skipped, so the input set
    never grows beyond what the matching :class:`BackfillRange` displays.
    """

    codes: range
    source: GameLanguage
    defined: frozenset[int]

    def apply(self, table: Mapping[str, int]) -> dict[str, int]:
        source_table = get_forward_table(self.source)
        patched = dict(table)
        for code in self.codes:
            if code in self.defined:
                continue
            glyph = source_table.get(code)
            if glyph is not None:
                patched[glyph] = code
        return patched


@dataclass(frozen=True)
class PatchSet:
    """Ordered forward and reverse rules for one (release, language) pair."""

    forward: tuple[TablePatch[int, str], ...] = ()
    reverse: tuple[TablePatch[str, int], ...] = ()


@dataclass(frozen=True)
class EffectiveTables:
    """Read-only forward and reverse tables after release patches."""

    forward: GlyphTable
    reverse: ReverseGlyphTable
    patches: PatchSet = field(default_factory=PatchSet, compare=False)


def apply_patches(table: Mapping[K, V], patches: Iterable[TablePatch[K, V]]) -> dict[K, V]:
    """Return ``table`` with each of ``patches`` applied in order."""

    patched: dict[K, V] = dict(table)
    for patch in patches:
        patched = patch.apply(patched)
    return patched


def _ruby_sapphire_patches(language: GameLanguage) -> PatchSet:
    forward: list[TablePatch[int, str]] = [
        OverrideGlyphs(MappingProxyType({0xB0: "‥", **RS_ARROW_GLYPHS}))
    ]
    reverse: list[TablePatch[str, int]] = [
        RegisterGlyphs(
            MappingProxyType({glyph: code for code, glyph in RS_ARROW_GLYPHS.items()})
        )
    ]
    if not language.is_japanese:
        delete_codes = DeleteCodes(EMERALD_ONLY_CODES)
        forward.append(delete_codes)
        forward.append(BackfillRange(BACKFILL_CODES, GameLanguage.JPN))
        defined = frozenset(delete_codes.apply(get_forward_table(language)))
        reverse.append(DeleteGlyphs(WILDCARD_GLYPHS))
        reverse.append(BackfillReverseRange(BACKFILL_CODES, GameLanguage.JPN, defined))
    return PatchSet(forward=tuple(forward), reverse=tuple(reverse))


def _fire_red_leaf_green_patches(language: GameLanguage) -> PatchSet:
    if language.is_japanese:
        return PatchSet(forward=(OverrideGlyphs(MappingProxyType({0xB0: "…"})),))
    return PatchSet(
        forward=(DeleteCodes(EMERALD_ONLY_CODES),),
        reverse=(DeleteGlyphs(WILDCARD_GLYPHS),),
    )


def patch_set_for(
    version: GameVersion | str, language: GameLanguage | str
) -> PatchSet:
    """Return the rules that adapt ``language``'s tables to ``version``."""

    resolved_version = coerce_version(version)
    resolved_language = coerce_language(language)
    if resolved_version is GameVersion.RS:
        return _ruby_sapphire_patches(resolved_language)
    if resolved_version is GameVersion.FRLG:
        return _fire_red_leaf_green_patches(resolved_language)
    return PatchSet()


def derive_effective_tables(
    version: GameVersion | str, language: GameLanguage | str
) -> EffectiveTables:
    """Return the patched tables for ``version`` and ``language``."""

    return _derive(coerce_version(version), coerce_language(language))


@lru_cache(maxsize=None)
def _derive(version: GameVersion, language: GameLanguage) -> EffectiveTables:
    patches = patch_set_for(version, language)
    forward = apply_patches(get_forward_table(language), patches.forward)
    reverse = apply_patches(get_reverse_table(language), patches.reverse)
    logger.debug(
        "derived %s/%s tables: %d forward rules, %d reverse rules, "
        "%d displayable codes, %d accepted glyphs",
        version.value,
        language.value,
        len(patches.forward),
        len(patches.reverse),
        len(forward),
        len(reverse),
    )
    return EffectiveTables(
        forward=MappingProxyType(forward),
        reverse=MappingProxyType(reverse),
        patches=patches,
    )


__all__ = [
    "BACKFILL_CODES",
    "BackfillRange",
    "BackfillReverseRange",
    "DeleteCodes",
    "DeleteGlyphs",
    "EMERALD_ONLY_CODES",
    "EffectiveTables",
    "GameVersion",
    "OverrideGlyphs",
    "PatchSet",
    "RS_ARROW_GLYPHS",
    "RegisterGlyphs",
    "TablePatch",
    "WILDCARD_GLYPHS",
    "apply_patches",
    "coerce_version",
    "derive_effective_tables",
    "patch_set_for",
]

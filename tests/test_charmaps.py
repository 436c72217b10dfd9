from __future__ import annotations

import pytest

from boxnames import charmaps
from boxnames.charmaps import GameLanguage


@pytest.mark.parametrize(
    "language, code, expected",
    [
        (GameLanguage.JPN, 0x00, "　"),
        (GameLanguage.JPN, 0x01, "あ"),
        (GameLanguage.JPN, 0x50, "っ"),
        (GameLanguage.JPN, 0x51, "ア"),
        (GameLanguage.JPN, 0xA0, "ッ"),
        (GameLanguage.JPN, 0xB0, "‥"),
        (GameLanguage.JPN, 0xBB, "Ａ"),
        (GameLanguage.JPN, 0xEE, "ｚ"),
        (GameLanguage.JPN, 0xF0, "："),
        (GameLanguage.ENG, 0x00, " "),
        (GameLanguage.ENG, 0x1B, "é"),
        (GameLanguage.ENG, 0x50, "▯"),
        (GameLanguage.ENG, 0x7D, "*"),
        (GameLanguage.ENG, 0x83, "*"),
        (GameLanguage.ENG, 0xA1, "0"),
        (GameLanguage.ENG, 0xB0, "…"),
        (GameLanguage.ENG, 0xB1, "“"),
        (GameLanguage.ENG, 0xBB, "A"),
        (GameLanguage.ENG, 0xEE, "z"),
        (GameLanguage.FRA, 0xB1, "«"),
        (GameLanguage.FRA, 0xB2, "»"),
        (GameLanguage.FRA, 0x64, " "),
        (GameLanguage.GER, 0xB1, "„"),
        (GameLanguage.GER, 0xB2, "“"),
        (GameLanguage.ITA, 0x5E, " "),
        (GameLanguage.ITA, 0x63, " "),
    ],
)
def test_forward_table_glyphs(language: GameLanguage, code: int, expected: str) -> None:
    assert charmaps.get_forward_table(language)[code] == expected


@pytest.mark.parametrize("language", list(GameLanguage))
def test_control_codes_are_shared(language: GameLanguage) -> None:
    table = charmaps.get_forward_table(language)

    assert [table[code] for code in range(0xF7, 0x100)] == [
        " ", " ", " ", "\0", "\0", " ", " ", "\0", "\0"
    ]


def test_unused_codes_are_absent_from_western_tables() -> None:
    english = charmaps.get_forward_table(GameLanguage.ENG)

    for code in (0x0A, 0x18, 0x1F, 0x30, 0x5E, 0x87, 0x9F):
        assert code not in english
    assert 0x64 not in english
    assert 0x64 in charmaps.get_forward_table(GameLanguage.FRA)


def test_table_sizes_match_character_sets() -> None:
    assert len(charmaps.get_forward_table(GameLanguage.JPN)) == 256
    assert len(charmaps.get_forward_table(GameLanguage.ENG)) == 174
    assert len(charmaps.get_forward_table(GameLanguage.ITA)) == 180
    assert len(charmaps.get_reverse_table(GameLanguage.JPN)) == 319
    assert len(charmaps.get_reverse_table(GameLanguage.ENG)) == 151


def test_spanish_shares_english_tables() -> None:
    assert charmaps.get_forward_table("SPA") is charmaps.get_forward_table("ENG")
    assert charmaps.get_reverse_table("SPA") is charmaps.get_reverse_table("ENG")


def test_italian_accepts_english_input_set() -> None:
    assert charmaps.get_forward_table("ITA") is not charmaps.get_forward_table("ENG")
    assert charmaps.get_reverse_table("ITA") is charmaps.get_reverse_table("ENG")


@pytest.mark.parametrize(
    "language, glyph, expected",
    [
        (GameLanguage.ENG, " ", 0x00),
        (GameLanguage.ENG, "*", 0x7D),
        (GameLanguage.ENG, "\0", 0xFF),
        (GameLanguage.ENG, "‥", 0xB0),
        (GameLanguage.ENG, "–", 0xAE),
        (GameLanguage.FRA, "«", 0xB1),
        (GameLanguage.GER, "“", 0xB2),
        (GameLanguage.JPN, "　", 0x00),
        (GameLanguage.JPN, " ", 0x00),
        (GameLanguage.JPN, "A", 0xBB),
        (GameLanguage.JPN, "z", 0xEE),
        (GameLanguage.JPN, "7", 0xA8),
        (GameLanguage.JPN, "¥", 0xB7),
        (GameLanguage.JPN, "…", 0xB0),
        (GameLanguage.JPN, "\0", 0xFF),
    ],
)
def test_reverse_table_entries(language: GameLanguage, glyph: str, expected: int) -> None:
    assert charmaps.get_reverse_table(language)[glyph] == expected


def test_quote_glyphs_follow_language() -> None:
    assert "”" not in charmaps.get_reverse_table(GameLanguage.GER)
    assert "“" not in charmaps.get_reverse_table(GameLanguage.FRA)


@pytest.mark.parametrize("language", list(GameLanguage))
def test_reverse_targets_display_their_glyph(language: GameLanguage) -> None:
    forward = charmaps.get_forward_table(language)
    reverse = charmaps.get_reverse_table(language)

    for glyph, code in reverse.items():
        assert code in forward, f"{glyph!r} writes undisplayable code {code:#04x}"


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        charmaps.get_forward_table(GameLanguage.ENG)[0x0A] = "x"  # type: ignore[index]
    with pytest.raises(TypeError):
        charmaps.get_reverse_table(GameLanguage.ENG)["x"] = 0x0A  # type: ignore[index]


def test_unknown_language_fails_fast() -> None:
    with pytest.raises(ValueError):
        charmaps.get_forward_table("KOR")
    with pytest.raises(ValueError):
        charmaps.coerce_language("eng")

from __future__ import annotations

import pytest

from boxnames.box_names import BUFFER_LENGTH, BoxNames, MalformedBufferError
from boxnames.byte_views import (
    format_byte_rows,
    format_word_literals,
    format_word_view,
    load_hex_view,
    parse_hex_view,
)

INITIAL_ROW = "00 00 00 00 00 00 00 00 FF"


def test_format_byte_rows_emits_one_row_per_slot() -> None:
    rows = format_byte_rows(BoxNames().data).splitlines()

    assert len(rows) == 14
    assert set(rows) == {INITIAL_ROW}


def test_format_byte_rows_reflects_encoded_names() -> None:
    names = BoxNames()
    names.encode_slot(1, "BOX 1", "E", "ENG")

    rows = format_byte_rows(names.data).splitlines()

    assert rows[0] == INITIAL_ROW
    assert rows[1] == "BC C9 D2 00 A2 FF FF FF FF"


def test_format_word_view_sixteen_bit_little_keeps_storage_order() -> None:
    lines = format_word_view(BoxNames().data, 2, "little").splitlines()

    assert len(lines) == 63
    assert lines[:5] == ["0000", "0000", "0000", "0000", "FF00"]


def test_format_word_view_big_reverses_each_word() -> None:
    lines = format_word_view(bytes(range(8)), 2, "big").splitlines()

    assert lines == ["0100", "0302", "0504", "0706"]


def test_format_word_view_thirty_two_bit_drops_partial_word() -> None:
    data = bytes(range(1, 11))

    assert format_word_view(data, 4, "little").splitlines() == ["01020304", "05060708"]
    assert format_word_view(data, 4, "big").splitlines() == ["04030201", "08070605"]
    assert len(format_word_view(BoxNames().data, 4).splitlines()) == 31


@pytest.mark.parametrize("word_size, byte_order", [(3, "little"), (8, "big"), (2, "middle")])
def test_format_word_view_rejects_unsupported_layouts(word_size: int, byte_order: str) -> None:
    with pytest.raises(ValueError):
        format_word_view(BoxNames().data, word_size, byte_order)


def test_format_word_literals_reads_little_endian_words() -> None:
    literals = format_word_literals(BoxNames().data).splitlines()

    assert len(literals) == 31
    assert literals[:3] == ["0x00000000", "0x00000000", "0x000000FF"]
    assert format_word_literals(bytes([0x78, 0x56, 0x34, 0x12, 0xAA])) == "0x12345678"


def test_parse_hex_view_ignores_whitespace_and_case() -> None:
    text = "\n".join(" ".join(["ff"] * 9) for _ in range(14)) + "\n"

    assert parse_hex_view(text) == b"\xff" * BUFFER_LENGTH


def test_parse_hex_view_round_trips_byte_rows() -> None:
    names = BoxNames()
    names.encode_slot(4, "Pokémon", "E", "GER")

    assert parse_hex_view(format_byte_rows(names.data)) == names.data


@pytest.mark.parametrize(
    "text",
    ["FF" * 125, "FF" * 127, "F" * 251, "GG" + "FF" * 125, "0x" + "FF" * 125],
)
def test_parse_hex_view_rejects_malformed_text(text: str) -> None:
    with pytest.raises(MalformedBufferError):
        parse_hex_view(text)


def test_load_hex_view_leaves_block_unchanged_on_error() -> None:
    names = BoxNames()
    before = names.data

    with pytest.raises(MalformedBufferError):
        load_hex_view(names, "FF" * 100)

    assert names.data == before
    load_hex_view(names, "ff" * BUFFER_LENGTH)
    assert names.decode_all_slots("RS", "ITA") == [""] * 14

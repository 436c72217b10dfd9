"""Hexadecimal renderings of the box-name block and parsing of hex input."""
from __future__ import annotations

import re
from typing import Final, Literal, Sequence

from .box_names import BUFFER_LENGTH, SLOT_LENGTH, BoxNames, MalformedBufferError

ByteOrder = Literal["little", "big"]

HEX_DIGIT_COUNT: Final[int] = BUFFER_LENGTH * 2
VALID_WORD_SIZES: Final[tuple[int, ...]] = (2, 4)
VALID_BYTE_ORDERS: Final[tuple[str, ...]] = ("little", "big")

_WHITESPACE = re.compile(r"\s+")
_NON_HEX = re.compile(r"[^0-9A-F]")


def _hex_byte(byte: int) -> str:
    return f"{byte:02X}"


def format_byte_rows(data: bytes | Sequence[int], *, row_length: int = SLOT_LENGTH) -> str:
    """Return ``data`` as rows of space-separated hex bytes, one slot per row."""

    rows = [
        " ".join(_hex_byte(byte) for byte in data[offset : offset + row_length])
        for offset in range(0, len(data), row_length)
    ]
    return "\n".join(rows)


def format_word_view(
    data: bytes | Sequence[int],
    word_size: int = 2,
    byte_order: ByteOrder | str = "little",
) -> str:
    """Return ``data`` grouped into 16- or 32-bit words, one word per line.

    ``little`` lists each word's bytes in storage order and ``big`` reverses
    them. Trailing bytes that do not fill a whole word are dropped.
    """

    if word_size not in VALID_WORD_SIZES:
        raise ValueError(f"word size must be one of {VALID_WORD_SIZES}, received {word_size}")
    if byte_order not in VALID_BYTE_ORDERS:
        raise ValueError(f"byte order must be 'little' or 'big', received {byte_order!r}")

    usable = len(data) - (len(data) % word_size)
    lines: list[str] = []
    for offset in range(0, usable, word_size):
        digits = [_hex_byte(byte) for byte in data[offset : offset + word_size]]
        if byte_order == "big":
            digits.reverse()
        lines.append("".join(digits))
    return "\n".join(lines)


def format_word_literals(data: bytes | Sequence[int]) -> str:
    """Return ``data`` as little-endian 32-bit ``0x`` literals for source code."""

    usable = len(data) - (len(data) % 4)
    literals = [
        f"0x{int.from_bytes(bytes(data[offset : offset + 4]), 'little'):08X}"
        for offset in range(0, usable, 4)
    ]
    return "\n".join(literals)


def parse_hex_view(text: str) -> bytes:
    """Parse the 252-digit hex rendering of a full block.

    Whitespace is ignored and digits may use either case.
    """

    digits = _WHITESPACE.sub("", text).upper()
    if len(digits) != HEX_DIGIT_COUNT:
        raise MalformedBufferError(
            f"expected {HEX_DIGIT_COUNT} hex digits, received {len(digits)}"
        )
    invalid = _NON_HEX.search(digits)
    if invalid is not None:
        raise MalformedBufferError(f"invalid hex digit {invalid.group()!r}")
    return bytes.fromhex(digits)


def load_hex_view(names: BoxNames, text: str) -> None:
    """Replace the block held by ``names`` with the parsed hex ``text``."""

    names.replace_all_bytes(parse_hex_view(text))


__all__ = [
    "ByteOrder",
    "HEX_DIGIT_COUNT",
    "VALID_BYTE_ORDERS",
    "VALID_WORD_SIZES",
    "format_byte_rows",
    "format_word_literals",
    "format_word_view",
    "load_hex_view",
    "parse_hex_view",
]

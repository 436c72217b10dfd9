"""Fixed-layout buffer holding the fourteen PC box names."""
from __future__ import annotations

import logging
from typing import Final, Iterable

from .charmaps import BLANK, TERMINATOR, TERMINATOR_BYTE, GameLanguage, GlyphTable
from .table_patches import GameVersion, derive_effective_tables

logger = logging.getLogger(__name__)

SLOT_COUNT: Final[int] = 14
SLOT_LENGTH: Final[int] = 9
BUFFER_LENGTH: Final[int] = SLOT_COUNT * SLOT_LENGTH

# Each slot starts as eight zero bytes followed by a terminator.
_EMPTY_SLOT: Final[bytes] = bytes(SLOT_LENGTH - 1) + bytes((TERMINATOR_BYTE,))
_INITIAL_BYTES: Final[bytes] = _EMPTY_SLOT * SLOT_COUNT


class BoxNameError(ValueError):
    """Base class for box-name codec failures."""


class InvalidCharacterError(BoxNameError):
    """Raised when a name contains a glyph the active tables cannot write."""

    def __init__(self, character: str, position: int, slot: int) -> None:
        super().__init__(
            f"invalid character {character!r} at position {position} of slot {slot}"
        )
        self.character = character
        self.position = position
        self.slot = slot


class MalformedBufferError(BoxNameError):
    """Raised when replacement data does not describe exactly one name block."""


class NameTooLongError(BoxNameError):
    """Raised in strict mode when a name exceeds the slot width."""


def _check_slot_index(index: int) -> int:
    if not 0 <= index < SLOT_COUNT:
        raise IndexError(f"slot index {index} outside 0-{SLOT_COUNT - 1}")
    return index


class BoxNames:
    """Own the 126-byte name block and translate slots to and from text."""

    def __init__(self, data: bytes | Iterable[int] | None = None) -> None:
        self._bytes = bytearray(_INITIAL_BYTES)
        if data is not None:
            self.replace_all_bytes(data)

    def __len__(self) -> int:
        return BUFFER_LENGTH

    @property
    def data(self) -> bytes:
        """Return an immutable snapshot of the whole block."""

        return bytes(self._bytes)

    def slot_bytes(self, index: int) -> bytes:
        """Return the nine raw bytes backing slot ``index``."""

        start = _check_slot_index(index) * SLOT_LENGTH
        return bytes(self._bytes[start : start + SLOT_LENGTH])

    def reset(self) -> None:
        """Restore the initial state where every slot is an empty name."""

        self._bytes[:] = _INITIAL_BYTES

    def decode_slot(
        self,
        index: int,
        version: GameVersion | str,
        language: GameLanguage | str,
    ) -> str:
        """Return the display text stored in slot ``index``."""

        forward = derive_effective_tables(version, language).forward
        return self._decode(self.slot_bytes(index), forward)

    def decode_all_slots(
        self, version: GameVersion | str, language: GameLanguage | str
    ) -> list[str]:
        """Return the display text of all fourteen slots in order."""

        forward = derive_effective_tables(version, language).forward
        return [
            self._decode(self.slot_bytes(index), forward)
            for index in range(SLOT_COUNT)
        ]

    @staticmethod
    def _decode(raw: bytes, forward: GlyphTable) -> str:
        glyphs = "".join(forward.get(byte, BLANK) for byte in raw)
        return glyphs.split(TERMINATOR, 1)[0]

    def encode_slot(
        self,
        index: int,
        text: str,
        version: GameVersion | str,
        language: GameLanguage | str,
        *,
        strict: bool = False,
    ) -> None:
        """Write ``text`` into slot ``index``.

        Positions past the end of ``text`` are filled with the terminator.
        Characters beyond the ninth are ignored unless ``strict`` is set, in
        which case the name is rejected. Every character is validated before
        any byte is written, so a failure leaves the block untouched.
        """

        _check_slot_index(index)
        if len(text) > SLOT_LENGTH:
            if strict:
                raise NameTooLongError(
                    f"name {text!r} exceeds {SLOT_LENGTH} characters"
                )
            logger.debug(
                "ignoring %d characters past the end of slot %d",
                len(text) - SLOT_LENGTH,
                index,
            )

        reverse = derive_effective_tables(version, language).reverse
        encoded = bytearray()
        for position in range(SLOT_LENGTH):
            if position >= len(text):
                encoded.append(TERMINATOR_BYTE)
                continue
            character = text[position]
            code = reverse.get(character)
            if code is None:
                raise InvalidCharacterError(character, position, index)
            encoded.append(code)

        start = index * SLOT_LENGTH
        self._bytes[start : start + SLOT_LENGTH] = encoded

    def replace_all_bytes(self, data: bytes | Iterable[int]) -> None:
        """Overwrite the whole block with ``data`` (exactly 126 byte values)."""

        try:
            payload = bytes(list(data))
        except (TypeError, ValueError) as exc:
            raise MalformedBufferError(f"box name data must be byte values: {exc}") from exc
        if len(payload) != BUFFER_LENGTH:
            raise MalformedBufferError(
                f"box name data must be {BUFFER_LENGTH} bytes, received {len(payload)}"
            )
        self._bytes[:] = payload
        logger.debug("replaced box name block")


__all__ = [
    "BUFFER_LENGTH",
    "BoxNameError",
    "BoxNames",
    "InvalidCharacterError",
    "MalformedBufferError",
    "NameTooLongError",
    "SLOT_COUNT",
    "SLOT_LENGTH",
]

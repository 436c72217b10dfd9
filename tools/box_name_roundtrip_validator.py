#!/usr/bin/env python3
"""Standalone harness to validate box-name encode/decode round trips."""
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

# Ensure the package is importable when running the script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from boxnames.box_names import BoxNames, InvalidCharacterError  # noqa: E402  (import after sys.path tweak)
from boxnames.charmaps import GameLanguage  # noqa: E402
from boxnames.table_patches import GameVersion  # noqa: E402


DEFAULT_STRINGS: Sequence[str] = (
    "BOX 1",
    "Pokémon",
    "ポケモン",
    "↑↓←",
)


@dataclass(frozen=True)
class RoundTripStep:
    """Capture the outcome of one string under one release and language."""

    version: GameVersion
    language: GameLanguage
    source: str
    payload: bytes
    decoded: str | None
    reencoded: bytes | None = None
    error: str | None = None

    @property
    def status(self) -> str:
        if self.error is not None:
            return "SKIP"
        if self.decoded == self.source:
            return "PASS"
        # Alias glyphs decode to their canonical form but must keep their bytes.
        if self.reencoded == self.payload:
            return "NORMALISED"
        return "FAIL"

    def as_dict(self) -> dict[str, object]:
        """Expose the step for potential JSON serialisation."""

        return {
            "version": self.version.value,
            "language": self.language.value,
            "source": self.source,
            "payload": list(self.payload),
            "decoded": self.decoded,
            "status": self.status,
            "error": self.error,
        }


class BoxNameRoundTripValidator:
    """Encode strings into a slot and decode them back for each table pair."""

    def __init__(
        self,
        *,
        versions: Iterable[GameVersion] = tuple(GameVersion),
        languages: Iterable[GameLanguage] = tuple(GameLanguage),
    ) -> None:
        self._pairs = [(version, language) for version in versions for language in languages]
        if not self._pairs:
            raise ValueError("at least one release and language are required")

    def run(self, text: str) -> list[RoundTripStep]:
        """Round-trip ``text`` through slot 0 under every configured pair."""

        steps: list[RoundTripStep] = []
        for version, language in self._pairs:
            names = BoxNames()
            try:
                names.encode_slot(0, text, version, language)
            except InvalidCharacterError as exc:
                steps.append(
                    RoundTripStep(version, language, text, b"", None, error=str(exc))
                )
                continue
            decoded = names.decode_slot(0, version, language)
            reencoded: bytes | None
            try:
                names.encode_slot(1, decoded, version, language)
                reencoded = names.slot_bytes(1)
            except InvalidCharacterError:
                reencoded = None
            steps.append(
                RoundTripStep(
                    version,
                    language,
                    text,
                    names.slot_bytes(0),
                    decoded,
                    reencoded=reencoded,
                )
            )
        return steps


def _format_payload(payload: bytes) -> str:
    if not payload:
        return "<empty>"
    return " ".join(f"{byte:02X}" for byte in payload)


def _render_steps(steps: Sequence[RoundTripStep]) -> str:
    lines: list[str] = []
    for step in steps:
        label = f"{step.version.value}/{step.language.value}"
        if step.status == "SKIP":
            lines.append(f"{label:9} SKIP        {step.error}")
            continue
        lines.append(
            f"{label:9} {step.status:10}  {_format_payload(step.payload)} -> {step.decoded!r}"
        )
    return "\n".join(lines)


def _parse_arguments(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Encode each string into a box-name slot and decode it again for "
            "every release and language. Strings a table cannot encode are "
            "skipped and alias glyphs that decode to their canonical form count "
            "as normalised; the script exits non-zero if any decoded string "
            "re-encodes to different bytes."
        )
    )
    parser.add_argument(
        "strings",
        nargs="*",
        default=list(DEFAULT_STRINGS),
        help="Names to validate. If omitted, a built-in set of samples is used.",
    )
    parser.add_argument(
        "--game",
        action="append",
        choices=[version.value for version in GameVersion],
        help="Restrict validation to this release (repeatable).",
    )
    parser.add_argument(
        "--language",
        action="append",
        choices=[language.value for language in GameLanguage],
        help="Restrict validation to this language (repeatable).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_arguments(sys.argv[1:] if argv is None else argv)
    versions = [GameVersion(value) for value in args.game] if args.game else list(GameVersion)
    languages = (
        [GameLanguage(value) for value in args.language] if args.language else list(GameLanguage)
    )
    validator = BoxNameRoundTripValidator(versions=versions, languages=languages)

    all_passed = True
    for text in args.strings:
        print(f"Name {text!r}:")
        steps = validator.run(text)
        print(_render_steps(steps))
        failures = [step for step in steps if step.status == "FAIL"]
        if failures:
            all_passed = False
        print()
    if all_passed:
        print("All round-trip validations passed.")
        return 0
    print("One or more round-trip validations failed.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

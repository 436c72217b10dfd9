"""Command-line front end for decoding and encoding PC box names."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Sequence

from .box_names import SLOT_COUNT, BoxNameError, BoxNames
from .byte_views import (
    VALID_BYTE_ORDERS,
    VALID_WORD_SIZES,
    format_byte_rows,
    format_word_literals,
    format_word_view,
    load_hex_view,
)
from .charmaps import GameLanguage
from .config import BoxNamesConfig, ConfigError, ViewSettings, load_config
from .table_patches import GameVersion

logger = logging.getLogger(__name__)

VIEW_CHOICES = ("rows", "words", "literals")


def _add_view_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--view",
        choices=VIEW_CHOICES,
        default="rows",
        help="Rendering of the block: hex rows, grouped words or 32-bit literals",
    )
    parser.add_argument(
        "--word-size",
        type=int,
        choices=VALID_WORD_SIZES,
        default=None,
        help="Bytes per word for the words view",
    )
    parser.add_argument(
        "--byte-order",
        choices=VALID_BYTE_ORDERS,
        default=None,
        help="Byte order for the words view",
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed command-line arguments for the box-name CLI."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a TOML file with release, language and view defaults",
    )
    parser.add_argument(
        "--game",
        choices=[version.value for version in GameVersion],
        default=None,
        help="Game release whose character quirks apply",
    )
    parser.add_argument(
        "--language",
        choices=[language.value for language in GameLanguage],
        default=None,
        help="Localisation of the save",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Emit debug logging on stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode = subparsers.add_parser("decode", help="Decode a hex block into names")
    decode.add_argument(
        "hex",
        nargs="*",
        help="Hex digits of the 126-byte block; read from stdin when omitted",
    )
    decode.add_argument(
        "--json",
        action="store_true",
        help="Emit the names as a JSON list",
    )

    encode = subparsers.add_parser("encode", help="Encode names into a hex block")
    encode.add_argument(
        "names",
        nargs="*",
        help=f"Up to {SLOT_COUNT} names written to consecutive slots from slot 0",
    )
    encode.add_argument(
        "--from-hex",
        default=None,
        help="Start from this hex block instead of fourteen empty names",
    )
    encode.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject names longer than a slot instead of truncating them",
    )
    _add_view_arguments(encode)

    views = subparsers.add_parser("views", help="Render a hex block in another layout")
    views.add_argument(
        "hex",
        nargs="*",
        help="Hex digits of the 126-byte block; read from stdin when omitted",
    )
    _add_view_arguments(views)

    args = parser.parse_args(argv)
    if args.command == "encode" and len(args.names) > SLOT_COUNT:
        parser.error(f"at most {SLOT_COUNT} names fit in the box name block")
    return args


def _resolve_config(args: argparse.Namespace) -> BoxNamesConfig:
    config_path: Path | None = args.config
    if config_path is None:
        return BoxNamesConfig.defaults()
    if not config_path.exists():
        raise SystemExit(f"configuration file not found: {config_path}")
    return load_config(config_path)


def _read_hex(parts: Sequence[str]) -> str:
    if parts:
        return "".join(parts)
    return sys.stdin.read()


def _render_view(
    names: BoxNames, args: argparse.Namespace, settings: ViewSettings
) -> str:
    if args.view == "words":
        word_size = args.word_size or settings.word_size
        byte_order = args.byte_order or settings.byte_order
        return format_word_view(names.data, word_size, byte_order)
    if args.view == "literals":
        return format_word_literals(names.data)
    return format_byte_rows(names.data)


def _run_decode(args: argparse.Namespace, config: BoxNamesConfig) -> int:
    names = BoxNames()
    load_hex_view(names, _read_hex(args.hex))
    decoded = names.decode_all_slots(args.game or config.version, args.language or config.language)
    if args.json:
        print(json.dumps(decoded, ensure_ascii=False))
    else:
        for index, name in enumerate(decoded):
            print(f"{index + 1:2d}: {name}")
    return 0


def _run_encode(args: argparse.Namespace, config: BoxNamesConfig) -> int:
    names = BoxNames()
    if args.from_hex is not None:
        load_hex_view(names, args.from_hex)
    strict = config.strict if args.strict is None else args.strict
    version = args.game or config.version
    language = args.language or config.language
    for index, text in enumerate(args.names):
        names.encode_slot(index, text, version, language, strict=strict)
    print(_render_view(names, args, config.views))
    return 0


def _run_views(args: argparse.Namespace, config: BoxNamesConfig) -> int:
    names = BoxNames()
    load_hex_view(names, _read_hex(args.hex))
    print(_render_view(names, args, config.views))
    return 0


COMMANDS: Dict[str, Callable[[argparse.Namespace, BoxNamesConfig], int]] = {
    "decode": _run_decode,
    "encode": _run_encode,
    "views": _run_views,
}


def main(argv: List[str] | None = None) -> int:
    """Entry point for ``python -m boxnames.cli``."""

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = _resolve_config(args)
        return COMMANDS[args.command](args, config)
    except (BoxNameError, ConfigError) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - exercised via python -m
    raise SystemExit(main())

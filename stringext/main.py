#!/usr/bin/env python3

import argparse
import sys
from typing import Callable, Dict, Optional, Sequence

import pydantic
import toml

from . import coercion, content_types, hashing, sanitize, text
from .encoding import CharsetManager, to_byte_array
from .exceptions import ConfigurationError, StringExtException
from .i18n import translit
from .utils.config import load_config
from .utils.logger import setup_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Commands taking only the input text
SIMPLE_COMMANDS: Dict[str, tuple[Callable, str]] = {
    "md5": (hashing.to_md5_hash, "MD5 digest as lowercase hex"),
    "bool": (coercion.to_boolean, "true if the text is a recognised truthy token"),
    "short": (coercion.to_short, "16-bit integer, 0 if unparsable"),
    "int": (coercion.to_integer, "32-bit integer, 0 if unparsable"),
    "long": (coercion.to_long, "64-bit integer, 0 if unparsable"),
    "datetime": (coercion.to_datetime, "date/time, 0001-01-01 if unparsable"),
    "capitalize": (text.capitalize_first_letter, "upper-case the first letter"),
    "latin": (translit.convert_cyrillic_to_latin_letters, "Bulgarian Cyrillic to Latin"),
    "keyboard": (translit.convert_latin_to_cyrillic_keyboard, "Latin keys to phonetic Cyrillic"),
    "username": (sanitize.to_valid_username, "sanitized username"),
    "filename": (sanitize.to_valid_latin_file_name, "sanitized Latin file name"),
    "extension": (text.get_file_extension, "lower-cased file extension"),
    "content-type": (content_types.to_content_type, "MIME type for an extension"),
    "bytes": (to_byte_array, "UTF-16LE bytes as hex"),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stringext",
        description="Apply a string helper to TEXT, or to stdin when TEXT is omitted",
    )
    parser.add_argument("--config", help="path to a TOML config file")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper,
                        help="override the configured log level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, (_, help_text) in SIMPLE_COMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("text", nargs="?")

    between = subparsers.add_parser("between", help="text between two markers")
    between.add_argument("start")
    between.add_argument("end")
    between.add_argument("text", nargs="?")
    between.add_argument("--start-from", type=int, default=0)

    first = subparsers.add_parser("first", help="first COUNT characters")
    first.add_argument("count", type=int)
    first.add_argument("text", nargs="?")

    return parser


def format_result(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.hex()
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def run(args: argparse.Namespace, input_text: str) -> str:
    if args.command == "between":
        result = text.get_string_between(input_text, args.start, args.end, args.start_from)
    elif args.command == "first":
        result = text.get_first_characters(input_text, args.count)
    else:
        func, _ = SIMPLE_COMMANDS[args.command]
        result = func(input_text)
    return format_result(result)


def read_stdin(charsets: CharsetManager) -> str:
    data = sys.stdin.buffer.read()
    return charsets.decode(data).rstrip("\r\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (ConfigurationError, pydantic.ValidationError, toml.TomlDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger = setup_logging(config.logging, args.log_level)

    try:
        if args.text is None:
            input_text = read_stdin(CharsetManager.from_config(config))
        else:
            input_text = args.text
        print(run(args, input_text))
    except StringExtException as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line front end for the ircwire codec.

Usage:
  ircwire parse [LINE ...]        raw lines -> JSON messages
  ircwire stringify [JSON ...]    JSON messages -> raw lines
  ircwire mask PATTERN [SOURCE ...]  print sources matching PATTERN

Without positional inputs each subcommand reads one item per line from stdin.
Exit status is 1 if any input failed, 0 otherwise.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .constants import CRLF, IRCWIRE_JSON_INDENT
from .errors import IRCWireError, log_error
from .irc import compile_mask, parse, stringify
from .logging_config import LoggerConfigurator
from .logs import logger


def _inputs(values: list[str], stdin: TextIO) -> Iterator[str]:
    if values:
        yield from values
        return
    for line in stdin:
        yield line.rstrip("\r\n")


def run_parse(lines: Iterable[str], out: TextIO, indent: int | None) -> tuple[int, int]:
    processed = failed = 0
    for line in lines:
        processed += 1
        raw = line + CRLF if line.strip() else line
        try:
            message = parse(raw)
        except IRCWireError as e:
            failed += 1
            log_error("Failed to parse line", e, context={"line_number": processed})
            continue
        out.write(json.dumps(message.to_dict(), indent=indent, ensure_ascii=False) + "\n")
    return processed, failed


def run_stringify(items: Iterable[str], out: TextIO) -> tuple[int, int]:
    processed = failed = 0
    for item in items:
        if not item.strip():
            continue
        processed += 1
        try:
            data = json.loads(item)
        except json.JSONDecodeError as e:
            failed += 1
            logger.log_event("cli", "bad_json", level=logging.ERROR, error=str(e))
            continue
        if not isinstance(data, dict):
            failed += 1
            logger.log_event("cli", "bad_json", level=logging.ERROR, error=type(data).__name__)
            continue
        try:
            line = stringify(data)
        except IRCWireError as e:
            failed += 1
            log_error("Failed to stringify message", e, context={"item_number": processed})
            continue
        out.write(line[: -len(CRLF)] + "\n")
    return processed, failed


def run_mask(pattern: str, sources: Iterable[str], out: TextIO) -> tuple[int, int]:
    compiled = compile_mask(pattern)
    logger.log_event("cli", "mask_compiled", level=logging.DEBUG, pattern=pattern)
    processed = 0
    for source in sources:
        processed += 1
        if compiled.test(source):
            out.write(source + "\n")
    return processed, 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ircwire", description="Parse and build IRC protocol lines."
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=IRCWIRE_JSON_INDENT,
        help="JSON indentation for parse output (negative for compact)",
    )
    sub = parser.add_subparsers(dest="command")

    p_parse = sub.add_parser("parse", help="parse raw lines into JSON")
    p_parse.add_argument("lines", nargs="*")

    p_stringify = sub.add_parser("stringify", help="build raw lines from JSON")
    p_stringify.add_argument("messages", nargs="*")

    p_mask = sub.add_parser("mask", help="filter sources by a wildcard mask")
    p_mask.add_argument("pattern")
    p_mask.add_argument("sources", nargs="*")
    return parser


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    command = args.command or "parse"
    logger.log_event("app", "start", level=logging.DEBUG, command=command)

    try:
        if command == "stringify":
            processed, failed = run_stringify(_inputs(args.messages, stdin), stdout)
        elif command == "mask":
            processed, failed = run_mask(args.pattern, _inputs(args.sources, stdin), stdout)
        else:
            indent = args.indent if args.indent >= 0 else None
            processed, failed = run_parse(
                _inputs(getattr(args, "lines", []), stdin), stdout, indent
            )
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
        return 130

    logger.log_event(
        "app", "finish", level=logging.INFO if not failed else logging.WARNING,
        processed=processed, failed=failed,
    )
    return 1 if failed else 0


def cli() -> None:
    LoggerConfigurator().configure()
    sys.exit(main())

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import colorama

from . import styling
from .api import run_string
from .config import (
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_MEMORY_SIZE,
    DEFAULT_SNAPSHOT_SIZE,
    OUTPUT_IMAGE,
    OUTPUT_TEXT,
    RunConfig,
)
from .engine import configure_logging
from .styling import TerminalSink

COMMANDS = '+-[].,><#@'

COMMAND_HELP = """\
Commands:
  >   increment the data pointer
  <   decrement the data pointer
  +   increment the byte at the data pointer
  -   decrement the byte at the data pointer
  .   output the byte at the data pointer
  ,   accept one byte of input
  [   jump forward past the matching ] if the byte at the pointer is 0
  ]   jump back to the matching [ if the byte at the pointer is nonzero
  #   print debug information
  @   print a memory snapshot
"""


def is_program_file(arg: str) -> bool:
    return len(arg) > 3 and arg.endswith('.bf')


def is_program_literal(arg: str) -> bool:
    return bool(arg) and arg[0] in COMMANDS


def load_source(arg: str) -> str:
    """Return program text for ``arg``, a ``.bf`` path or a literal program."""
    if is_program_file(arg):
        with open(arg, 'r', encoding='utf-8') as f:
            return f.read()
    if is_program_literal(arg):
        return arg
    raise ValueError("Invalid input. Please provide a valid Brainfuck command or file with .bf extension.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bfrun',
        description="Simple Brainfuck interpreter with text and image output.",
        epilog="<input> can be a .bf file or a program string, e.g. bfrun program.bf or bfrun '+++#'",
    )
    parser.add_argument("input", nargs="?", help="program file (*.bf) or program text")
    parser.add_argument("--image", action="store_true", help="change to image rendering mode")
    parser.add_argument("-w", "--width", type=int, default=DEFAULT_IMAGE_WIDTH,
                        help=f"set the image width (default: {DEFAULT_IMAGE_WIDTH})")
    parser.add_argument("--memory", type=int, default=DEFAULT_MEMORY_SIZE,
                        help=f"set the memory size (default: {DEFAULT_MEMORY_SIZE})")
    parser.add_argument("--snapx", type=int, default=DEFAULT_SNAPSHOT_SIZE,
                        help=f"set the snapshot start size (default: {DEFAULT_SNAPSHOT_SIZE})")
    parser.add_argument("--snapy", type=int, default=DEFAULT_SNAPSHOT_SIZE,
                        help=f"set the snapshot end size (default: {DEFAULT_SNAPSHOT_SIZE})")
    parser.add_argument("--png", metavar="PATH", help="image mode: also save the grid as a PNG file")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("--commands", action="store_true", help="list the supported commands and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="log interpreter activity to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(force=True)

    if args.commands:
        sys.stdout.write(COMMAND_HELP)
        return 0

    if args.input is None:
        print("[USAGE]: bfrun [options] <input>\n")
        print("for more help: bfrun --help")
        return 0

    try:
        code = load_source(args.input)
    except OSError as e:
        print(f"Error reading file: {e}")
        return 1
    except ValueError as e:
        print(e)
        return 1

    try:
        config = RunConfig(
            memory_size=args.memory,
            snapshot_start=args.snapx,
            snapshot_end=args.snapy,
            image_width=args.width,
            output_mode=OUTPUT_IMAGE if args.image else OUTPUT_TEXT,
        )
    except ValueError as e:
        parser.error(str(e))

    color = not args.no_color
    if color:
        colorama.just_fix_windows_console()
    sink = TerminalSink(sys.stdout, color=color)

    logging.getLogger(__name__).debug("loaded %d characters from %s", len(code), args.input)
    result = run_string(
        code,
        config=config,
        input_stream=sys.stdin.buffer,
        sink=sink,
        png_path=args.png if args.image else None,
    )
    if not result.ok:
        sink.write("\n")
        sink.write_styled("  Execution error  ", *styling.ERROR_BANNER)
        sink.write(f": {result.error}\n")
        sink.flush()
        return 1
    return 0


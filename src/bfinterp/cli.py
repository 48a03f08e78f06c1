from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import RunOptions, run_string
from .errors import BFError, ExecutionError
from .sources import BufferSource, StreamSource

PROMPT = "Enter Brainfuck code: "


def init_logging(debug: bool = False) -> None:
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)5s %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)


def format_first(output: bytes) -> str:
    if not output:
        return "Output is empty\n"
    b = output[0]
    return f"Output (int): {b}\nOutput (char): '{chr(b)}'\n"


def _stdin():
    # The program line and the program's input share one binary stream
    return getattr(sys.stdin, 'buffer', sys.stdin)


def _write_raw(data: bytes) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfinterp",
        description="Run a Brainfuck program on a circular byte tape."
    )
    parser.add_argument("file", nargs="?", help="Program file (omit to use -e or type one line)")
    parser.add_argument("-e", "--execute", metavar="CODE", help="Program text given on the command line")
    src = parser.add_mutually_exclusive_group()
    src.add_argument("-i", "--input", metavar="TEXT", help="Bytes fed to ',' (default: rest of stdin)")
    src.add_argument("--input-file", metavar="PATH", help="File whose bytes are fed to ','")
    parser.add_argument("--tape-length", type=int, default=None, help="Number of cells (default 30000)")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="Stop after this many steps (0 means no limit, as in BFINTERP_MAX_STEPS)")
    parser.add_argument("--no-jit", action="store_true", help="Use the pure Python loop")
    parser.add_argument("--format", choices=("raw", "first"), default="raw",
                        help="raw: write output bytes; first: report the first byte as int and char")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging on stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.file is not None and args.execute is not None:
        parser.error("give a program FILE or -e CODE, not both")
    init_logging(args.debug)

    try:
        env = RunOptions.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    options = RunOptions(
        tape_length=env.tape_length if args.tape_length is None else args.tape_length,
        max_steps=env.max_steps if args.max_steps is None else (args.max_steps or None),
        jit=env.jit and not args.no_jit,
    )

    if args.file is not None:
        try:
            with open(args.file, 'r', encoding='utf-8', errors='replace') as f:
                code = f.read()
        except OSError as e:
            print(f"Error: couldn't read {args.file}: {e.strerror}", file=sys.stderr)
            return 1
    elif args.execute is not None:
        code = args.execute
    else:
        sys.stderr.write(PROMPT)
        sys.stderr.flush()
        line = _stdin().readline()
        if isinstance(line, bytes):
            line = line.decode('utf-8', errors='replace')
        code = line.rstrip('\r\n')

    if args.input is not None:
        program_input = BufferSource(args.input.encode('utf-8'))
    elif args.input_file is not None:
        try:
            with open(args.input_file, 'rb') as f:
                program_input = BufferSource(f.read())
        except OSError as e:
            print(f"Error: couldn't read {args.input_file}: {e.strerror}", file=sys.stderr)
            return 1
    else:
        program_input = StreamSource(_stdin())

    try:
        result = run_string(code, input=program_input, options=options)
    except ExecutionError as e:
        _emit(e.output, args.format)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (BFError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _emit(result.output, args.format)
    return 0


def _emit(output: bytes, fmt: str) -> None:
    if fmt == "first":
        sys.stdout.write(format_first(output))
        sys.stdout.flush()
    else:
        _write_raw(output)


if __name__ == "__main__":
    raise SystemExit(main())

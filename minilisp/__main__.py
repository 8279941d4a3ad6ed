"""Command line entry point: run a file, a code string, or the interactive shell."""

from __future__ import annotations

import argparse
import logging
import sys

from minilisp import __version__
from minilisp.config import get_log_level
from minilisp.errors import MiniLispError
from minilisp.interpreter import Interpreter
from minilisp.interpreter.repl import Shell

logger = logging.getLogger("minilisp")


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minilisp", description="MiniLisp interpreter")
    parser.add_argument("file", nargs="?", help="file to interpret (if empty, starts the interactive shell)")
    parser.add_argument("-c", "--code", help="evaluate the given code and exit")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log evaluation steps (-vv for debug)")
    parser.add_argument("--max-depth", type=positive_int, help="maximum nested function calls")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    interp = Interpreter(max_depth=args.max_depth)
    if args.code is None and args.file is None:
        Shell(interp).cmdloop()
        return 0

    try:
        if args.code is not None:
            interp.eval(args.code)
        else:
            interp.run_file(args.file)
    except (OSError, UnicodeDecodeError) as ex:
        print(f"Unable to open the file: {ex}", file=sys.stderr)
        return 2
    except MiniLispError as ex:
        logger.debug("aborted", exc_info=True)
        print(f"{type(ex).__name__}: {ex}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line host: evaluate an expression, run a file, or start a REPL."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from pathlib import Path
from types import ModuleType
from typing import Callable, Optional, Sequence

readline: Optional[ModuleType]
try:
    # line editing and history for the interactive session
    import readline
except ImportError:
    readline = None

from ssli import LispValue, __version__
from ssli.config import get_history_file, get_log_level
from ssli.errors import ProgramExit, SsliError
from ssli.printer import to_source
from ssli.runtime import Runtime

logger = logging.getLogger(__name__)

PROMPT = "ssli> "
HISTORY_LENGTH = 4096


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="ssli", description="Small S-expression scripting language")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (default: $SSLI_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_eval = sub.add_parser("eval", help="Evaluate a string")
    p_eval.add_argument("expression", help="The expression to evaluate")

    p_file = sub.add_parser("file", help="Evaluate a file")
    p_file.add_argument("file", help="The file to evaluate")

    sub.add_parser("interactive", help="Start an interactive session")
    return parser


def _run(action: Callable[[], LispValue]) -> int:
    try:
        result = action()
    except SsliError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.info("result: %r", result)
    return 0


def load_history(history_file: Path) -> None:
    if readline is None:
        return
    if history_file.exists():
        try:
            readline.read_history_file(history_file)
        except OSError as e:
            logger.warning("Failed to read history file %s: %s", history_file, e)
    readline.set_history_length(HISTORY_LENGTH)


def save_history(history_file: Path) -> None:
    if readline is None:
        return
    try:
        readline.write_history_file(history_file)
    except OSError as e:
        logger.warning("Failed to write history file %s: %s", history_file, e)


def _repl(runtime: Runtime) -> int:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print("CTRL-D")
            return 0
        except KeyboardInterrupt:
            print("CTRL-C")
            return 0

        line = line.strip()
        if not line:
            continue
        try:
            print(f"=> {to_source(runtime.eval_string(line))}")
        except SsliError as e:
            print(f"Error: {e}", file=sys.stderr)


def interactive(runtime: Optional[Runtime] = None, history_file: Optional[Path] = None) -> int:
    """Read-eval-print loop over stdin. Errors are reported and the loop goes on.

    History is loaded from `history_file` (default: $SSLI_HISTORY_FILE or
    ~/.ssli_history) and written back when the session ends, also on `exit`.
    """
    runtime = runtime or Runtime()
    history_file = history_file or get_history_file()
    load_history(history_file)
    try:
        return _repl(runtime)
    finally:
        save_history(history_file)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = get_log_level()
    if args.log_level:
        level = logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("Parsed arguments: %s", args)

    runtime = Runtime()
    try:
        if args.command == "eval":
            return _run(lambda: runtime.eval_string(args.expression))
        if args.command == "file":
            return _run(lambda: runtime.eval_file(args.file))
        return interactive(runtime)
    except ProgramExit as e:
        logger.info("Program exited with code %d", e.code)
        return e.code


def entry_point() -> None:
    sys.exit(main())

"""Console I/O and script-level logging natives."""

from __future__ import annotations

import logging
import sys

from ssli import LispValue, SExpression
from ssli.builtin.strings import strings_format
from ssli.evaluation.evaluator import eval_args, evaluate
from ssli.types.environment import Environment
from ssli.types.value import as_string

logger = logging.getLogger(__name__)
script_logger = logging.getLogger("ssli.script")


def _joined(env: Environment, args: list[SExpression]) -> str:
    return " ".join(as_string(v) for v in eval_args(args, env))


def io_print(env: Environment, args: list[SExpression]) -> LispValue:
    text = _joined(env, args)
    logger.debug("Print: %s", text)
    print(text)
    return text


def io_printf(env: Environment, args: list[SExpression]) -> LispValue:
    text = strings_format(env, args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return text


def io_readline(env: Environment, args: list[SExpression]) -> LispValue:
    if args:
        sys.stdout.write(as_string(evaluate(args[0], env)) + " ")
        sys.stdout.flush()
    line = sys.stdin.readline()
    return line.strip()


def log_debug(env: Environment, args: list[SExpression]) -> LispValue:
    text = _joined(env, args)
    script_logger.debug("Debug: %s", text)
    return text


def log_info(env: Environment, args: list[SExpression]) -> LispValue:
    text = _joined(env, args)
    script_logger.info("Info: %s", text)
    return text


def log_warn(env: Environment, args: list[SExpression]) -> LispValue:
    text = _joined(env, args)
    script_logger.warning("Warn: %s", text)
    return text


def log_error(env: Environment, args: list[SExpression]) -> LispValue:
    text = _joined(env, args)
    script_logger.error("Error: %s", text)
    return text


def register(env: Environment) -> None:
    env.add_native("print", io_print)
    env.add_native("io.print", io_print)
    env.add_native("io.printf", io_printf)
    env.add_native("io.readline", io_readline)
    env.add_native("log.debug", log_debug)
    env.add_native("log.info", log_info)
    env.add_native("log.warn", log_warn)
    env.add_native("log.error", log_error)

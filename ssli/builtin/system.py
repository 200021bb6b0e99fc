from __future__ import annotations

import logging

from ssli import LispValue, SExpression
from ssli.builtin.args import eval_nth
from ssli.errors import ProgramExit
from ssli.modules.file_loader import import_file
from ssli.types.environment import Environment
from ssli.types.value import as_int, as_string

logger = logging.getLogger(__name__)


def exit_with_code(env: Environment, args: list[SExpression]) -> LispValue:
    """(exit [code]): stop the program; the host exits with `code`."""
    code = as_int(eval_nth(args, 0, env, "exit")) if args else 0
    logger.info("Program exit requested with code %d", code)
    raise ProgramExit(code)


def import_source(env: Environment, args: list[SExpression]) -> LispValue:
    """(import "path"): evaluate another file in the importer's frame."""
    path = as_string(eval_nth(args, 0, env, "import"))
    return import_file(path, env)


def register(env: Environment) -> None:
    env.add_native("exit", exit_with_code)
    env.add_native("import", import_source, True)

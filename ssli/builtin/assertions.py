from __future__ import annotations

import logging

from ssli import LispValue, SExpression
from ssli.builtin.args import eval_nth
from ssli.errors import SsliAssertionError
from ssli.printer import to_display, to_source
from ssli.types.environment import Environment
from ssli.types.nil import Nil
from ssli.types.value import as_bool, is_equal

logger = logging.getLogger(__name__)


def assert_cond(env: Environment, args: list[SExpression]) -> LispValue:
    cond = eval_nth(args, 0, env, "assert")
    if not as_bool(cond):
        raise SsliAssertionError(
            f"Condition validation failed for assert({to_display(cond)}): {to_source(args[0])}"
        )
    logger.info("assert(%s) passed", to_display(cond))
    return Nil


def assert_eq(env: Environment, args: list[SExpression]) -> LispValue:
    fst = eval_nth(args, 0, env, "assert.eq")
    snd = eval_nth(args, 1, env, "assert.eq")
    if not is_equal(fst, snd):
        raise SsliAssertionError(
            f"Condition validation failed for assert({to_display(fst)} == {to_display(snd)})"
        )
    logger.info("assert(%s == %s) passed", to_display(fst), to_display(snd))
    return Nil


def register(env: Environment) -> None:
    env.add_native("assert", assert_cond, True)
    env.add_native("assert.eq", assert_eq, True)

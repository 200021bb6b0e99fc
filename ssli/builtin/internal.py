"""Introspection natives."""

from __future__ import annotations

import logging

from ssli import LispValue, SExpression
from ssli.builtin.args import eval_nth
from ssli.evaluation.evaluator import call_by_name
from ssli.printer import to_display
from ssli.types.environment import Environment
from ssli.types.nil import Nil
from ssli.types.value import as_string

logger = logging.getLogger(__name__)


def func_nat_call(env: Environment, args: list[SExpression]) -> LispValue:
    """(internal.func.nat.call "name" args...)"""
    name = as_string(eval_nth(args, 0, env, "internal.func.nat.call"))
    return call_by_name(name, args[1:], env)


def func_list(env: Environment, args: list[SExpression]) -> LispValue:
    names = sorted(env.funcs.keys())
    for name in names:
        logger.info("Function: %s", name)
    return names


def print_env(env: Environment, args: list[SExpression]) -> LispValue:
    for name, func in sorted(env.funcs.all().items()):
        print(f"fn {name}: {func}")
    for name, value in sorted(env.vars.all().items()):
        print(f"var {name}: {to_display(value)}")
    return Nil


def register(env: Environment) -> None:
    env.add_native("internal.func.nat.call", func_nat_call, True)
    env.add_native("internal.func.list", func_list, True)
    env.add_native("internal.printenv", print_env, True)

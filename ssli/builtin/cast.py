from __future__ import annotations

from ssli import LispValue, SExpression
from ssli.builtin.args import eval_nth
from ssli.types.environment import Environment
from ssli.types.value import as_bool, as_float, as_int, as_list, as_string


def cast_string(env: Environment, args: list[SExpression]) -> LispValue:
    return as_string(eval_nth(args, 0, env, "cast.string"))


def cast_int(env: Environment, args: list[SExpression]) -> LispValue:
    return as_int(eval_nth(args, 0, env, "cast.int"))


def cast_float(env: Environment, args: list[SExpression]) -> LispValue:
    return as_float(eval_nth(args, 0, env, "cast.float"))


def cast_bool(env: Environment, args: list[SExpression]) -> LispValue:
    return as_bool(eval_nth(args, 0, env, "cast.bool"))


def cast_list(env: Environment, args: list[SExpression]) -> LispValue:
    return as_list(eval_nth(args, 0, env, "cast.list"))


def register(env: Environment) -> None:
    env.add_native("cast.string", cast_string)
    env.add_native("cast.int", cast_int)
    env.add_native("cast.float", cast_float)
    env.add_native("cast.bool", cast_bool)
    env.add_native("cast.list", cast_list)

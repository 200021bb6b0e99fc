"""List natives.

Sequence arguments go through `as_list`, so a scalar behaves like a
one-element list. This keeps results that were folded by the single-element
unwrap rule usable as lists.
"""

from __future__ import annotations

from ssli import LispValue, SExpression
from ssli.builtin.args import eval_nth
from ssli.errors import SsliTypeError
from ssli.evaluation.evaluator import call_with_values
from ssli.types.environment import Environment
from ssli.types.value import as_bool, as_function, as_int, as_list


def _non_empty(env: Environment, args: list[SExpression], name: str) -> list[LispValue]:
    items = as_list(eval_nth(args, 0, env, name))
    if not items:
        raise SsliTypeError(f"{name} requires a non-empty list")
    return items


def list_head(env: Environment, args: list[SExpression]) -> LispValue:
    return _non_empty(env, args, "head")[0]


def list_last(env: Environment, args: list[SExpression]) -> LispValue:
    return _non_empty(env, args, "last")[-1]


def list_seq(env: Environment, args: list[SExpression]) -> LispValue:
    """(list.seq start end [step]): integers from start up to, not including, end."""
    start = as_int(eval_nth(args, 0, env, "list.seq"))
    end = as_int(eval_nth(args, 1, env, "list.seq"))
    step = as_int(eval_nth(args, 2, env, "list.seq")) if len(args) > 2 else 1
    if step <= 0:
        raise SsliTypeError(f"list.seq step must be positive, got {step}")
    return list(range(start, end, step))


def list_len(env: Environment, args: list[SExpression]) -> LispValue:
    return len(as_list(eval_nth(args, 0, env, "list.len")))


def list_map(env: Environment, args: list[SExpression]) -> LispValue:
    """(list.map f xs)"""
    func = as_function(eval_nth(args, 0, env, "list.map"))
    items = as_list(eval_nth(args, 1, env, "list.map"))
    return [call_with_values(func, [item], env) for item in items]


def list_filter(env: Environment, args: list[SExpression]) -> LispValue:
    """(list.filter pred xs)"""
    func = as_function(eval_nth(args, 0, env, "list.filter"))
    items = as_list(eval_nth(args, 1, env, "list.filter"))
    return [item for item in items if as_bool(call_with_values(func, [item], env))]


def register(env: Environment) -> None:
    env.add_native("head", list_head)
    env.add_native("last", list_last)
    env.add_native("list.seq", list_seq)
    env.add_native("list.len", list_len)
    env.add_native("list.map", list_map)
    env.add_native("list.filter", list_filter)

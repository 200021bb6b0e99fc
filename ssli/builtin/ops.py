"""Arithmetic, comparison and boolean operators.

Arithmetic is typed by its operands: any String operand makes `+` a string
concatenation, otherwise any Float makes the result a Float, otherwise it is an
Integer computation that must stay within the signed 64-bit range.
"""

from __future__ import annotations

import math
from functools import reduce
from typing import Callable

from ssli import LispValue, SExpression
from ssli.builtin.args import eval_nth, require
from ssli.errors import SsliArithmeticError, SsliTypeError
from ssli.evaluation.evaluator import eval_args, evaluate
from ssli.printer import to_display
from ssli.reader.parser import INT_MAX, INT_MIN
from ssli.types.environment import Environment
from ssli.types.value import as_bool, as_float, as_int, as_string, is_equal, type_name


def _operands(env: Environment, args: list[SExpression], name: str) -> list[LispValue]:
    require(args, 1, name)
    return eval_args(args, env)


def _any_float(values: list[LispValue]) -> bool:
    return any(isinstance(v, float) for v in values)


def _int_div(a: int, b: int) -> int:
    if b == 0:
        raise SsliArithmeticError("Division by zero")
    # truncate toward zero
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _float_div(a: float, b: float) -> float:
    if b == 0:
        raise SsliArithmeticError("Division by zero")
    return a / b


def _int_rem(a: int, b: int) -> int:
    if b == 0:
        raise SsliArithmeticError("Remainder by zero")
    return a - b * _int_div(a, b)


def _float_rem(a: float, b: float) -> float:
    if b == 0:
        raise SsliArithmeticError("Remainder by zero")
    return math.fmod(a, b)


def _checked(value: int) -> int:
    """Integers are signed 64-bit; leaving that range is an error."""
    if value < INT_MIN or value > INT_MAX:
        raise SsliArithmeticError("Integer overflow")
    return value


def _fold(
    values: list[LispValue],
    int_op: Callable[[int, int], int],
    float_op: Callable[[float, float], float],
) -> LispValue:
    if _any_float(values):
        return reduce(float_op, (as_float(v) for v in values))
    return reduce(lambda a, b: _checked(int_op(a, b)), (as_int(v) for v in values))


def add(env: Environment, args: list[SExpression]) -> LispValue:
    values = _operands(env, args, "+")
    if any(isinstance(v, str) for v in values):
        return "".join(as_string(v) for v in values)
    if _any_float(values):
        return sum(as_float(v) for v in values)
    return reduce(lambda a, b: _checked(a + b), (as_int(v) for v in values))


def sub(env: Environment, args: list[SExpression]) -> LispValue:
    return _fold(_operands(env, args, "-"), lambda a, b: a - b, lambda a, b: a - b)


def mul(env: Environment, args: list[SExpression]) -> LispValue:
    return _fold(_operands(env, args, "*"), lambda a, b: a * b, lambda a, b: a * b)


def div(env: Environment, args: list[SExpression]) -> LispValue:
    return _fold(_operands(env, args, "/"), _int_div, _float_div)


def mod(env: Environment, args: list[SExpression]) -> LispValue:
    return _fold(_operands(env, args, "%"), _int_rem, _float_rem)


# -------------------------------
# Comparison
# -------------------------------
def _is_number(v: LispValue) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _compare(a: LispValue, b: LispValue) -> int:
    """Three-way compare; numbers compare across Integer/Float."""
    if _is_number(a) and _is_number(b):
        pass
    elif isinstance(a, bool) and isinstance(b, bool):
        pass
    elif isinstance(a, str) and isinstance(b, str):
        pass
    elif isinstance(a, list) and isinstance(b, list):
        for x, y in zip(a, b):
            c = _compare(x, y)
            if c != 0:
                return c
        return (len(a) > len(b)) - (len(a) < len(b))
    else:
        raise SsliTypeError(
            f"Cannot compare {to_display(a)} ({type_name(a)}) with {to_display(b)} ({type_name(b)})"
        )
    return (a > b) - (a < b)


def _compare_first(
    env: Environment, args: list[SExpression], name: str, accept: Callable[[int], bool]
) -> bool:
    first = eval_nth(args, 0, env, name)
    for expr in args[1:]:
        if not accept(_compare(first, evaluate(expr, env))):
            return False
    return True


def cmp_less(env: Environment, args: list[SExpression]) -> bool:
    return _compare_first(env, args, "<", lambda c: c < 0)


def cmp_great(env: Environment, args: list[SExpression]) -> bool:
    return _compare_first(env, args, ">", lambda c: c > 0)


def cmp_less_eq(env: Environment, args: list[SExpression]) -> bool:
    return _compare_first(env, args, "<=", lambda c: c <= 0)


def cmp_great_eq(env: Environment, args: list[SExpression]) -> bool:
    return _compare_first(env, args, ">=", lambda c: c >= 0)


def cmp_eq(env: Environment, args: list[SExpression]) -> bool:
    """True when every operand equals the first; the first is evaluated once."""
    first = eval_nth(args, 0, env, "==")
    for expr in args[1:]:
        if not is_equal(first, evaluate(expr, env)):
            return False
    return True


def cmp_neq(env: Environment, args: list[SExpression]) -> bool:
    """False as soon as any operand equals the first."""
    first = eval_nth(args, 0, env, "!=")
    for expr in args[1:]:
        if is_equal(first, evaluate(expr, env)):
            return False
    return True


# -------------------------------
# Boolean logic (short-circuit)
# -------------------------------
def logical_and(env: Environment, args: list[SExpression]) -> bool:
    for expr in args:
        if not as_bool(evaluate(expr, env)):
            return False
    return True


def logical_or(env: Environment, args: list[SExpression]) -> bool:
    for expr in args:
        if as_bool(evaluate(expr, env)):
            return True
    return False


def logical_not(env: Environment, args: list[SExpression]) -> bool:
    return not as_bool(eval_nth(args, 0, env, "not"))


def register(env: Environment) -> None:
    env.add_native("+", add)
    env.add_native("-", sub)
    env.add_native("*", mul)
    env.add_native("/", div)
    env.add_native("%", mod)

    env.add_native("==", cmp_eq)
    env.add_native("!=", cmp_neq)
    env.add_native("<", cmp_less)
    env.add_native(">", cmp_great)
    env.add_native("<=", cmp_less_eq)
    env.add_native(">=", cmp_great_eq)
    env.add_native("&&", logical_and)
    env.add_native("||", logical_or)
    env.add_native("not", logical_not)

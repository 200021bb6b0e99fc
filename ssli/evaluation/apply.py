"""Application engine for ssli.

Centralizes the function-call protocol:
- Natives run either in a fresh child of the caller's frame or, when flagged
  `same_env`, directly in the caller's frame. They always receive the
  *unevaluated* argument forms.
- Closures run in a fresh child of their captured defining frame. Actual
  arguments are evaluated in the caller's frame and bound positionally;
  extra arguments are ignored and missing ones stay unbound.
"""

from __future__ import annotations

import logging

from ssli import LispValue, SExpression
from ssli.errors import SsliTypeError
from ssli.types.environment import Environment
from ssli.types.function import Closure, Function, Native
from ssli.types.nil import Nil
from ssli.types.symbol import Symbol

logger = logging.getLogger(__name__)


def apply_native(
    func: Function, args: list[SExpression], env: Environment
) -> LispValue:
    native: Native = func.kind  # type: ignore[assignment]
    frame = env if func.same_env else env.make_child()
    logger.debug("Calling native [%s] with %d arg(s)", func.name, len(args))
    result = native.fn(frame, args)
    # Host natives may return None; the language has Nil for that
    return Nil if result is None else result


def apply_closure(
    func: Function,
    args: list[SExpression],
    caller_env: Environment,
    evaluate_fn,
) -> LispValue:
    closure: Closure = func.kind  # type: ignore[assignment]
    # Lexical scoping: parent is the defining frame, not the caller's
    frame = closure.env.make_child()
    for name, arg in zip(closure.params, args):
        frame.set(name, evaluate_fn(arg, caller_env))
    logger.debug("Calling closure [%s] with params %s", func.name, closure.params)
    return evaluate_fn(closure.body, frame)


def apply(
    func: Function,
    args: list[SExpression],
    env: Environment,
    evaluate_fn,
) -> LispValue:
    """Apply either a Native or a Closure function."""
    match func.kind:
        case Native():
            return apply_native(func, args, env)
        case Closure():
            return apply_closure(func, args, env, evaluate_fn)
    raise SsliTypeError(f"Cannot apply non-function {func!r}")


def apply_values(
    func: Function,
    values: list[LispValue],
    env: Environment,
    evaluate_fn,
) -> LispValue:
    """Apply `func` to already-evaluated values.

    Closures bind the values directly. Natives only accept forms, so each
    value is bound in a holder frame and passed as a symbol referring to it.
    """
    match func.kind:
        case Closure(params=params, body=body, env=defining_env):
            frame = defining_env.make_child()
            for name, value in zip(params, values):
                frame.set(name, value)
            return evaluate_fn(body, frame)
        case Native():
            holder = env.make_child()
            forms = []
            for i, value in enumerate(values):
                name = f" arg{i}"  # the reader can never produce a name with a space
                holder.set(name, value)
                forms.append(Symbol(name))
            return apply_native(func, forms, holder)
    raise SsliTypeError(f"Cannot apply non-function {func!r}")

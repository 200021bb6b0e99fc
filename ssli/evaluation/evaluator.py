"""Core evaluator for the ssli interpreter.

Dispatch over a form:

- atoms evaluate to themselves
- a Symbol resolves through the environment (variables, then procedures)
- a bare Function value is invoked with no arguments
- a list dispatches on its first element:
    1. ``()``                 -> nil
    2. Symbol head            -> call the named function
    3. Function head          -> call it directly
    4. list head              -> evaluate the head; if it yields a Function and
                                 the form is not a block made only of lists,
                                 apply it to the rest, otherwise evaluate the
                                 whole form as a sequence and keep the last value
    5. anything else          -> evaluate every element into a data list

Any call or sequence whose result is a one-element list yields that single
element instead.
"""

from __future__ import annotations

import logging

from ssli import SExpression, LispValue
from ssli.evaluation.apply import apply, apply_values
from ssli.types.environment import Environment
from ssli.types.function import Function
from ssli.types.nil import Nil
from ssli.types.symbol import Symbol

logger = logging.getLogger(__name__)


def unwrap(value: LispValue) -> LispValue:
    """Fold a single-element list into its element."""
    if isinstance(value, list) and len(value) == 1:
        return value[0]
    return value


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case list():
            return evaluate_list(expr, env)
        case Symbol():
            return env.get(expr.id)
        case Function():
            return call_function(expr, [], env)

    # --- Atoms return as-is ---
    return expr


def evaluate_list(items: list[SExpression], env: Environment) -> LispValue:
    if not items:
        return Nil

    head, tail = items[0], items[1:]
    match head:
        case Symbol():
            return call_function(env.get_function(head.id), tail, env)
        case Function():
            return call_function(head, tail, env)
        case list():
            first = evaluate(head, env)
            if isinstance(first, Function) and not all(isinstance(e, list) for e in items):
                return call_function(first, tail, env)
            return evaluate_sequence(first, tail, env)

    # Data literal: (1 2 3), ("a" x)
    return eval_args(items, env)


def evaluate_sequence(
    first: LispValue, rest: list[SExpression], env: Environment
) -> LispValue:
    """Continue a block whose first form has already been evaluated."""
    result = first
    for expr in rest:
        result = evaluate(expr, env)
    return unwrap(result)


def call_function(func: Function, args: list[SExpression], env: Environment) -> LispValue:
    logger.debug("[EVAL] Evaluating function: %r with %d arg(s)", func.name, len(args))
    result = unwrap(apply(func, args, env, evaluate))
    logger.debug("Function call result: %r", result)
    return result


def call_with_values(func: Function, values: list[LispValue], env: Environment) -> LispValue:
    """Call `func` with arguments that are already values, not forms."""
    return unwrap(apply_values(func, values, env, evaluate))


def call_by_name(name: str, args: list[SExpression], env: Environment) -> LispValue:
    return call_function(env.get_function(name), args, env)


def eval_args(args: list[SExpression], env: Environment) -> list[LispValue]:
    return [evaluate(arg, env) for arg in args]


def evaluate_forms(forms: list[SExpression], env: Environment) -> LispValue:
    """Evaluate top-level forms in order; the last result wins."""
    result: LispValue = Nil
    for form in forms:
        result = evaluate(form, env)
    return result

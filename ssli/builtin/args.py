"""Argument helpers shared by native procedures."""

from __future__ import annotations

from ssli import LispValue, SExpression
from ssli.errors import SsliArityError, SsliTypeError
from ssli.evaluation.evaluator import evaluate
from ssli.printer import to_display
from ssli.types.environment import Environment
from ssli.types.symbol import Symbol


def require(args: list[SExpression], count: int, name: str) -> None:
    if len(args) < count:
        raise SsliArityError(
            f"{name} requires at least {count} argument(s), got {len(args)}"
        )


def eval_nth(args: list[SExpression], i: int, env: Environment, name: str) -> LispValue:
    """Evaluate the i-th argument form, raising SsliArityError when absent."""
    require(args, i + 1, name)
    return evaluate(args[i], env)


def name_of(form: SExpression, what: str) -> str:
    """Binding name from an unevaluated Symbol or String form."""
    if isinstance(form, Symbol):
        return form.id
    if isinstance(form, str):
        return form
    raise SsliTypeError(f"{what} name must be a symbol or string, got {to_display(form)}")

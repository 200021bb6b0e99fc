"""Core forms: function definition, variables, conditionals and loops.

All of these run in the caller's own frame (same_env) since they must see
and mutate the caller's bindings.
"""

from __future__ import annotations

import logging

from ssli import LispValue, SExpression
from ssli.builtin.args import eval_nth, name_of, require
from ssli.errors import SsliTypeError
from ssli.evaluation.evaluator import evaluate
from ssli.types.environment import Environment
from ssli.types.function import Closure, Function
from ssli.types.nil import Nil
from ssli.types.symbol import Symbol
from ssli.types.value import as_bool, as_list

logger = logging.getLogger(__name__)

ANONYMOUS = "anonymous"


def func_def(env: Environment, args: list[SExpression]) -> LispValue:
    """(fn name (params) body) or (fn (params) body)."""
    require(args, 1, "fn")
    if isinstance(args[0], list):
        name, start = ANONYMOUS, 0
    else:
        name, start = name_of(args[0], "Function"), 1
    require(args, start + 2, "fn")

    params_form = args[start]
    if not isinstance(params_form, list):
        raise SsliTypeError(f"Function {name} parameter list must be a list")
    params = [name_of(p, "Parameter") for p in params_form]

    func = Function(name, Closure(params, args[start + 1], env))
    if name != ANONYMOUS:
        logger.info("Defining function: %s", name)
        env.define_function(name, func)
    return func


def set_var(env: Environment, args: list[SExpression]) -> LispValue:
    """(def name value): update the closest existing binding or create one here."""
    require(args, 1, "def")
    name = name_of(args[0], "Variable")
    value = evaluate(args[1], env) if len(args) > 1 else Nil
    logger.debug("Setting variable: %s", name)
    env.set_or_update(name, value)
    return value


def unset_var(env: Environment, args: list[SExpression]) -> LispValue:
    require(args, 1, "undef")
    env.unset(name_of(args[0], "Variable"))
    return Nil


def cond_if(env: Environment, args: list[SExpression]) -> LispValue:
    """(if cond then [else]); only the chosen branch is evaluated."""
    require(args, 2, "if")
    if as_bool(evaluate(args[0], env)):
        return evaluate(args[1], env)
    if len(args) > 2:
        return evaluate(args[2], env)
    return Nil


def cycle_while(env: Environment, args: list[SExpression]) -> LispValue:
    """(while cond body); always nil."""
    require(args, 1, "while")
    while as_bool(evaluate(args[0], env)):
        if len(args) > 1:
            evaluate(args[1], env)
    return Nil


def cycle_for(env: Environment, args: list[SExpression]) -> LispValue:
    """(for i seq body) or (for (i) seq body); always nil."""
    require(args, 3, "for")
    var_form = args[0]
    if isinstance(var_form, list) and len(var_form) == 1:
        var_form = var_form[0]
    if not isinstance(var_form, Symbol):
        raise SsliTypeError("for loop variable must be a symbol")

    seq = as_list(eval_nth(args, 1, env, "for"))
    for item in seq:
        env.set(var_form.id, item)
        evaluate(args[2], env)
    return Nil


def register(env: Environment) -> None:
    env.add_native("fn", func_def, True)
    env.add_native("def", set_var, True)
    env.add_native("undef", unset_var, True)
    env.add_native("if", cond_if, True)
    env.add_native("while", cycle_while, True)
    env.add_native("for", cycle_for, True)

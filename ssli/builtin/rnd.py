from __future__ import annotations

import random

from ssli import LispValue, SExpression
from ssli.builtin.args import eval_nth
from ssli.errors import SsliTypeError
from ssli.types.environment import Environment
from ssli.types.value import as_int


def random_int(env: Environment, args: list[SExpression]) -> LispValue:
    """(rnd.int [min] [max]): random integer in [min, max]; defaults 0 and 100."""
    low = as_int(eval_nth(args, 0, env, "rnd.int")) if len(args) > 0 else 0
    high = as_int(eval_nth(args, 1, env, "rnd.int")) if len(args) > 1 else 100
    if low > high:
        raise SsliTypeError(f"rnd.int: empty range [{low}, {high}]")
    return random.randint(low, high)


def register(env: Environment) -> None:
    env.add_native("rnd.int", random_int)

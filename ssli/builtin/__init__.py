"""Native procedure library.

`register` populates a root environment with every built-in, in a fixed
order. Each call builds fresh bindings, so independent runtimes never share
state.
"""

from ssli.builtin import assertions, cast, console, core, internal, lists, ops, rnd, strings, system
from ssli.types.environment import Environment


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    core.register(env)
    console.register(env)
    cast.register(env)
    ops.register(env)
    lists.register(env)
    strings.register(env)
    internal.register(env)
    assertions.register(env)
    rnd.register(env)
    system.register(env)

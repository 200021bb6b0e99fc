"""Function values: host-registered natives and lexical closures."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from ssli import SExpression, NativeFn

if TYPE_CHECKING:
    from ssli.types.environment import Environment


class Native:
    """A host procedure called with (env, unevaluated argument forms)."""

    __slots__ = ("fn",)

    def __init__(self, fn: NativeFn):
        self.fn: NativeFn = fn


class Closure:
    """Parameter names and body paired with the frame active at definition."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[str], body: SExpression, env: Environment):
        self.params: list[str] = params
        self.body: SExpression = body
        # Captured by reference: mutations through set_or_update stay visible
        self.env: Environment = env


class Function:
    """A first-class function value: metadata plus a Native or Closure kind."""

    __slots__ = ("name", "same_env", "kind")

    def __init__(self, name: str, kind: Native | Closure, same_env: bool = False):
        self.name: str = name
        self.same_env: bool = same_env
        self.kind: Native | Closure = kind

    @property
    def is_native(self) -> bool:
        return isinstance(self.kind, Native)

    def __str__(self) -> str:
        match self.kind:
            case Native():
                return f"(native {self.name})"
            case Closure(params=params):
                with StringIO() as buffer:
                    buffer.write("(fn ")
                    buffer.write(self.name)
                    buffer.write(" (")
                    buffer.write(" ".join(params))
                    buffer.write("))")
                    return buffer.getvalue()
        return f"(function {self.name})"

    def __repr__(self) -> str:
        return str(self)

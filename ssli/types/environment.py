"""Runtime environment for ssli.

An Environment is one frame of the hierarchical scope. It holds two
independent namespaces, variables and procedures, each a `Scope` chained to
the corresponding Scope of the parent frame. Frames are shared by reference:
every child frame and every closure that captured a frame holds the same
object, so a mutation through `set_or_update` or `unset` is immediately
visible to all of them.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Generic, Iterator, Optional, TypeVar, TYPE_CHECKING

from ssli import LispValue, NativeFn
from ssli.errors import SsliNameError, SsliUnboundSymbol
from ssli.types.function import Function, Native

if TYPE_CHECKING:
    from ssli.modules.file_loader import ImportState

logger = logging.getLogger(__name__)

V = TypeVar("V")


class Scope(Generic[V]):
    """A name -> value map with an optional parent Scope."""

    __slots__ = ("data", "outer")

    def __init__(self, outer: Optional[Scope[V]] = None):
        self.data: dict[str, V] = {}
        self.outer: Scope[V] | None = outer

    def find(self, name: str) -> Optional[Scope[V]]:
        """Find the nearest scope in the chain that binds `name`."""
        scope: Optional[Scope[V]] = self
        while scope is not None:
            if name in scope.data:
                return scope
            scope = scope.outer
        return None

    def get(self, name: str) -> Optional[V]:
        scope = self.find(name)
        if scope is None:
            return None
        return scope.data[name]

    def set(self, name: str, value: V) -> None:
        """Bind in this scope only, shadowing any outer binding."""
        self.data[name] = value

    def set_or_update(self, name: str, value: V) -> None:
        """Overwrite the closest existing binding, else bind in this scope."""
        scope = self.find(name)
        if scope is None:
            scope = self
        scope.data[name] = value

    def unset(self, name: str) -> None:
        self.data.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def keys(self) -> Iterator[str]:
        """Visible names, innermost first, without duplicates."""
        seen: set[str] = set()
        scope: Optional[Scope[V]] = self
        while scope is not None:
            for k in scope.data:
                if k not in seen:
                    seen.add(k)
                    yield k
            scope = scope.outer

    def all(self) -> dict[str, V]:
        """Flattened view; inner bindings win over outer ones."""
        return {k: self.get(k) for k in self.keys()}

    def is_empty(self) -> bool:
        return not self.data


class Environment:
    """One frame: variables and procedures namespaces plus shared import state."""

    __slots__ = ("vars", "funcs", "outer", "imports")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        imports: Optional[ImportState] = None,
    ):
        self.outer: Environment | None = outer
        self.vars: Scope[LispValue] = Scope(outer.vars if outer else None)
        self.funcs: Scope[Function] = Scope(outer.funcs if outer else None)
        # Import state is per runtime and shared by every frame descended from the root
        if imports is None and outer is not None:
            imports = outer.imports
        self.imports: ImportState | None = imports

    def make_child(self) -> Environment:
        return Environment(outer=self)

    # --- variables ---
    def get(self, name: str) -> LispValue:
        """Resolve a bare symbol: variables first, then procedures.

        Raises SsliUnboundSymbol if neither namespace binds `name`.
        """
        scope = self.vars.find(name)
        if scope is not None:
            return scope.data[name]
        func = self.funcs.get(name)
        if func is not None:
            return func
        raise SsliUnboundSymbol(f"Undeclared variable: {name}")

    def set(self, name: str, value: LispValue) -> None:
        self.vars.set(name, value)

    def set_or_update(self, name: str, value: LispValue) -> None:
        self.vars.set_or_update(name, value)

    def unset(self, name: str) -> None:
        self.vars.unset(name)

    # --- procedures ---
    def get_function(self, name: str) -> Function:
        """Resolve a call head: procedures first, then a variable holding a Function."""
        func = self.funcs.get(name)
        if func is not None:
            return func
        scope = self.vars.find(name)
        if scope is not None and isinstance(scope.data[name], Function):
            return scope.data[name]
        raise SsliNameError(f"No function found with name: {name}")

    def define_function(self, name: str, func: Function) -> None:
        self.funcs.set(name, func)

    def add_native(self, name: str, fn: NativeFn, same_env: bool = False) -> None:
        logger.debug("Adding native function: %s", name)
        self.funcs.set(name, Function(name, Native(fn), same_env))

    def _write_scope(self, buffer: StringIO, scope: Scope) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in scope.data.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            if not self.funcs.is_empty():
                buffer.write(f"Funcs: {list(self.funcs.data)} ; ")
            buffer.write("Vars: ")
            self._write_scope(buffer, self.vars)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain of variable frames, innermost first."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                env_buf = StringIO()
                self._write_scope(env_buf, env.vars)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()

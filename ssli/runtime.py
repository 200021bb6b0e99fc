from __future__ import annotations

import logging
from pathlib import Path

from ssli import LispValue, NativeFn, SExpression
from ssli.builtin import register
from ssli.errors import SsliImportError
from ssli.evaluation.evaluator import evaluate_forms
from ssli.modules.file_loader import ImportState, eval_path, eval_source
from ssli.types.environment import Environment

logger = logging.getLogger(__name__)


class Runtime:
    """
    Owns a root Environment, its native registry and its import state.
    Every instance is independent, so tests can build as many as they need.
    """

    def __init__(self, builtins: bool = True):
        self.imports: ImportState = ImportState()
        self._env: Environment = Environment(imports=self.imports)
        if builtins:
            register(self._env)

    @property
    def env(self) -> Environment:
        return self._env

    def register(self, name: str, fn: NativeFn, same_env: bool = False) -> None:
        """Expose a host procedure `fn(env, args)` under `name`."""
        self._env.add_native(name, fn, same_env)

    def eval_string(self, source: str) -> LispValue:
        return eval_source(source, self._env)

    def eval_parsed(self, forms: list[SExpression]) -> LispValue:
        return evaluate_forms(forms, self._env)

    def eval_file(self, file_path: str | Path) -> LispValue:
        path = Path(file_path)
        try:
            canonical = path.resolve(strict=True)
        except OSError as e:
            raise SsliImportError(f"Failed to canonicalize path {file_path}: {e}") from e
        logger.info("Processing file %s", canonical)
        return eval_path(canonical, self._env, self.imports)

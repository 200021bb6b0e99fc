"""File import protocol.

`(import "path")` evaluates another source file in the importer's own
environment, so the imported file's top-level definitions become visible to
the importer. Relative paths resolve against the directory of the file being
evaluated (or the working directory when there is none); when the literal path
does not exist the configured source extension is appended. Files are keyed by
canonical path: importing a file that is still being imported is an error.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ssli import LispValue
from ssli.config import get_source_extension
from ssli.errors import SsliCircularImportError, SsliImportError
from ssli.evaluation.evaluator import evaluate_forms
from ssli.reader.parser import read
from ssli.types.environment import Environment

logger = logging.getLogger(__name__)


class ImportState:
    """Files mid-import (cycle guard) and the file currently being evaluated."""

    def __init__(self):
        self.in_progress: set[Path] = set()
        self.current_file: Optional[Path] = None

    @contextmanager
    def entering(self, path: Path) -> Iterator[None]:
        """Mark `path` as in progress and current for the duration of the block."""
        if path in self.in_progress:
            raise SsliCircularImportError(f"Circular import detected: {path}")
        previous = self.current_file
        self.in_progress.add(path)
        self.current_file = path
        try:
            yield
        finally:
            self.in_progress.discard(path)
            self.current_file = previous


def resolve_import_path(path_str: str, state: ImportState) -> Path:
    """Resolve and canonicalize an import path; raises SsliImportError if absent."""
    path = Path(path_str)
    if not path.is_absolute():
        base = state.current_file.parent if state.current_file is not None else Path.cwd()
        path = base / path

    candidates = [path]
    ext = get_source_extension()
    if not path.name.endswith(ext):
        candidates.append(path.with_name(path.name + ext))

    for candidate in candidates:
        if candidate.is_file():
            return candidate.resolve()
    raise SsliImportError(f"File not found for import: {path_str}")


def eval_source(source: str, env: Environment) -> LispValue:
    return evaluate_forms(read(source), env)


def eval_path(path: Path, env: Environment, state: ImportState) -> LispValue:
    """Read and evaluate a canonical `path` in `env` under the import guard."""
    with state.entering(path):
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SsliImportError(f"Failed to read {path}: {e}") from e
        return eval_source(source, env)


def import_file(path_str: str, env: Environment) -> LispValue:
    state = env.imports
    if state is None:
        raise SsliImportError("Import is not available in this environment")
    path = resolve_import_path(path_str, state)
    logger.info("Importing file: %s", path)
    return eval_path(path, env, state)

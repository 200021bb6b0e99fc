from __future__ import annotations
import logging
import os
from pathlib import Path

_DEFAULT_SOURCE_EXTENSION = '.ssli'
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_HISTORY_FILE = '~/.ssli_history'


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_source_extension() -> str:
    ext = value_from_env('SSLI_SOURCE_EXTENSION', _DEFAULT_SOURCE_EXTENSION)
    # accept both "ssli" and ".ssli"
    return ext if ext.startswith('.') else '.' + ext


def get_log_level() -> int:
    name = value_from_env('SSLI_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_history_file() -> Path:
    raw = value_from_env('SSLI_HISTORY_FILE', _DEFAULT_HISTORY_FILE)
    return Path(raw).expanduser()

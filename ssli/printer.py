"""Rendering of ssli values.

Two renderings are provided:

- ``to_display``: the human-facing form used by ``print``, string
  concatenation and ``cast.string``. Lists render as ``(a, b, c)`` and strings
  render without quotes.
- ``to_source``: a re-readable form. For any value that contains no functions,
  ``parse(tokenize(to_source(v)))`` reproduces ``v``.
"""

from __future__ import annotations

import math
from decimal import Decimal

from ssli import LispValue
from ssli.types.function import Function
from ssli.types.nil import NilType
from ssli.types.symbol import Symbol


def _display_float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if x.is_integer():
        # 2.0 -> "2", -0.0 -> "-0"
        return ("-" if math.copysign(1.0, x) < 0 and x == 0 else "") + str(int(x))
    text = repr(x)
    if "e" in text or "E" in text:
        # no scientific notation in display form
        return format(Decimal(text), "f")
    return text


def to_display(value: LispValue) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float():
            return _display_float(value)
        case str():
            return value
        case Symbol():
            return value.id
        case list():
            return "(" + ", ".join(to_display(v) for v in value) + ")"
        case NilType():
            return "nil"
        case Function():
            return str(value)
    return str(value)


def _quote(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_source(value: LispValue) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float():
            return repr(value)
        case str():
            return _quote(value)
        case Symbol():
            return value.id
        case list():
            return "(" + " ".join(to_source(v) for v in value) + ")"
        case NilType():
            return "nil"
    return str(value)

"""Coercions between value variants.

Every check for ``int`` is preceded by a check for ``bool`` since ``bool`` is
an ``int`` subclass in Python but a distinct variant in the language.
"""

from __future__ import annotations

import math

from ssli import LispValue
from ssli.errors import SsliTypeError
from ssli.printer import to_display
from ssli.reader.parser import INT_MAX, INT_MIN, parse_float, parse_int
from ssli.types.function import Function
from ssli.types.nil import NilType
from ssli.types.symbol import Symbol


def type_name(value: LispValue) -> str:
    match value:
        case bool():
            return "bool"
        case int():
            return "integer"
        case float():
            return "float"
        case str():
            return "string"
        case Symbol():
            return "symbol"
        case list():
            return "list"
        case Function():
            return "function"
        case NilType():
            return "nil"
    return type(value).__name__


def as_bool(value: LispValue) -> bool:
    match value:
        case bool():
            return value
        case int() | float():
            return value != 0
        case str() | list():
            return len(value) != 0
        case Symbol():
            return not value.is_empty
        case Function():
            return True
    return False


def as_int(value: LispValue) -> int:
    match value:
        case bool():
            return 1 if value else 0
        case int():
            return value
        case float():
            if math.isnan(value) or math.isinf(value):
                raise SsliTypeError(f"Cannot convert float {value} to int")
            number = int(value)
            if number < INT_MIN or number > INT_MAX:
                raise SsliTypeError(f"Float {value} is out of integer range")
            return number
        case str():
            number = parse_int(value)
            if number is None:
                raise SsliTypeError(f"Cannot convert string {value!r} to int")
            return number
    return 0


def as_float(value: LispValue) -> float:
    match value:
        case bool():
            return 1.0 if value else 0.0
        case int():
            return float(value)
        case float():
            return value
        case str():
            fnumber = parse_float(value)
            if fnumber is None:
                raise SsliTypeError(f"Cannot convert string {value!r} to float")
            return fnumber
        case list():
            return float(len(value))
    return 0.0


def as_string(value: LispValue) -> str:
    return to_display(value)


def as_list(value: LispValue) -> list[LispValue]:
    if isinstance(value, list):
        return value
    return [value]


def as_function(value: LispValue) -> Function:
    if not isinstance(value, Function):
        raise SsliTypeError(f"Value {to_display(value)} ({type_name(value)}) is not a function")
    return value


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality over matching variants; lists compare element-wise."""
    if a is b:
        return True
    if type(a) != type(b):
        return False
    if isinstance(a, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Function):
        return False
    return a == b

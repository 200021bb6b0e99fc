# Core type aliases for the ssli data model.
# Values are plain Python objects (int, float, str, list, bool) plus the
# Symbol, Function and Nil types from ssli.types. Parsed forms and runtime
# values share the same representation (the language is homoiconic).
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue)
SExpression = LispValue

# Native procedure type: receives the frame it runs in and the
# *unevaluated* argument forms.
NativeFn = Callable[[Any, list], LispValue]

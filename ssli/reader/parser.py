"""
  Parser

Recursive descent over the token list produced by the tokenizer. Emits
plain Python values:

    - nil            -> Nil
    - true / false   -> bool
    - '"text         -> str (marker stripped)
    - 42, -7         -> int
    - 1.5, 2e3       -> float
    - 0x1F, 0b101    -> int
    - ( ... )        -> list
    - anything else  -> Symbol

Atoms are recognised in exactly that order, first match wins: "0x1" is hex
only because the integer and float attempts fail first.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from ssli import SExpression
from ssli.errors import SsliSyntaxError
from ssli.reader.tokenizer import STRING_MARKER, tokenize
from ssli.types.nil import Nil
from ssli.types.symbol import Symbol

# Signed 64-bit integer range; anything wider falls through to float parsing
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

INT_RE = re.compile(r"[+-]?[0-9]+")
HEX_RE = re.compile(r"[0-9A-Fa-f]+")
BIN_RE = re.compile(r"[01]+")


def parse_int(token: str) -> Optional[int]:
    if not INT_RE.fullmatch(token):
        return None
    value = int(token)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_float(token: str) -> Optional[float]:
    # stricter than float(): no "_" separators and no surrounding blanks
    if "_" in token or not token.isascii() or token != token.strip():
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _parse_radix(token: str, prefix: str, pattern: re.Pattern, base: int) -> int:
    digits = token[len(prefix):]
    if not pattern.fullmatch(digits):
        raise SsliSyntaxError(f"Malformed numeric literal: {token}")
    value = int(digits, base)
    if value > INT_MAX:
        raise SsliSyntaxError(f"Numeric literal out of range: {token}")
    return value


def parse_atom(token: str) -> SExpression:
    """Convert one non-paren token into a value."""
    if token == "nil":
        return Nil
    if token == "true":
        return True
    if token == "false":
        return False
    if token.startswith(STRING_MARKER):
        return token[1:]
    if (number := parse_int(token)) is not None:
        return number
    if (fnumber := parse_float(token)) is not None:
        return fnumber
    if token.startswith("0x"):
        return _parse_radix(token, "0x", HEX_RE, 16)
    if token.startswith("0b"):
        return _parse_radix(token, "0b", BIN_RE, 2)
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: list[str]):
        self.tokens: list[str] = tokens
        self.pos: int = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise SsliSyntaxError("Unexpected end of input")

        if tok == "(":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise SsliSyntaxError("Unterminated list: missing ')'")
                if nxt == ")":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok == ")":
            raise SsliSyntaxError(f"Unexpected ')' at token {self.pos - 1}")

        return parse_atom(tok)

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(tokens: list[str]) -> list[SExpression]:
    """Parse every top-level form in `tokens`."""
    return list(TokenStream(tokens).parse_all())


def read(source: str) -> list[SExpression]:
    """Tokenize and parse `source`."""
    return parse(tokenize(source))

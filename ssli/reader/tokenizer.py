"""
  Tokenizer

A small character state machine that turns source text into a flat list of
string tokens:

    - "(" and ")" are emitted as their own tokens
    - whitespace separates tokens and is never buffered
    - a string literal becomes one token that keeps its opening '"' as a
      marker for the parser: `"ab c"` -> '"ab c'
    - inside a string, '\\' takes the next character verbatim
    - ';' outside a string starts a comment running to end of line

The tokenizer never fails: an unterminated string or comment simply ends at
the end of the text.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

STRING_MARKER = '"'


class LexState(Enum):
    NORMAL = "normal"
    STRING = "string"
    STRING_ESCAPED = "string-escaped"
    COMMENT = "comment"


def lex(source: str) -> Iterator[str]:
    """Token generator over `source`."""
    state = LexState.NORMAL
    buffer: list[str] = []

    for ch in source:
        if state is LexState.STRING_ESCAPED:
            buffer.append(ch)
            state = LexState.STRING
            continue

        if state is LexState.STRING:
            if ch == '"':
                yield "".join(buffer)
                buffer = []
                state = LexState.NORMAL
            elif ch == "\\":
                state = LexState.STRING_ESCAPED
            else:
                buffer.append(ch)
            continue

        if state is LexState.COMMENT:
            if ch == "\n":
                state = LexState.NORMAL
            continue

        # ----------------------
        # Normal state
        # ----------------------
        if ch in '()";' or ch.isspace():
            if buffer:
                yield "".join(buffer)
                buffer = []

        if ch == "(" or ch == ")":
            yield ch
        elif ch == '"':
            buffer.append(STRING_MARKER)
            state = LexState.STRING
        elif ch == ";":
            state = LexState.COMMENT
        elif not ch.isspace():
            buffer.append(ch)

    # Flush a trailing atom or an unterminated string
    if buffer:
        yield "".join(buffer)


def tokenize(source: str) -> list[str]:
    return list(lex(source))

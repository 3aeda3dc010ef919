"""Token kinds and token records produced by the hand-written lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union


class TokenType(IntEnum):
    """Kinds of tokens recognised by the recursive-descent front end."""

    EMPTY = -2
    ERR = -1
    EOF = 0

    DIGIT = 1
    INT = 2
    ID = 3

    L_PAREN = 4
    R_PAREN = 5
    L_BRACE = 6
    R_BRACE = 7
    SEMICOLON = 8
    COMMA = 9

    RETURN = 10
    ASSIGN = 11
    ADD = 12
    SUB = 13


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    ``value`` holds the integer of a ``DIGIT``, the name of an ``ID`` and the
    basic type name of an ``INT`` keyword; it is ``None`` for other tokens.
    """

    kind: TokenType
    text: str
    line: int
    value: Optional[Union[int, str]] = None
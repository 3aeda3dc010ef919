"""Token kinds and token records of the table-driven scanner.

The numbering follows the parser-generator convention: end of input is 0,
single characters would occupy 1-255, and named terminals start at 258
after the reserved ``ERROR`` (256) and ``UNDEF`` (257) kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union


class FlexTokenType(IntEnum):
    """Terminal kinds shared by the table-driven scanner and its parser."""

    EMPTY = -2
    EOF = 0
    ERROR = 256
    UNDEF = 257
    DIGIT = 258
    ID = 259
    INT = 260
    RETURN = 261
    SEMICOLON = 262
    L_PAREN = 263
    R_PAREN = 264
    L_BRACE = 265
    R_BRACE = 266
    COMMA = 267
    ASSIGN = 268
    SUB = 269
    ADD = 270


@dataclass(frozen=True)
class FlexToken:
    """A token read by the table-driven scanner.

    ``value`` holds the unsigned 32-bit integer of a ``DIGIT``, the name of an
    ``ID`` and the basic type name of an ``INT`` keyword; it is ``None`` for
    every other kind. ``UNDEF`` marks a character no rule accepts.
    """

    kind: FlexTokenType
    text: str
    line: int
    value: Optional[Union[int, str]] = None
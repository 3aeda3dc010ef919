"""Table-driven style scanner for MiniC, following the generated lexer's rules.

Rules, in priority order for matches of equal length:

* ``(`` ``)`` ``{`` ``}`` ``;`` ``,`` ``=`` ``+`` ``-``: punctuation
* ``0|[1-9][0-9]*``: unsigned decimal integer
* ``int`` and ``return``: keywords
* ``[A-Za-z_][A-Za-z0-9_]*``: identifier
* ``[ \\t]+`` and ``[\\r\\n]+``: blanks, skipped
* any other single character: reported and returned as ``UNDEF``

Only ``\\n`` advances the line counter; a lone ``\\r`` does not.
"""

from __future__ import annotations

import re
from typing import Iterator, List

from .flex_tokens import FlexToken, FlexTokenType

_PUNCTUATION = {
    "(": FlexTokenType.L_PAREN,
    ")": FlexTokenType.R_PAREN,
    "{": FlexTokenType.L_BRACE,
    "}": FlexTokenType.R_BRACE,
    ";": FlexTokenType.SEMICOLON,
    ",": FlexTokenType.COMMA,
    "=": FlexTokenType.ASSIGN,
    "+": FlexTokenType.ADD,
    "-": FlexTokenType.SUB,
}

_KEYWORDS = {
    "int": FlexTokenType.INT,
    "return": FlexTokenType.RETURN,
}

_RULES = re.compile(
    r"""
    (?P<blank>[ \t]+)
  | (?P<newline>[\r\n]+)
  | (?P<number>0|[1-9][0-9]*)
  | (?P<word>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<punct>[(){};,=+\-])
  | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_LONG_MAX = 2**63 - 1
_UINT32_MASK = 0xFFFFFFFF


def _unsigned_value(text: str) -> int:
    """Decimal conversion that saturates like a 64-bit ``long`` and keeps 32 bits."""
    return min(int(text), _LONG_MAX) & _UINT32_MASK


class FlexScanner:
    """Iterates over the tokens of a source text, ending with ``EOF``."""

    def __init__(self, text: str) -> None:
        self._text = text
        self.line = 1

    def __iter__(self) -> Iterator[FlexToken]:
        self.line = 1
        for match in _RULES.finditer(self._text):
            rule = match.lastgroup
            lexeme = match.group()
            if rule == "blank":
                continue
            if rule == "newline":
                self.line += lexeme.count("\n")
                continue
            if rule == "number":
                yield FlexToken(FlexTokenType.DIGIT, lexeme, self.line, _unsigned_value(lexeme))
            elif rule == "word":
                kind = _KEYWORDS.get(lexeme, FlexTokenType.ID)
                if kind is FlexTokenType.ID:
                    yield FlexToken(kind, lexeme, self.line, lexeme)
                elif kind is FlexTokenType.INT:
                    yield FlexToken(kind, lexeme, self.line, "int")
                else:
                    yield FlexToken(kind, lexeme, self.line)
            elif rule == "punct":
                yield FlexToken(_PUNCTUATION[lexeme], lexeme, self.line)
            else:
                print(f"Line {self.line}: Invalid char {lexeme}")
                yield FlexToken(FlexTokenType.UNDEF, lexeme, self.line)
        yield FlexToken(FlexTokenType.EOF, "", self.line)


def scan(text: str) -> List[FlexToken]:
    """Return every token of ``text``, ending with the ``EOF`` token."""
    return list(FlexScanner(text))
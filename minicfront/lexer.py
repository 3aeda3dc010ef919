"""Hand-written lexer for the MiniC expression language."""

from __future__ import annotations

import string
from typing import Iterator, List

from .tokens import Token, TokenType

_KEYWORDS = {
    "int": TokenType.INT,
    "return": TokenType.RETURN,
}

_PUNCTUATION = {
    "(": TokenType.L_PAREN,
    ")": TokenType.R_PAREN,
    "{": TokenType.L_BRACE,
    "}": TokenType.R_BRACE,
    ";": TokenType.SEMICOLON,
    "+": TokenType.ADD,
    "-": TokenType.SUB,
    "=": TokenType.ASSIGN,
    ",": TokenType.COMMA,
}

_DIGITS = frozenset(string.digits)
_ID_START = frozenset(string.ascii_letters + "_")
_ID_CHARS = _ID_START | _DIGITS
_UINT32_MASK = 0xFFFFFFFF


def keyword_token(name: str) -> TokenType:
    """Return the keyword kind for ``name``, or ``TokenType.ID``."""
    return _KEYWORDS.get(name, TokenType.ID)


class Lexer:
    """Splits source text into tokens, tracking line numbers."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.line = 1

    def _skip_blanks(self) -> None:
        text = self._text
        while self._pos < len(text):
            c = text[self._pos]
            if c == "\r":
                # \r\n and a lone \r both end one line.
                self.line += 1
                self._pos += 1
                if text.startswith("\n", self._pos):
                    self._pos += 1
            elif c == "\n":
                self.line += 1
                self._pos += 1
            elif c in " \t":
                self._pos += 1
            else:
                break

    def _take_while(self, allowed: frozenset) -> str:
        start = self._pos
        text = self._text
        while self._pos < len(text) and text[self._pos] in allowed:
            self._pos += 1
        return text[start:self._pos]

    def next_token(self) -> Token:
        """Read and return the next token; ``EOF`` repeats at end of input."""
        self._skip_blanks()
        line = self.line
        if self._pos >= len(self._text):
            return Token(TokenType.EOF, "", line)

        c = self._text[self._pos]
        if c in _DIGITS:
            value = int(self._take_while(_DIGITS)) & _UINT32_MASK
            return Token(TokenType.DIGIT, str(value), line, value)

        if c in _PUNCTUATION:
            self._pos += 1
            return Token(_PUNCTUATION[c], c, line)

        if c in _ID_START:
            name = self._take_while(_ID_CHARS)
            kind = keyword_token(name)
            if kind is TokenType.ID:
                return Token(kind, name, line, name)
            if kind is TokenType.INT:
                return Token(kind, name, line, "int")
            return Token(kind, name, line)

        self._pos += 1
        print(f"Line({line}): Invalid char {c}")
        return Token(TokenType.ERR, c, line)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenType.EOF:
                return


def tokenize(text: str) -> List[Token]:
    """Return every token of ``text``, ending with the ``EOF`` token."""
    return list(Lexer(text))
from dataclasses import FrozenInstanceError

import pytest

from minicfront.tokens import Token, TokenType


def test_special_token_values():
    assert TokenType(-2) is TokenType.EMPTY
    assert TokenType(-1) is TokenType.ERR
    assert TokenType(0) is TokenType.EOF


def test_regular_kinds_are_consecutive_after_eof():
    regular = {kind for kind in TokenType if kind.value > 0}
    looked_up = {TokenType(v) for v in range(1, len(regular) + 1)}
    assert looked_up == regular
    with pytest.raises(ValueError):
        TokenType(len(regular) + 1)


def test_kinds_are_distinct():
    looked_up = [TokenType(kind.value) for kind in TokenType]
    assert looked_up == list(TokenType)
    assert len(set(looked_up)) == len(looked_up)


def test_token_equality_and_default_value():
    tok = Token(TokenType.SEMICOLON, ";", 4)
    assert tok == Token(TokenType.SEMICOLON, ";", 4)
    assert tok.value is None
    assert tok != Token(TokenType.COMMA, ",", 4)


def test_token_is_immutable():
    tok = Token(TokenType.ID, "x", 1, "x")
    with pytest.raises(FrozenInstanceError):
        tok.text = "y"  # type: ignore[misc]
    assert tok.text == "x"
    assert tok.value == "x"
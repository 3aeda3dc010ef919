from minicfront.lexer import Lexer, keyword_token, tokenize
from minicfront.tokens import TokenType


def kinds(text):
    return [tok.kind for tok in tokenize(text)]


def test_keyword_token():
    assert keyword_token("int") is TokenType.INT
    assert keyword_token("return") is TokenType.RETURN
    assert keyword_token("main") is TokenType.ID
    assert keyword_token("integer") is TokenType.ID


def test_function_definition_tokens():
    assert kinds("int main() { return a + 2 - f(x, y); }") == [
        TokenType.INT,
        TokenType.ID,
        TokenType.L_PAREN,
        TokenType.R_PAREN,
        TokenType.L_BRACE,
        TokenType.RETURN,
        TokenType.ID,
        TokenType.ADD,
        TokenType.DIGIT,
        TokenType.SUB,
        TokenType.ID,
        TokenType.L_PAREN,
        TokenType.ID,
        TokenType.COMMA,
        TokenType.ID,
        TokenType.R_PAREN,
        TokenType.SEMICOLON,
        TokenType.R_BRACE,
        TokenType.EOF,
    ]


def test_assignment_token():
    toks = tokenize("a = 1;")
    assert [t.kind for t in toks] == [
        TokenType.ID,
        TokenType.ASSIGN,
        TokenType.DIGIT,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]
    assert toks[1].text == "="


def test_punctuation_text_matches_source():
    texts = [t.text for t in tokenize("(){};+-,") if t.kind is not TokenType.EOF]
    assert "".join(texts) == "(){};+-,"


def test_digit_value_and_text():
    tok = tokenize("12345")[0]
    assert tok.kind is TokenType.DIGIT
    assert tok.value == 12345
    assert tok.text == "12345"


def test_leading_zeros_read_as_decimal():
    tok = tokenize("0010")[0]
    assert tok.value == 10
    assert tok.text == "10"


def test_digit_wraps_to_32_bits():
    assert tokenize("4294967297")[0].value == 1


def test_identifier_with_digits_and_underscore():
    tok = tokenize("_a1b2 ")[0]
    assert tok.kind is TokenType.ID
    assert tok.value == "_a1b2"


def test_number_then_identifier_split():
    toks = tokenize("12ab")
    assert [t.kind for t in toks[:2]] == [TokenType.DIGIT, TokenType.ID]
    assert toks[1].value == "ab"


def test_int_keyword_carries_type():
    tok = tokenize("int")[0]
    assert tok.kind is TokenType.INT
    assert tok.value == "int"


def test_line_numbers_for_all_newline_styles():
    toks = tokenize("x1\nx2\r\nx3\rx4\n\n\r\nx7")
    ids = [t for t in toks if t.kind is TokenType.ID]
    assert [t.text for t in ids] == [f"x{t.line}" for t in ids]


def test_invalid_char_reports_error(capsys):
    toks = tokenize("a $ b")
    assert [t.kind for t in toks] == [
        TokenType.ID,
        TokenType.ERR,
        TokenType.ID,
        TokenType.EOF,
    ]
    assert toks[1].text == "$"
    assert "Invalid char $" in capsys.readouterr().out


def test_empty_input_gives_eof_only():
    assert kinds(" \t\r\n") == [TokenType.EOF]


def test_next_token_repeats_eof():
    lexer = Lexer("x")
    assert lexer.next_token().kind is TokenType.ID
    assert lexer.next_token().kind is TokenType.EOF
    assert lexer.next_token().kind is TokenType.EOF


def test_iteration_stops_after_eof():
    toks = list(Lexer("a b"))
    assert toks[-1].kind is TokenType.EOF
    assert sum(t.kind is TokenType.EOF for t in toks) == 1
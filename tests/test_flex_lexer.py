import pytest

from minicfront.flex_lexer import FlexScanner, scan
from minicfront.flex_tokens import FlexTokenType as T


def kinds(text):
    return [tok.kind for tok in scan(text)]


def test_empty_input_gives_only_eof():
    tokens = scan("")
    assert [t.kind for t in tokens] == [T.EOF]
    assert tokens[0].line == 1


def test_blanks_only():
    assert kinds(" \t  \t") == [T.EOF]


@pytest.mark.parametrize(
    "char, kind",
    [
        ("(", T.L_PAREN),
        (")", T.R_PAREN),
        ("{", T.L_BRACE),
        ("}", T.R_BRACE),
        (";", T.SEMICOLON),
        (",", T.COMMA),
        ("=", T.ASSIGN),
        ("+", T.ADD),
        ("-", T.SUB),
    ],
)
def test_punctuation(char, kind):
    tokens = scan(char)
    assert tokens[0].kind == kind
    assert tokens[0].text == char
    assert tokens[0].value is None
    assert tokens[1].kind == T.EOF


def test_function_definition():
    assert kinds("int main() { return 1 + a - 2; }") == [
        T.INT, T.ID, T.L_PAREN, T.R_PAREN, T.L_BRACE, T.RETURN,
        T.DIGIT, T.ADD, T.ID, T.SUB, T.DIGIT, T.SEMICOLON, T.R_BRACE, T.EOF,
    ]


def test_keyword_and_identifier_values():
    tokens = scan("int return main")
    assert tokens[0].value == "int"
    assert tokens[1].value is None
    assert tokens[2].value == "main"


@pytest.mark.parametrize("name", ["integer", "in", "returns", "_int", "int2", "Return"])
def test_keyword_prefixes_are_identifiers(name):
    tokens = scan(name)
    assert tokens[0].kind == T.ID
    assert tokens[0].value == name


def test_integer_value():
    tok = scan("123")[0]
    assert tok.kind == T.DIGIT
    assert tok.value == 123
    assert tok.text == "123"


def test_leading_zero_splits_number():
    tokens = scan("012")
    assert [t.kind for t in tokens] == [T.DIGIT, T.DIGIT, T.EOF]
    assert [t.value for t in tokens[:2]] == [0, 12]


def test_uint32_max_is_kept():
    assert scan("4294967295")[0].value == 4294967295


def test_value_stays_within_32_bits():
    for text in ["4294967296", "12345678901234", "99999999999999999999999"]:
        value = scan(text)[0].value
        assert 0 <= value <= 4294967295


def test_huge_number_saturates():
    assert scan("99999999999999999999999")[0].value == 4294967295


def test_number_followed_by_identifier():
    tokens = scan("12ab")
    assert [t.kind for t in tokens] == [T.DIGIT, T.ID, T.EOF]
    assert tokens[1].value == "ab"


def test_line_numbers_follow_newlines():
    tokens = scan("a\nb\r\nc\n\nd")
    assert [t.line for t in tokens[:4]] == [1, 2, 3, 5]


def test_lone_carriage_return_does_not_count():
    tokens = scan("a\rb")
    assert [t.kind for t in tokens] == [T.ID, T.ID, T.EOF]
    assert tokens[1].line == 1


def test_invalid_character(capsys):
    tokens = scan("a\n$")
    assert tokens[1].kind == T.UNDEF
    assert tokens[1].text == "$"
    assert tokens[1].line == 2
    assert capsys.readouterr().out == "Line 2: Invalid char $\n"


def test_scanning_continues_after_invalid_character():
    assert kinds("a # b") == [T.ID, T.UNDEF, T.ID, T.EOF]


def test_iterating_twice_restarts():
    scanner = FlexScanner("x\ny")
    first = list(scanner)
    second = list(scanner)
    assert first == second
    assert first[-1].line == 2
    assert scanner.line == 2


def test_eof_is_last_and_unique():
    tokens = scan("int a, b;\nreturn a;")
    assert tokens[-1].kind == T.EOF
    assert sum(t.kind == T.EOF for t in tokens) == 1


def test_token_texts_rebuild_source_without_blanks():
    source = "int f() {\n  a = b + 10;\n}"
    texts = "".join(t.text for t in scan(source))
    assert texts == "".join(source.split())
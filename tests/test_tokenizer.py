import dataclasses

import pytest

from prattcalc.tokenizer import Token, TokenizerError, TokenType, tokenize, untokenize


def _types(code: str) -> list[TokenType]:
    return [t.type for t in tokenize(code)]


@pytest.mark.parametrize(
    "code, expected_tokens",
    [
        pytest.param("", [Token(TokenType.EXPR_END, "")], id="empty"),
        pytest.param("   \t", [Token(TokenType.EXPR_END, "")], id="blank"),
        pytest.param("1e3", [Token(TokenType.NUMBER, "1e3"), Token(TokenType.EXPR_END, "")], id="exponent"),
        pytest.param(
            "  12.5*-3 ",
            [
                Token(TokenType.NUMBER, "12.5"),
                Token(TokenType.STAR, "*"),
                Token(TokenType.MINUS, "-"),
                Token(TokenType.NUMBER, "3"),
                Token(TokenType.EXPR_END, ""),
            ],
            id="whitespace-and-operators",
        ),
        pytest.param(
            "4/+2",
            [
                Token(TokenType.NUMBER, "4"),
                Token(TokenType.SLASH, "/"),
                Token(TokenType.PLUS, "+"),
                Token(TokenType.NUMBER, "2"),
                Token(TokenType.EXPR_END, ""),
            ],
            id="no-whitespace",
        ),
    ],
)
def test_tokenize(code: str, expected_tokens: list[Token]) -> None:
    assert tokenize(code) == expected_tokens


@pytest.mark.parametrize(
    "code, expected_lexeme",
    [
        pytest.param("007", "007"),
        pytest.param("2.5e-1", "2.5e-1"),
        pytest.param("6e+2", "6e+2"),
        # malformed tails are scanned greedily and left to the number conversion
        pytest.param("1.", "1."),
        pytest.param("1e", "1e"),
        pytest.param("1e+", "1e+"),
        pytest.param("1.e2", "1.e2"),
    ],
)
def test_number_lexeme(code: str, expected_lexeme: str) -> None:
    tokens = tokenize(code)
    assert tokens[0] == Token(TokenType.NUMBER, expected_lexeme)
    assert _types(code) == [TokenType.NUMBER, TokenType.EXPR_END]


def test_number_scan_stops_before_second_dot() -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize("1.5.3")
    assert exc_info.value.char == "."
    assert exc_info.value.column == 3


@pytest.mark.parametrize(
    "code, char, column",
    [
        pytest.param("3 & 4", "&", 2),
        pytest.param("(1)", "(", 0),
        pytest.param("2E5", "E", 1),
        pytest.param(".5", ".", 0),
        pytest.param("1 + x + %", "x", 4),
        pytest.param("²", "²", 0, id="superscript-two"),
    ],
)
def test_unexpected_character(code: str, char: str, column: int) -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize(code)
    assert exc_info.value.char == char
    assert exc_info.value.column == column
    assert f"column {column}" in exc_info.value.errmsg


def test_tokenizer_error_rendering() -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize("3 & 4")
    assert str(exc_info.value).splitlines() == [
        "[Tokenizer error] Unexpected character at column 2: '&'",
        "3 & 4",
        "  ^",
    ]


def test_tokenizer_error_rendering_clips_long_lines() -> None:
    code = "1 + " * 10 + "x"
    with pytest.raises(TokenizerError) as exc_info:
        tokenize(code)
    _, excerpt, caret = str(exc_info.value).splitlines()
    assert excerpt.startswith("...")
    assert excerpt[caret.index("^")] == "x"


def test_tokens_are_immutable() -> None:
    token = tokenize("1")[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.lexeme = "2"  # type: ignore


def test_untokenize() -> None:
    assert untokenize(tokenize("1+ 2 *3")) == "1 + 2 * 3"

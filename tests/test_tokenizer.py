import pytest

from linecalc.tokenizer import SymbolType, Token, TokenizerError, tokenize, untokenize


def test_tokenize_symbols() -> None:
    assert tokenize("1+2") == [
        Token(SymbolType.DIGIT, "1"),
        Token(SymbolType.PLUS, "+"),
        Token(SymbolType.DIGIT, "2"),
    ]


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("12 * (3 - 4) / 5", "12*(3-4)/5"),
        pytest.param("1 + 2 =", "1+2"),
        pytest.param("   ", ""),
        pytest.param("", ""),
        pytest.param("1 2", "12"),
    ],
)
def test_skipped_chars(code: str, expected: str) -> None:
    assert untokenize(tokenize(code)) == expected


@pytest.mark.parametrize(
    "code, error_char_idx",
    [
        pytest.param("1+a", 2),
        pytest.param("x", 0),
        pytest.param("1.5", 1),
        pytest.param("1\t+ 2", 1),
        pytest.param("2^3", 1),
    ],
)
def test_invalid_char(code: str, error_char_idx: int) -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize(code)
    assert exc_info.value.error_char_idx == error_char_idx


def test_line_length_limit() -> None:
    assert len(tokenize("1" * 31)) == 31
    with pytest.raises(TokenizerError):
        tokenize("1" * 32)
    assert len(tokenize("1" * 40, max_length=40)) == 40


def test_error_rendering() -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize("1 + a")
    assert str(exc_info.value) == "\n".join(
        [
            "[Tokenizer error] Unexpected character: 'a'",
            "1 + a",
            "    ^",
        ]
    )

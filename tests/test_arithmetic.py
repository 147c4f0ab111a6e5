import pytest

from linecalc.parser import parse
from linecalc.runtime import DivisionByZeroError, evaluate, truncating_div
from linecalc.tokenizer import tokenize


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1),
        pytest.param("1+2", 3),
        pytest.param("(1+2)", 3),
        pytest.param("(((1)))", 1),
        pytest.param("1 * 4 + 5", 9),
        pytest.param("1 + 4 * 5", 21),
        pytest.param("2+3*4", 14),
        pytest.param("(2+3)*4", 20),
        pytest.param("10-2-3", 5),
        pytest.param("7/2", 3),
        pytest.param("100 / 5 / 2 / 2", 5),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24),
        pytest.param("2 - 5", -3),
        pytest.param("(2 - 9) / 2", -3),
        pytest.param("0 / 7", 0),
        pytest.param("007 + 1", 8),
        pytest.param("1 + 2 =", 3),
        # signed 32-bit wrap-around
        pytest.param("2147483647 + 1", -2147483648),
        pytest.param("0 - 2147483647 - 2", 2147483647),
        pytest.param("65536 * 65536", 0),
        pytest.param("4294967296", 0),
        pytest.param("(0 - 2147483647 - 1) / (0 - 1)", -2147483648),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: int) -> None:
    tokens = tokenize(code)
    ast = parse(tokens)
    assert evaluate(ast) == expected_ret_val


@pytest.mark.parametrize("code", ["5/0", "1 + 2 / (3 - 3)", "(5/0) * 0"])
def test_division_by_zero(code: str) -> None:
    with pytest.raises(DivisionByZeroError):
        evaluate(parse(tokenize(code)))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        pytest.param(7, 2, 3),
        pytest.param(-7, 2, -3),
        pytest.param(7, -2, -3),
        pytest.param(-7, -2, 3),
        pytest.param(1, 3, 0),
    ],
)
def test_truncating_div(a: int, b: int, expected: int) -> None:
    assert truncating_div(a, b) == expected


def test_evaluation_is_deterministic() -> None:
    results = {evaluate(parse(tokenize("(12+3)*4-6/4"))) for _ in range(100)}
    assert results == {59}

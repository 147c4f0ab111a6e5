from dataclasses import dataclass
from typing import Callable

from linecalc.nodes import BinaryOperation, BinaryOperator, Expression, Number
from linecalc.utils import wrap_int32


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"Runtime error: {self.errmsg}"


class DivisionByZeroError(CalcRuntimeError):
    pass


def evaluate(expression: Expression) -> int:
    if isinstance(expression, Number):
        return wrap_int32(expression.value)
    elif isinstance(expression, BinaryOperation):
        left_res = evaluate(expression.left)
        right_res = evaluate(expression.right)
        impl = binary_impls.get(expression.operator)
        if impl is None:
            raise CalcRuntimeError(f"Unexpected binary operator: {expression.operator}")
        return wrap_int32(impl(left_res, right_res))
    else:
        raise CalcRuntimeError(f"Unexpected expression type: {expression!r}")


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, 7 / -2 == -3"""
    if b == 0:
        raise DivisionByZeroError(f"Division of {a} by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


BinaryOperationImpl = Callable[[int, int], int]

binary_impls: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: truncating_div,
}

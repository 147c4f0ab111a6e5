import enum
from dataclasses import dataclass

from linecalc.tokenizer import SymbolType
from linecalc.utils import PrintableEnum


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()

    @property
    def symbol(self) -> str:
        return {
            BinaryOperator.ADD: "+",
            BinaryOperator.SUB: "-",
            BinaryOperator.MUL: "*",
            BinaryOperator.DIV: "/",
        }[self]


ADDITIVE_OPERATORS = {
    SymbolType.PLUS: BinaryOperator.ADD,
    SymbolType.MINUS: BinaryOperator.SUB,
}

MULTIPLICATIVE_OPERATORS = {
    SymbolType.STAR: BinaryOperator.MUL,
    SymbolType.SLASH: BinaryOperator.DIV,
}


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


Expression = Number | BinaryOperation


def depth(expression: Expression) -> int:
    if isinstance(expression, BinaryOperation):
        return 1 + max(depth(expression.left), depth(expression.right))
    return 1


def render(expression: Expression) -> str:
    """Fully parenthesized infix form, e.g. ((1 + 2) * 3)"""
    if isinstance(expression, Number):
        return str(expression.value)
    return f"({render(expression.left)} {expression.operator.symbol} {render(expression.right)})"

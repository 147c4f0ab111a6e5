from dataclasses import dataclass

from linecalc.config import MAX_NESTING_DEPTH
from linecalc.nodes import ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS, BinaryOperation, BinaryOperator, Expression, Number
from linecalc.tokenizer import SymbolType, Token, untokenize


@dataclass
class ParserError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * len(untokenize(parsed_tokens))
        return "\n".join([f"Parser error: {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


@dataclass(frozen=True)
class _ParserState:
    tokens: list[Token]
    max_depth: int

    def peek(self, i: int) -> SymbolType | None:
        return self.tokens[i].type if i < len(self.tokens) else None

    def error(self, errmsg: str, i: int) -> ParserError:
        return ParserError(errmsg, tokens=self.tokens, error_token_idx=i)


def parse(tokens: list[Token], max_depth: int = MAX_NESTING_DEPTH) -> Expression:
    state = _ParserState(tokens=tokens, max_depth=max_depth)
    if not tokens:
        raise state.error("Empty expression", 0)
    expr, i = _consume_expression(state, 0, nesting=0)
    if i < len(tokens):
        raise state.error(f"Unexpected {tokens[i].type} after the end of expression", i)
    return expr


def _consume_expression(state: _ParserState, i: int, nesting: int) -> tuple[Expression, int]:
    """expression := term (('+' | '-') term)*"""
    return _consume_binary_chain(state, i, nesting, ADDITIVE_OPERATORS, _consume_term)


def _consume_term(state: _ParserState, i: int, nesting: int) -> tuple[Expression, int]:
    """term := factor (('*' | '/') factor)*"""
    return _consume_binary_chain(state, i, nesting, MULTIPLICATIVE_OPERATORS, _consume_factor)


def _consume_binary_chain(state, i, nesting, operators: dict[SymbolType, BinaryOperator], consume_operand):
    expr, i = consume_operand(state, i, nesting)
    while (symbol := state.peek(i)) in operators:
        right, i = consume_operand(state, i + 1, nesting)
        # left-associative: everything parsed so far becomes the left operand
        expr = BinaryOperation(operator=operators[symbol], left=expr, right=right)
    return expr, i


def _consume_factor(state: _ParserState, i: int, nesting: int) -> tuple[Expression, int]:
    """factor := number | '(' expression ')'"""
    if state.peek(i) is not SymbolType.BRACKET_OPEN:
        return _consume_number(state, i)

    if nesting >= state.max_depth:
        raise state.error(f"Brackets nested deeper than {state.max_depth} levels", i)
    expr, j = _consume_expression(state, i + 1, nesting + 1)
    if state.peek(j) is not SymbolType.BRACKET_CLOSE:
        raise state.error("Unclosed bracket", j)
    return expr, j + 1


def _consume_number(state: _ParserState, i: int) -> tuple[Expression, int]:
    """number := digit+"""
    j = i
    while state.peek(j) is SymbolType.DIGIT:
        j += 1
    if j == i:
        found = state.peek(i)
        raise state.error(f"Number or '(' expected, found {found if found is not None else 'end of line'}", i)
    return Number(int(untokenize(state.tokens[i:j]))), j

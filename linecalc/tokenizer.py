import enum
from dataclasses import dataclass

from linecalc.config import MAX_LINE_LENGTH
from linecalc.utils import PrintableEnum


@dataclass
class TokenizerError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class SymbolType(PrintableEnum):
    DIGIT = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass(frozen=True)
class Token:
    type: SymbolType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


SYMBOLS = {
    "+": SymbolType.PLUS,
    "-": SymbolType.MINUS,
    "*": SymbolType.STAR,
    "/": SymbolType.SLASH,
    "(": SymbolType.BRACKET_OPEN,
    ")": SymbolType.BRACKET_CLOSE,
    **{d: SymbolType.DIGIT for d in "0123456789"},
}

SKIPPED_CHARS = frozenset(" =")


def tokenize(code: str, max_length: int = MAX_LINE_LENGTH) -> list[Token]:
    if len(code) > max_length:
        raise TokenizerError(f"Line is longer than {max_length} characters", code=code, error_char_idx=max_length)

    tokens: list[Token] = []
    for i, char in enumerate(code):
        if char in SYMBOLS:
            tokens.append(Token(type=SYMBOLS[char], lexeme=char))
        elif char in SKIPPED_CHARS:
            continue
        else:
            raise TokenizerError(f"Unexpected character: {char!r}", code=code, error_char_idx=i)
    return tokens


def untokenize(tokens: list[Token]) -> str:
    return "".join(t.lexeme for t in tokens)

import enum
from dataclasses import dataclass
from typing import Optional

from exprcalc.errors import CalculatorError, State
from exprcalc.registry import Registry
from exprcalc.utils import PrintableEnum, caret_excerpt


@dataclass
class TokenizerError(CalculatorError):
    errmsg: str
    code: str
    error_char_idx: int

    state = State.INVALID_SYNTAX

    def __str__(self) -> str:
        return "\n".join([f"[Tokenizer error] {self.errmsg}", *caret_excerpt(self.code, self.error_char_idx)])


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    SYMBOL = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    start: int
    end: int

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


def _is_digit(s: str) -> bool:
    return "0" <= s <= "9"


def next_token(code: str, i: int, registry: Registry) -> Optional[Token]:
    """Reads the token starting at or after offset ``i``, None when only whitespace is left

    Constants come back as NUMBER tokens whose lexeme is the constant's literal.
    """
    while i < len(code) and code[i].isspace():
        i += 1
    if i >= len(code):
        return None

    if _is_digit(code[i]):
        number_end_idx = i + 1
        seen_point = False
        while number_end_idx < len(code):
            if _is_digit(code[number_end_idx]):
                pass
            elif code[number_end_idx] == "." and not seen_point:
                seen_point = True
            else:
                break
            number_end_idx += 1
        lexeme = code[i:number_end_idx]
        if lexeme.endswith("."):
            raise TokenizerError("Number must not end with a decimal point", code=code, error_char_idx=number_end_idx - 1)
        return Token(type=TokenType.NUMBER, lexeme=lexeme, start=i, end=number_end_idx)

    text = registry.match_token(code, i)
    if text is None:
        raise TokenizerError(f"Unexpected character: {code[i]!r}", code=code, error_char_idx=i)
    end = i + len(text)
    if text in registry.constants:
        return Token(type=TokenType.NUMBER, lexeme=registry.constants[text], start=i, end=end)
    return Token(type=TokenType.SYMBOL, lexeme=text, start=i, end=end)


def tokenize(code: str, registry: Registry) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while True:
        token = next_token(code, i, registry)
        if token is None:
            return tokens
        tokens.append(token)
        i = token.end

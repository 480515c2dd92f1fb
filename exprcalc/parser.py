import logging
from dataclasses import dataclass

from exprcalc.errors import CalculatorError, State
from exprcalc.expression import BinaryOperation, Expression, Literal, UnaryOperation, format_expression
from exprcalc.registry import BRACKET_CLOSE, BRACKET_OPEN, Registry
from exprcalc.tokenizer import Token, TokenType, next_token
from exprcalc.utils import caret_excerpt

logger = logging.getLogger(__name__)


@dataclass
class ParserError(CalculatorError):
    errmsg: str
    code: str
    error_char_idx: int

    state = State.INVALID_SYNTAX

    def __str__(self) -> str:
        return "\n".join([f"Parser error: {self.errmsg}", *caret_excerpt(self.code, self.error_char_idx)])


def parse(code: str, registry: Registry) -> Expression:
    expr, i = _consume_binary_expression(code, 0, registry, min_priority=0)
    trailing = next_token(code, i, registry)
    if trailing is not None:
        raise ParserError(f"Unexpected token {trailing.lexeme!r}", code=code, error_char_idx=trailing.start)
    logger.debug("Parsed %r as %s", code, format_expression(expr))
    return expr


def get_op_priority(token: Token | None, registry: Registry) -> int:
    """Binary priority of the token, 0 for anything that cannot continue a binary chain"""
    if token is None or token.type is not TokenType.SYMBOL:
        return 0
    return registry.priority(token.lexeme)


def _consume_binary_expression(code: str, i: int, registry: Registry, min_priority: int) -> tuple[Expression, int]:
    left, i = _consume_simple_expression(code, i, registry)
    while True:
        operator_token = next_token(code, i, registry)
        priority = get_op_priority(operator_token, registry)
        if operator_token is None or priority <= min_priority:
            # peeked token stays unconsumed, the caller resumes from i
            return left, i
        # the operator's own priority as the floor makes equal priorities bind left to right
        right, i = _consume_binary_expression(code, operator_token.end, registry, min_priority=priority)
        left = BinaryOperation(operator=operator_token.lexeme, left=left, right=right)


def _consume_simple_expression(code: str, i: int, registry: Registry) -> tuple[Expression, int]:
    first = next_token(code, i, registry)
    if first is None:
        raise ParserError("Unexpected end of input", code=code, error_char_idx=len(code))

    if first.type is TokenType.NUMBER:
        return _consume_postfix(code, Literal(first.lexeme), first.end, registry)

    if first.lexeme == BRACKET_OPEN:
        inner, i = _consume_binary_expression(code, first.end, registry, min_priority=0)
        closing = next_token(code, i, registry)
        if closing is None or closing.type is not TokenType.SYMBOL or closing.lexeme != BRACKET_CLOSE:
            raise ParserError(
                "Unclosed bracket",
                code=code,
                error_char_idx=closing.start if closing is not None else len(code),
            )
        return _consume_postfix(code, inner, closing.end, registry)

    operand, i = _consume_simple_expression(code, first.end, registry)
    return UnaryOperation(operator=first.lexeme, operand=operand), i


def _consume_postfix(code: str, operand: Expression, i: int, registry: Registry) -> tuple[Expression, int]:
    while True:
        token = next_token(code, i, registry)
        if token is None or token.type is not TokenType.SYMBOL or not registry.is_postfix(token.lexeme):
            return operand, i
        operand = UnaryOperation(operator=token.lexeme, operand=operand)
        i = token.end

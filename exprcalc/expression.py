from dataclasses import dataclass


@dataclass(frozen=True)
class Literal:
    lexeme: str


@dataclass(frozen=True)
class UnaryOperation:
    operator: str
    operand: "Expression"


@dataclass(frozen=True)
class BinaryOperation:
    operator: str
    left: "Expression"
    right: "Expression"


Expression = Literal | UnaryOperation | BinaryOperation


def format_expression(expression: Expression) -> str:
    """Fully parenthesized rendering, e.g. ``2+3*4`` -> ``(2 + (3 * 4))``"""
    if isinstance(expression, Literal):
        return expression.lexeme
    elif isinstance(expression, UnaryOperation):
        return f"{expression.operator}({format_expression(expression.operand)})"
    elif isinstance(expression, BinaryOperation):
        return f"({format_expression(expression.left)} {expression.operator} {format_expression(expression.right)})"
    else:
        return repr(expression)

import math
from dataclasses import dataclass

from exprcalc.errors import CalculatorError, State
from exprcalc.expression import BinaryOperation, Expression, Literal, UnaryOperation, format_expression
from exprcalc.registry import Angle, Registry


@dataclass
class EvaluationError(CalculatorError):
    errmsg: str
    state: State
    expression: Expression

    def __str__(self) -> str:
        return f"Evaluation error: {self.errmsg} in {format_expression(self.expression)}"


def is_numeric_literal(lexeme: str) -> bool:
    """Digits with at most one decimal point, and at least one digit"""
    digits = lexeme.replace(".", "", 1)
    return bool(digits) and all("0" <= c <= "9" for c in digits)


def evaluate(expression: Expression, registry: Registry, radians: bool = True) -> float:
    if isinstance(expression, BinaryOperation):
        operator = registry.operators.get(expression.operator)
        if operator is None:
            raise EvaluationError(
                f"Binary operator {expression.operator!r} is not defined",
                state=State.UNKNOWN_BINARY_OPERATOR,
                expression=expression,
            )
        return operator.fn(
            evaluate(expression.left, registry, radians),
            evaluate(expression.right, registry, radians),
        )
    elif isinstance(expression, UnaryOperation):
        function = registry.functions.get(expression.operator)
        if function is None:
            raise EvaluationError(
                f"Unary operator {expression.operator!r} is not defined",
                state=State.UNKNOWN_UNARY_OPERATOR,
                expression=expression,
            )
        operand = evaluate(expression.operand, registry, radians)
        if radians or function.angle is Angle.NONE:
            return function.fn(operand)
        elif function.angle is Angle.ARGUMENT:
            return function.fn(math.radians(operand))
        else:
            return math.degrees(function.fn(operand))
    elif isinstance(expression, Literal):
        if not is_numeric_literal(expression.lexeme):
            raise EvaluationError(
                f"{expression.lexeme!r} is not a number",
                state=State.UNKNOWN_EXPRESSION_TYPE,
                expression=expression,
            )
        return float(expression.lexeme)
    else:
        raise EvaluationError(
            f"Unexpected expression type: {type(expression).__name__}",
            state=State.UNKNOWN_EXPRESSION_TYPE,
            expression=expression,
        )

import enum

from exprcalc.utils import PrintableEnum


class State(PrintableEnum):
    OK = enum.auto()
    INVALID_SYNTAX = enum.auto()
    UNKNOWN_BINARY_OPERATOR = enum.auto()
    UNKNOWN_UNARY_OPERATOR = enum.auto()
    UNKNOWN_EXPRESSION_TYPE = enum.auto()


STATE_MESSAGES = {
    State.OK: "Ok",
    State.INVALID_SYNTAX: "Invalid syntax",
    State.UNKNOWN_BINARY_OPERATOR: "Unknown binary operator",
    State.UNKNOWN_UNARY_OPERATOR: "Unknown unary operator",
    State.UNKNOWN_EXPRESSION_TYPE: "Unknown expression type",
}


class CalculatorError(Exception):
    """Base for every classified failure; subclasses provide ``state``"""

    state: State

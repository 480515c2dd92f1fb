import decimal
import enum
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from exprcalc.utils import PrintableEnum

logger = logging.getLogger(__name__)

UnaryFn = Callable[[float], float]
BinaryFn = Callable[[float, float], float]

BRACKET_OPEN = "("
BRACKET_CLOSE = ")"


class Angle(PrintableEnum):
    NONE = enum.auto()
    ARGUMENT = enum.auto()  # sin, cos, tan
    RESULT = enum.auto()  # asin, acos, atan


@dataclass(frozen=True)
class Operator:
    fn: BinaryFn
    priority: int


@dataclass(frozen=True)
class Function:
    fn: UnaryFn
    angle: Angle = Angle.NONE
    postfix: bool = False


def constant_literal(value: float) -> str:
    """Positional decimal rendering of ``value``, e.g. 1e-05 -> '0.00001'"""
    return format(decimal.Decimal(repr(float(value))), "f")


class Registry:
    """Operators, functions and constants known to one calculator

    ``tokens`` lists every recognized token text ordered by descending length,
    so a greedy scan over it always prefers ``asin`` over ``a``-prefixed or
    shorter collisions.
    """

    def __init__(self) -> None:
        self.operators: dict[str, Operator] = dict()
        self.functions: dict[str, Function] = dict()
        self.constants: dict[str, str] = dict()
        self.tokens: list[str] = [BRACKET_OPEN, BRACKET_CLOSE]
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Registry":
        self._frozen = True
        return self

    def copy(self) -> "Registry":
        result = Registry()
        result.operators = dict(self.operators)
        result.functions = dict(self.functions)
        result.constants = dict(self.constants)
        result.tokens = list(self.tokens)
        return result

    def register_operator(self, text: str, fn: BinaryFn, priority: int = 1) -> None:
        if priority < 1:
            raise ValueError(f"Operator priority must be at least 1, got {priority}")
        text = self._prepare(text)
        if text in self.operators:
            logger.debug("Overriding binary operator %r", text)
        self.operators[text] = Operator(fn=fn, priority=priority)
        self._insert_token(text)

    def register_function(
        self, text: str, fn: UnaryFn, *, angle: Angle = Angle.NONE, postfix: bool = False
    ) -> None:
        text = self._prepare(text)
        if text in self.functions:
            logger.debug("Overriding function %r", text)
        self.functions[text] = Function(fn=fn, angle=angle, postfix=postfix)
        self._insert_token(text)

    def register_constant(self, text: str, value: float | str) -> None:
        text = self._prepare(text)
        if text in self.constants:
            logger.debug("Overriding constant %r", text)
        self.constants[text] = value if isinstance(value, str) else constant_literal(value)
        self._insert_token(text)

    def priority(self, text: str) -> int:
        operator = self.operators.get(text)
        return operator.priority if operator is not None else 0

    def is_postfix(self, text: str) -> bool:
        function = self.functions.get(text)
        return function is not None and function.postfix

    def match_token(self, code: str, i: int) -> Optional[str]:
        for text in self.tokens:
            if code.startswith(text, i):
                return text
        return None

    def _prepare(self, text: str) -> str:
        if self._frozen:
            raise RuntimeError("Registry is frozen, register everything before freezing it")
        if not text:
            raise ValueError("Token text must not be empty")
        if any(c.isspace() for c in text):
            raise ValueError(f"Token text must not contain whitespace: {text!r}")
        if "0" <= text[0] <= "9" or text[0] == ".":
            raise ValueError(f"Token text must not start like a number: {text!r}")
        if text in (BRACKET_OPEN, BRACKET_CLOSE):
            raise ValueError(f"{text!r} is reserved")
        return text.lower()

    def _insert_token(self, text: str) -> None:
        if text in self.tokens:
            return
        for idx, existing in enumerate(self.tokens):
            if len(existing) < len(text):
                self.tokens.insert(idx, text)
                return
        self.tokens.append(text)

import logging
from dataclasses import dataclass
from typing import Optional

from exprcalc.builtins import default_registry
from exprcalc.errors import CalculatorError, State
from exprcalc.parser import ParserError, parse
from exprcalc.registry import Angle, BinaryFn, Registry, UnaryFn
from exprcalc.runtime import evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    value: Optional[float]
    state: State
    error: Optional[CalculatorError] = None

    @property
    def ok(self) -> bool:
        return self.state is State.OK


class Calculator:
    """Evaluates one line of input at a time against its own registry

    Nothing but the outcome of the latest call is kept between calls, so the
    same input with the same angle unit always gives the same result.
    """

    def __init__(self, registry: Optional[Registry] = None) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.last_result: Optional[EvaluationResult] = None

    def evaluate(self, code: str, radians: bool = True) -> EvaluationResult:
        logger.debug("Evaluating %r in %s", code, "radians" if radians else "degrees")
        code = code.lower()
        try:
            try:
                value = evaluate(parse(code, self.registry), self.registry, radians=radians)
            except RecursionError:
                # nesting depth is bounded only by the input length
                raise ParserError("Expression nested too deeply", code=code, error_char_idx=0) from None
        except CalculatorError as e:
            logger.debug("Evaluation of %r failed with %s", code, e.state)
            result = EvaluationResult(value=None, state=e.state, error=e)
        else:
            result = EvaluationResult(value=value, state=State.OK)
        self.last_result = result
        return result

    @property
    def state(self) -> State:
        return self.last_result.state if self.last_result is not None else State.OK

    def is_ok(self) -> bool:
        return self.state is State.OK

    def register_operator(self, text: str, fn: BinaryFn, priority: int = 1) -> None:
        self.registry.register_operator(text, fn, priority=priority)

    def register_function(
        self, text: str, fn: UnaryFn, *, angle: Angle = Angle.NONE, postfix: bool = False
    ) -> None:
        self.registry.register_function(text, fn, angle=angle, postfix=postfix)

    def register_constant(self, text: str, value: float | str) -> None:
        self.registry.register_constant(text, value)

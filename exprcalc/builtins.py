import math
from typing import Callable

from exprcalc.registry import Angle, BinaryFn, Function, Operator, Registry, UnaryFn

BUILTIN_OPERATORS: dict[str, Operator] = dict()
BUILTIN_FUNCTIONS: dict[str, Function] = dict()
BUILTIN_CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}


def register_builtin_operator(symbol: str, priority: int):
    def decorator(fn: BinaryFn) -> BinaryFn:
        BUILTIN_OPERATORS[symbol] = Operator(fn=fn, priority=priority)
        return fn

    return decorator


def register_builtin_func(name: str, angle: Angle = Angle.NONE, postfix: bool = False):
    """Registers ``fn`` as a built-in; math domain errors become nan and overflows become inf"""

    def decorator(fn: UnaryFn) -> UnaryFn:
        def decorated(arg: float) -> float:
            try:
                return fn(arg)
            except OverflowError:
                return math.inf
            except ValueError:
                return math.nan

        BUILTIN_FUNCTIONS[name] = Function(fn=decorated, angle=angle, postfix=postfix)
        return decorated

    return decorator


def default_registry() -> Registry:
    """A fresh registry holding every built-in, independent of all others"""
    registry = Registry()
    for symbol, operator in BUILTIN_OPERATORS.items():
        registry.register_operator(symbol, operator.fn, priority=operator.priority)
    for name, function in BUILTIN_FUNCTIONS.items():
        registry.register_function(name, function.fn, angle=function.angle, postfix=function.postfix)
    for name, value in BUILTIN_CONSTANTS.items():
        registry.register_constant(name, value)
    return registry


@register_builtin_operator("+", priority=1)
def add_(a: float, b: float) -> float:
    return a + b


@register_builtin_operator("-", priority=1)
def sub_(a: float, b: float) -> float:
    return a - b


@register_builtin_operator("*", priority=2)
def mul_(a: float, b: float) -> float:
    return a * b


@register_builtin_operator("/", priority=2)
def div_(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


@register_builtin_operator("^", priority=3)
def pow_(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        # only an odd integral exponent keeps a negative base's sign
        if a < 0 and b.is_integer() and b % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0 and b < 0:
            return math.inf
        return math.nan


@register_builtin_operator("%", priority=3)
def mod_(a: float, b: float) -> float:
    """Remainder of the operands truncated toward zero; the sign follows the dividend"""
    if not (math.isfinite(a) and math.isfinite(b)):
        return math.nan
    dividend, divisor = math.trunc(a), math.trunc(b)
    if divisor == 0:
        return math.nan
    remainder = abs(dividend) % abs(divisor)
    return float(-remainder if dividend < 0 else remainder)


register_builtin_func("+")(lambda a: a)
register_builtin_func("-")(lambda a: -a)
register_builtin_func("abs")(abs)
register_builtin_func("sqrt")(math.sqrt)
register_builtin_func("sin", angle=Angle.ARGUMENT)(math.sin)
register_builtin_func("cos", angle=Angle.ARGUMENT)(math.cos)
register_builtin_func("tan", angle=Angle.ARGUMENT)(math.tan)
register_builtin_func("asin", angle=Angle.RESULT)(math.asin)
register_builtin_func("acos", angle=Angle.RESULT)(math.acos)
register_builtin_func("atan", angle=Angle.RESULT)(math.atan)


def _logarithm(log_fn: Callable[[float], float]) -> UnaryFn:
    def log_(a: float) -> float:
        if a == 0:
            return -math.inf
        return log_fn(a)

    return log_


register_builtin_func("log2")(_logarithm(math.log2))
register_builtin_func("lg")(_logarithm(math.log10))
register_builtin_func("ln")(_logarithm(math.log))


@register_builtin_func("!", postfix=True)
def factorial_(a: float) -> float:
    """Continuous factorial, x! = gamma(x + 1)"""
    return math.gamma(a + 1.0)

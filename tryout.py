from exprcalc.builtins import default_registry
from exprcalc.errors import CalculatorError
from exprcalc.expression import format_expression
from exprcalc.parser import parse
from exprcalc.runtime import evaluate
from exprcalc.tokenizer import tokenize

registry = default_registry()

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/+2",
    "7/6/2000",
    "2^3^2",
    "2-3-4",
    "sin 0 + 1",
    "sqrt 16 + !3",
    "5!",
    "7 % 3 * 2",
    "asin 1",
    "(1 + 2",
    "2 $ 3",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code, registry)
        print(f"tokens: {' '.join(str(t) for t in tokens)}")
        expression = parse(code, registry)
        print(f"ast: {format_expression(expression)}")
        print(f"radians: {evaluate(expression, registry, radians=True)}")
        print(f"degrees: {evaluate(expression, registry, radians=False)}")
    except CalculatorError as e:
        print(f"{e.state}: {e}")

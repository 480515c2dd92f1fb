import math
import random
import re
import string
import warnings

from exprcalc.session import Calculator

warnings.filterwarnings("ignore")

calculator = Calculator()

BINARY_REFERENCE = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
    "^": math.pow,
    "%": lambda a, b: math.fmod(math.trunc(a), math.trunc(b)),
}
UNARY_REFERENCE = {
    "-": lambda a: -a,
    "sqrt": math.sqrt,
    "abs": abs,
}


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    result = calculator.evaluate(code)
    if result.ok:
        return result.value
    return str(result.error)


def generate_tree(depth: int) -> tuple[str, float]:
    """Random expression with its value computed by ``math``; ArithmeticError/ValueError on bad domains"""
    if depth == 0 or random.random() < 0.3:
        literal = str(random.randint(0, 20)) if random.random() < 0.7 else f"{random.uniform(0, 20):.2f}"
        return literal, float(literal)
    if random.random() < 0.3:
        name = random.choice(list(UNARY_REFERENCE))
        operand_code, operand = generate_tree(depth - 1)
        return f"{name} ({operand_code})", UNARY_REFERENCE[name](operand)
    symbol = random.choice(list(BINARY_REFERENCE))
    left_code, left = generate_tree(depth - 1)
    right_code, right = generate_tree(depth - 1)
    return f"({left_code}) {symbol} ({right_code})", BINARY_REFERENCE[symbol](left, right)


def fuzz_against_python() -> None:
    alphabet = string.digits + ".()+-*/ "
    code = "".join(random.choices(alphabet, k=10))

    if re.findall(r"\*\s*\*", code):
        return  # avoid generating powers (10**4)

    if re.findall(r"/\s*/", code):
        return  # avoid generating int devision (10 // 3)

    if re.findall(r"(^|[^\d])\.|\.($|[^\d])", code):
        return  # numbers may not start or end with a decimal point

    res_py = eval_py(code)
    res_my = eval_my(code)
    if isinstance(res_py, (int, float)) and isinstance(res_my, float) and math.isclose(res_my, float(res_py)):
        return
    if isinstance(res_py, str) and isinstance(res_my, str):
        return
    if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
        return
    if res_py == "division by zero" and isinstance(res_my, float) and not math.isfinite(res_my):
        return
    print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")


def fuzz_against_math() -> None:
    try:
        code, expected = generate_tree(depth=4)
    except (ArithmeticError, ValueError):
        return  # reference raises where the calculator answers inf or nan
    res_my = eval_my(code)
    if isinstance(res_my, float) and (math.isclose(res_my, expected, rel_tol=1e-9) or res_my == expected):
        return
    if isinstance(res_my, float) and math.isnan(res_my) and math.isnan(expected):
        return
    print(f"{code!r}\nmath: {expected}\nmy: {res_my}\n\n")


if __name__ == "__main__":
    while True:
        fuzz_against_python()
        fuzz_against_math()

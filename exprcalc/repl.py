import argparse
import logging
import math
import sys
from typing import Callable, Optional, TextIO

from exprcalc.errors import STATE_MESSAGES
from exprcalc.session import Calculator

PROMPT = ">>> "


def build_calculator() -> Calculator:
    calculator = Calculator()

    def exp_(a: float) -> float:
        try:
            return math.exp(a)
        except OverflowError:
            return math.inf

    calculator.register_function("exp", exp_)
    return calculator


def parse_arguments(argv: Optional[list[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="exprcalc", description="Interactive arithmetic expression evaluator.")
    parser.add_argument("--degrees", action="store_true", help="interpret trigonometric angles in degrees")
    parser.add_argument("--verbose", "-v", action="store_true", help="log parsing and evaluation details")
    return parser.parse_args(argv)


def run(calculator: Calculator, read_line: Callable[[str], str], out: TextIO, radians: bool = True) -> None:
    """Reads lines until EOF or ``:quit``, printing a result or an error for each"""
    while True:
        try:
            code = read_line(PROMPT)
        except EOFError:
            return

        command = code.strip().lower()
        if not command:
            continue
        if command == ":quit":
            return
        if command in (":deg", ":rad"):
            radians = command == ":rad"
            print("Angles in " + ("radians" if radians else "degrees"), file=out)
            continue

        result = calculator.evaluate(code, radians=radians)
        if result.ok:
            print(result.value, file=out)
        else:
            print(STATE_MESSAGES[result.state], file=out)
            print(result.error, file=out)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_arguments(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    run(build_calculator(), input, sys.stdout, radians=not args.degrees)


if __name__ == "__main__":
    main()

import io

from exprcalc.repl import build_calculator, parse_arguments, run


def run_lines(lines: list[str], radians: bool = True) -> list[str]:
    pending = list(lines)

    def read_line(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    out = io.StringIO()
    run(build_calculator(), read_line, out, radians=radians)
    return out.getvalue().splitlines()


def test_prints_results() -> None:
    assert run_lines(["1+2", "", "2^3^2"]) == ["3.0", "64.0"]


def test_prints_error_kind_and_detail() -> None:
    assert run_lines(["2 $ 3"]) == [
        "Invalid syntax",
        "[Tokenizer error] Unexpected character: '$'",
        "2 $ 3",
        "  ^",
    ]


def test_unknown_unary_operator_message() -> None:
    assert run_lines(["*3"])[0] == "Unknown unary operator"


def test_switches_angle_unit() -> None:
    assert run_lines([":deg", "asin 1", ":rad", "asin 0"]) == [
        "Angles in degrees",
        "90.0",
        "Angles in radians",
        "0.0",
    ]


def test_degrees_from_start() -> None:
    assert run_lines(["acos 1"], radians=False) == ["0.0"]


def test_quit_stops_reading() -> None:
    assert run_lines(["1", ":quit", "2"]) == ["1.0"]


def test_host_registers_exp() -> None:
    assert run_lines(["exp 0", "ln exp 1"]) == ["1.0", "1.0"]


def test_parse_arguments() -> None:
    args = parse_arguments(["--degrees", "-v"])
    assert args.degrees
    assert args.verbose
    assert not parse_arguments([]).degrees


def test_keeps_reading_after_too_deep_nesting() -> None:
    lines = run_lines(["-" * 1000 + "1", "1+1"])
    assert lines[0] == "Invalid syntax"
    assert lines[1] == "Parser error: Expression nested too deeply"
    assert lines[-1] == "2.0"

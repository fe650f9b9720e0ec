"""
Command-line entry point for rpncalc.

    rpncalc "(1+2)*sqrt(4)"     evaluate the arguments joined by spaces
    rpncalc                     prompt for one line on stdin
    rpncalc --json 2+2          machine-readable output

Exit status is 0 on success and 1 on any read or evaluation error.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Any, Dict, Optional, TextIO

from .errors import CalculatorError, ExpressionSyntaxError
from .evaluator import Calculator
from .formatting import format_result

PROMPT = "Enter an expression: "


def read_expression(
    parts: list[str], stdin: Optional[TextIO] = None, prompt: Optional[str] = PROMPT
) -> str:
    """Join ``parts`` with spaces, or read one line from ``stdin`` when empty.

    ``prompt`` is written to stdout before reading; pass None to suppress it.

    Raises:
        EOFError: if stdin is exhausted before any input arrives.
    """
    if parts:
        return " ".join(parts)

    stream = sys.stdin if stdin is None else stdin
    if prompt:
        print(prompt, end="", flush=True)
    line = stream.readline()
    if not line:
        raise EOFError("EOF")
    return line.removesuffix("\n").removesuffix("\r")


def _error_kind(error: CalculatorError) -> str:
    return "syntax" if isinstance(error, ExpressionSyntaxError) else "evaluation"


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="rpncalc",
        description="Evaluate an arithmetic expression (+ - * / % ^ ! sqrt log sin cos tan)",
    )
    parser.add_argument("expression", nargs="*", help="Expression text; read from stdin when omitted")
    parser.add_argument("--json", action="store_true", help="Output a machine-readable JSON object")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log tokens and postfix order to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    try:
        expression = read_expression(args.expression, prompt=None if args.json else PROMPT)
    except (OSError, EOFError, UnicodeDecodeError) as e:
        print(f"Error reading expression: error reading input: {e}", file=sys.stderr)
        return 1

    report: Dict[str, Any] = {"expression": expression}
    try:
        value = Calculator().evaluate(expression)
    except CalculatorError as e:
        if args.json:
            report.update(error=str(e), kind=_error_kind(e))
            print(json.dumps(report, indent=2))
        else:
            print(f"Error evaluating expression: {e}", file=sys.stderr)
        return 1

    formatted = format_result(value)
    if args.json:
        # NaN and Inf have no strict JSON encoding
        report.update(result=value if math.isfinite(value) else None, formatted=formatted)
        print(json.dumps(report, indent=2, allow_nan=False))
    else:
        print(formatted)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

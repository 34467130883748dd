#!/usr/bin/env python3
"""
Fraction Calculator CLI

Command-line front end for the rational-arithmetic engine.

Usage:
    fraction-calc 1/2 + 1/3
    fraction-calc "3 1/2" ÷ 7/4
    fraction-calc --json 2/3 x 3/4
    fraction-calc --from-decimal 0.75
    fraction-calc --from-decimal 0.333333 --tolerance 1e-5
    fraction-calc --log-level INFO --log-json 1/2 + 1/3

Operands that start with "-" must follow "--":
    fraction-calc -- -1/2 - 1/4

Exit status: 0 on success, 1 on a calculation error, 2 on usage error.
"""
import argparse
import json
import sys
from typing import List, Optional

from src.calculator.calculator import CalculatorConfig, FractionCalculator
from src.core.logging_config import configure_logging
from src.core.math.continued_fractions import DEFAULT_TOLERANCE, MAX_CONVERGENT_ITERATIONS, RecoveryConfig
from src.core.math.exceptions import RationalError
from src.core.math.formatting import DECIMAL_PLACES_DEFAULT, format_decimal, format_improper, format_rational


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fraction-calc",
        description="Exact fraction calculator (add, subtract, multiply, divide, decimal recovery)",
    )
    parser.add_argument("left", nargs="?", help="Left operand: 3, 7/2, '3 1/2' or 0.5")
    parser.add_argument("operator", nargs="?", help="Operator: + - × ÷ (aliases: * x / :)")
    parser.add_argument("right", nargs="?", help="Right operand")
    parser.add_argument(
        "--from-decimal",
        type=float,
        metavar="VALUE",
        help="Recover the closest low-denominator fraction for VALUE",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=DEFAULT_TOLERANCE,
        help=f"Relative tolerance for decimal recovery (default: {DEFAULT_TOLERANCE})",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=MAX_CONVERGENT_ITERATIONS,
        help=f"Continued-fraction iteration cap (default: {MAX_CONVERGENT_ITERATIONS})",
    )
    parser.add_argument(
        "--places",
        type=int,
        default=DECIMAL_PLACES_DEFAULT,
        help=f"Decimal places in output (default: {DECIMAL_PLACES_DEFAULT})",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--log-json", action="store_true", help="Render log events as JSON lines on stderr")
    return parser


def cmd_from_decimal(calculator: FractionCalculator, value: float, as_json: bool) -> int:
    """Recover a fraction from a decimal value."""
    try:
        fraction = calculator.recover_decimal(value)
    except RationalError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if as_json:
        payload = fraction.model_dump(mode="json")
        payload["display"] = format_rational(fraction)
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(f"{value} ≈ {format_rational(fraction)}")
        print(f"improper: {format_improper(fraction)}")
        print(f"decimal:  {format_decimal(fraction, calculator.config.decimal_places)}")
    return 0


def cmd_calculate(calculator: FractionCalculator, left: str, operator: str, right: str, as_json: bool) -> int:
    """Evaluate `left operator right`."""
    outcome = calculator.evaluate(left, operator, right)

    if not outcome.ok:
        print(f"❌ {outcome.error_message}", file=sys.stderr)
        return 1

    if as_json:
        record = calculator.history.latest()
        print(json.dumps(record.model_dump(mode="json"), ensure_ascii=False))
    else:
        print(outcome.expression)
        print(f"improper: {outcome.improper}")
        print(f"decimal:  {outcome.decimal_display}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, json_output=args.log_json)

    if args.places < 0:
        parser.error("--places must be non-negative")

    config = CalculatorConfig(
        decimal_places=args.places,
        recovery=RecoveryConfig(tolerance=args.tolerance, max_iterations=args.max_iterations),
    )
    calculator = FractionCalculator(config)

    if args.from_decimal is not None:
        if args.left is not None:
            parser.error("--from-decimal does not take operands")
        return cmd_from_decimal(calculator, args.from_decimal, args.json)

    if args.left is None or args.operator is None or args.right is None:
        parser.error("expected: LEFT OPERATOR RIGHT (or --from-decimal VALUE)")

    return cmd_calculate(calculator, args.left, args.operator, args.right, args.json)


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Command-line interface printing the truth table of boolean expressions

import sys
import argparse
from typing import Dict, List, Optional, Sequence

from parser import parse
from parser.exceptions import ParseError
from evaluation import evaluate, free_variables
from evaluation.exceptions import EvaluationError, UnknownPresetVariable
from utils.logger import configure_logging, get_logger
from utils.table_format import format_parse_error, format_table

DEFAULT_MAX_VARIABLES = 16

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_PARSE_ERROR = 2
EXIT_UNKNOWN_PRESET = 3
EXIT_EVALUATION_ERROR = 4
EXIT_UNEXPECTED = 5

EXPRESSION_HELP = """
<expr>:   The logical expression to evaluate, built from values, variables
          and operators. `0`/`false` is a false value, `1`/`true` a true
          value; identifiers such as `a`, `ready` or `x_1` are variables.
          Operators:
          `!`, `not` - negation         `^`  - exclusive or
          `&`        - and              `|`  - or
          `=>`       - implication
          Precedence, tightest first: `!`, `&`, `^`, `|`, `=>`.
          Parentheses override precedence.
          `=` separates sub-expressions that share one variable set; each
          gets its own result column, e.g. `a&b=a|b|c`.
<preset>: `+var` fixes `var` to 1 and `-var` fixes it to 0. Fixed variables
          are not varied and are marked with `*` in the table header.

Examples:
  python run_truth_table.py "a & b"
  python run_truth_table.py "a&b=a|b|c" +c
  python run_truth_table.py --verbose "(abc | !def) ^ (!abc & def)" -abc
"""


class PresetError(ValueError):
    """Raised when a preset argument is not of the form `+name` / `-name`."""


def collect_presets(arguments: Sequence[str]) -> Dict[str, bool]:
    """Turn `+name` / `-name` arguments into a preset map.

    A variable preset twice keeps its first value; the repeat is logged as a
    warning.

    Args:
        arguments: Raw preset arguments in command-line order

    Returns:
        Mapping from variable name to fixed value

    Raises:
        PresetError: An argument is not `+` or `-` followed by a name
    """
    logger = get_logger()
    presets: Dict[str, bool] = {}

    for arg in arguments:
        if len(arg) < 2 or arg[0] not in "+-":
            raise PresetError(f"invalid preset '{arg}'")

        name, value = arg[1:], arg[0] == "+"
        if name in presets:
            logger.warning(f"variable '{name}' preset twice - ignoring second time")
            continue
        presets[name] = value

    return presets


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Options must precede the expression; everything after it is a preset,
    so `-h` or `-v` there fix variables `h` and `v`.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="run_truth_table.py",
        description="Evaluates logical expressions and prints their truth table",
        usage="%(prog)s [options] <expr> [<preset>...]",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EXPRESSION_HELP,
        add_help=False,
    )

    parser.add_argument("--help", action="help", help="Show this help message and exit")

    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        metavar="N",
        help=f"Refuse tables with more than N free variables (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument("expression", nargs="?", help=argparse.SUPPRESS)

    parser.add_argument("presets", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)

    return parser


def print_table(expressions, variables, rows, presets: Dict[str, bool]) -> int:
    """Print the table, returning the number of rows."""
    count = 0
    for line in format_table(variables, expressions, rows, presets):
        print(line)
        count += 1
    # header and separator lines are not rows
    return count - 2


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth table application.

    Args:
        argv: Command-line arguments without the program name

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    if args.expression is None:
        parser.print_help()
        return EXIT_USAGE

    try:
        presets = collect_presets(args.presets)

        expressions, variables = parse(args.expression)
        logger.table_start(args.expression, variables, presets)

        rows = evaluate(expressions, variables, presets)

        free = free_variables(variables, presets)
        if len(free) > args.max_variables:
            logger.error(
                f"{len(free)} free variables exceed the limit of {args.max_variables} "
                f"({2 ** len(free)} rows); preset some variables or raise --max-variables"
            )
            return EXIT_USAGE

        row_count = print_table(expressions, variables, rows, presets)
        logger.table_done(row_count)
        return EXIT_OK

    except PresetError as e:
        logger.error(str(e))
        return EXIT_USAGE

    except ParseError as e:
        logger.error(f"parse error in '{args.expression}'")
        for line in format_parse_error(args.expression, e):
            print(line, file=sys.stderr)
        return EXIT_PARSE_ERROR

    except UnknownPresetVariable as e:
        logger.error(f"Preset error: no variable named '{e.name}'")
        return EXIT_UNKNOWN_PRESET

    except EvaluationError as e:
        logger.error(f"Evaluation error: {e}")
        return EXIT_EVALUATION_ERROR

    except KeyboardInterrupt:
        logger.error("Evaluation interrupted by user")
        return EXIT_UNEXPECTED

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return EXIT_UNEXPECTED


def cli() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    sys.exit(main())

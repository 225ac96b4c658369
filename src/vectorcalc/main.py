"""
Application Entry Point
=======================
Parses the command line and starts one of the front ends.

Why is this file needed?
------------------------
It acts as the orchestrator. It:
1. Sets up logging from the command line options.
2. Starts the Qt window (default), a one-shot calculation or the
   interactive console menu.
3. Imports Qt only when the window is requested.

Usage:
    $ vectorcalc
    $ vectorcalc calc sum "(1; 2)" "(3; 4; 5)"
    $ vectorcalc interactive
"""
import argparse
import logging
import sys
from typing import List, Optional

from vectorcalc import config
from vectorcalc.controller.calculator import Operation, evaluate
from vectorcalc.controller.interactive import InteractiveSession
from vectorcalc.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Command line names of the calculator operations
CLI_OPERATIONS = {
    "length-a": Operation.LENGTH_A,
    "length-b": Operation.LENGTH_B,
    "sum": Operation.SUM,
    "difference": Operation.DIFFERENCE,
    "dot": Operation.DOT,
    "cross": Operation.CROSS,
    "distance": Operation.DISTANCE,
    "angle": Operation.ANGLE,
    "normalize-a": Operation.NORMALIZE_A,
    "normalize-b": Operation.NORMALIZE_B,
    "scale": Operation.SCALE,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=config.APP_NAME,
        description="Vector calculator: length, sum, difference, dot, cross, distance and angle.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the calculator window
  vectorcalc

  # One-shot calculation
  vectorcalc calc cross "(1; 0; 0)" "(0; 1; 0)"

  # Console menu
  vectorcalc interactive
        """,
    )
    parser.add_argument(
        "--log-level",
        default=logging.getLevelName(config.DEFAULT_LOG_LEVEL),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument(
        "--max-components",
        type=int,
        default=config.MAX_COMPONENTS,
        help="Largest accepted vector (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Front end")

    subparsers.add_parser("gui", help="Open the calculator window (default)")

    calc_parser = subparsers.add_parser("calc", help="Run a single operation and print the result")
    calc_parser.add_argument("operation", choices=sorted(CLI_OPERATIONS), help="Operation to run")
    calc_parser.add_argument("a", help="Vector A, e.g. \"(1; 2; 3)\"")
    calc_parser.add_argument("b", nargs="?", default="", help="Vector B (empty if omitted)")

    subparsers.add_parser("interactive", help="Menu-driven console calculator")

    return parser


def run_calc(operation_name: str, text_a: str, text_b: str, max_components: Optional[int]) -> int:
    result = evaluate(CLI_OPERATIONS[operation_name], text_a, text_b, max_components=max_components)
    if result.is_error:
        print(result.text, file=sys.stderr)
        return 1
    print(result.text)
    return 0


def run_gui(max_components: Optional[int]) -> int:
    from vectorcalc.view.application import create_app
    from vectorcalc.view.main_window import MainWindow

    app = create_app()
    window = MainWindow(max_components=max_components)
    window.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.getLevelName(args.log_level), log_file=args.log_file)
    max_components = args.max_components if args.max_components > 0 else None
    logger.debug("Starting %s front end", args.command or "gui")

    if args.command == "calc":
        return run_calc(args.operation, args.a, args.b, max_components)
    if args.command == "interactive":
        return InteractiveSession(max_components=max_components).run()
    return run_gui(max_components)


if __name__ == "__main__":
    sys.exit(main())

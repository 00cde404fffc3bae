"""Read-eval-print driver loop for scheval."""
from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from scheval.config import STRATEGIES, get_log_level, get_recursion_limit, get_strategy_name
from scheval.errors import SchevalError
from scheval.interpreter import Interpreter
from scheval.logging_config import get_logger, setup_logging
from scheval.printer import user_print
from scheval.reader.parser import read_all

logger = get_logger(__name__)

INPUT_PROMPT = ";;; M-Eval input:"
OUTPUT_PROMPT = ";;; M-Eval output:"


def driver_loop(
    interpreter: Interpreter,
    input_fn: Callable[[], str] = input,
    output: Optional[TextIO] = None,
) -> None:
    """Prompt, read, evaluate and print until end of input.

    Errors raised by an evaluation are reported and the loop continues.
    """
    out = output if output is not None else sys.stdout
    while True:
        out.write(INPUT_PROMPT + "\n")
        out.flush()
        try:
            line = input_fn()
        except (KeyboardInterrupt, EOFError):
            out.write("\n")
            break
        try:
            for expr in read_all(line):
                value = interpreter.eval_expr(expr)
                out.write(OUTPUT_PROMPT + "\n")
                user_print(value, out)
        except SchevalError as ex:
            logger.debug("Evaluation failed", exc_info=True)
            out.write(f";;; Error: {ex}\n")
        except RecursionError:
            logger.debug("Evaluation exhausted the host stack", exc_info=True)
            out.write(";;; Error: maximum recursion depth exceeded\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scheval", description="Eager and lazy Scheme evaluator")
    parser.add_argument("--strategy", choices=STRATEGIES, default=None,
                        help="evaluation strategy (default: $SCHEVAL_STRATEGY or eager)")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default: $SCHEVAL_LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", default=None, help="write logs to this file instead of stdout")
    parser.add_argument("files", nargs="*", help="source files to load before the loop starts")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.log_level or get_log_level(), args.log_file)
        limit = get_recursion_limit()
        if limit is not None:
            sys.setrecursionlimit(limit)
        interpreter = Interpreter(args.strategy or get_strategy_name())
        for path in args.files:
            with open(path, encoding="utf-8") as f:
                interpreter.eval(f.read())
    except SchevalError as ex:
        print(f";;; Error: {ex}", file=sys.stderr)
        return 1
    driver_loop(interpreter)
    return 0

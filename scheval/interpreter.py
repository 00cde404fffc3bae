from __future__ import annotations

import logging
from typing import Literal, Optional

from scheval import LispValue, SExpression
from scheval.builtin.primitives import init_global_environment
from scheval.config import get_strategy_name
from scheval.evaluation.evaluator import Evaluator
from scheval.evaluation.strategy import EvaluationStrategy, strategy_for
from scheval.reader.parser import TokenStream, lex
from scheval.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating source text with one Evaluator.
    Maintains the global Environment across calls.
    """

    # Class-level default used when neither the caller nor SCHEVAL_STRATEGY picks one
    DefaultStrategy: Literal['eager', 'lazy'] = 'eager'

    def __init__(
        self,
        strategy: EvaluationStrategy | Literal['eager', 'lazy'] | None = None,
        prelude: Optional[str] = None,
    ):
        if strategy is None:
            strategy = get_strategy_name(self.DefaultStrategy)
        if isinstance(strategy, str):
            strategy = strategy_for(strategy)
        self.evaluator = Evaluator(strategy)
        self.env: Environment = init_global_environment()
        logger.info("Interpreter initialized with %s evaluation", self.evaluator.strategy.name)

        if prelude:
            self.eval(prelude)

    @property
    def strategy_name(self) -> str:
        return self.evaluator.strategy.name

    def eval_expr(self, expr: SExpression) -> LispValue:
        """Evaluate one already-read expression at top level, forcing the result."""
        return self.evaluator.actual_value(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code` in order; return the last value."""
        stream = TokenStream(lex(code))
        result: LispValue = None
        for expr in stream.parse_all():
            result = self.eval_expr(expr)
        return result

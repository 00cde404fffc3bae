"""Core evaluator for scheval.

A single dispatch over the classified expression kind, parameterized by an
evaluation strategy that decides how operands are prepared (evaluated now or
wrapped in thunks) and how values are forced where they are needed.
Recursion is the only control-flow mechanism; there is no trampoline.
"""

from __future__ import annotations

from typing import Iterable

from scheval import LispValue, SExpression
from scheval.evaluation.apply import apply
from scheval.evaluation.classifier import ExpressionKind, classify, operands, operator
from scheval.evaluation.special_forms import SPECIAL_FORMS
from scheval.evaluation.strategy import EagerStrategy, EvaluationStrategy, strategy_for
from scheval.types.environment import Environment


class Evaluator:
    """eval/apply over one evaluation strategy."""

    def __init__(self, strategy: EvaluationStrategy | str | None = None):
        if strategy is None:
            strategy = EagerStrategy()
        elif isinstance(strategy, str):
            strategy = strategy_for(strategy)
        self.strategy: EvaluationStrategy = strategy

    @property
    def is_lazy(self) -> bool:
        return self.strategy.name == "lazy"

    def eval(self, expr: SExpression, env: Environment) -> LispValue:
        kind = classify(expr)
        if kind is ExpressionKind.LITERAL:
            return expr
        if kind is ExpressionKind.VARIABLE:
            return env.lookup(expr)
        if kind is ExpressionKind.APPLICATION:
            procedure = self.actual_value(operator(expr), env)
            arguments = self.strategy.operand_values(procedure, operands(expr), env, self)
            return self.apply(procedure, arguments)
        return SPECIAL_FORMS[kind](expr, env, self)

    def apply(self, procedure: LispValue, arguments: list[LispValue]) -> LispValue:
        return apply(procedure, arguments, self)

    def force(self, value: LispValue) -> LispValue:
        return self.strategy.force(value, self)

    def actual_value(self, expr: SExpression, env: Environment) -> LispValue:
        """Evaluate `expr` and force the result."""
        return self.force(self.eval(expr, env))

    def eval_sequence(self, exps: Iterable[SExpression], env: Environment) -> LispValue:
        """Evaluate left to right; the value of the last expression is returned."""
        exps = list(exps)
        for e in exps[:-1]:
            self.eval(e, env)
        return self.eval(exps[-1], env)


def evaluate(
    expr: SExpression, env: Environment, strategy: EvaluationStrategy | str | None = None
) -> LispValue:
    """Evaluate one expression with a fresh Evaluator."""
    return Evaluator(strategy).eval(expr, env)

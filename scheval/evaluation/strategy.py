"""Evaluation strategies: how operands are prepared and when values are forced.

- EagerStrategy (applicative order): operands are evaluated before the call
  and forcing is the identity.
- LazyStrategy (normal order, call-by-need): operands of compound procedures
  are wrapped in Thunks over the caller's environment; values are forced only
  where they are needed (if predicates, operators, primitive arguments and
  top-level results), and each thunk is evaluated at most once.
"""

from __future__ import annotations

import logging
from typing import Protocol

from scheval import LispValue, SExpression
from scheval.errors import SchevalConfigError
from scheval.types.environment import Environment
from scheval.types.procedure import Primitive
from scheval.types.thunk import Thunk

logger = logging.getLogger(__name__)


class EvaluationStrategy(Protocol):
    name: str

    def operand_values(
        self, procedure: LispValue, operands: list[SExpression], env: Environment, evaluator
    ) -> list[LispValue]: ...

    def force(self, value: LispValue, evaluator) -> LispValue: ...


class EagerStrategy:
    name = "eager"

    def operand_values(
        self, procedure: LispValue, operands: list[SExpression], env: Environment, evaluator
    ) -> list[LispValue]:
        return [evaluator.eval(operand, env) for operand in operands]

    def force(self, value: LispValue, evaluator) -> LispValue:
        return value


class LazyStrategy:
    name = "lazy"

    def operand_values(
        self, procedure: LispValue, operands: list[SExpression], env: Environment, evaluator
    ) -> list[LispValue]:
        if isinstance(procedure, Primitive):
            return [evaluator.actual_value(operand, env) for operand in operands]
        return [delay_it(operand, env) for operand in operands]

    def force(self, value: LispValue, evaluator) -> LispValue:
        return force_it(value, evaluator)


def delay_it(expr: SExpression, env: Environment) -> Thunk:
    return Thunk(expr, env)


def force_it(obj: LispValue, evaluator) -> LispValue:
    """Resolve `obj` to a non-thunk value, memoizing into the thunk itself."""
    if not isinstance(obj, Thunk):
        return obj
    if not obj.evaluated:
        logger.debug("Forcing thunk for %r", obj.expression)
        # actual_value forces any thunk the expression itself evaluates to
        obj.memoize(evaluator.actual_value(obj.expression, obj.env))
    return obj.value


STRATEGIES = {
    EagerStrategy.name: EagerStrategy,
    LazyStrategy.name: LazyStrategy,
}


def strategy_for(name: str) -> EvaluationStrategy:
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise SchevalConfigError(f"Unknown evaluation strategy {name!r}")

from __future__ import annotations

from scheval import LispValue, SExpression
from scheval.types.environment import Environment


class Thunk:
    """A delayed operand: an expression, the caller's environment and a memo cell.

    Once memoized the thunk drops its expression and environment and keeps
    only the value.
    """

    __slots__ = ("expression", "env", "value", "evaluated")

    def __init__(self, expression: SExpression, env: Environment):
        self.expression: SExpression = expression
        self.env: Environment | None = env
        self.value: LispValue = None
        self.evaluated: bool = False

    def memoize(self, value: LispValue) -> LispValue:
        self.value = value
        self.evaluated = True
        self.expression = None
        self.env = None
        return value

    def __repr__(self) -> str:
        if self.evaluated:
            return f"<evaluated-thunk {self.value!r}>"
        return "<thunk>"

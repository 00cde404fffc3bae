"""Procedure values: host primitives and user-defined closures."""

from __future__ import annotations

from scheval import LispValue, PrimitiveFn, SExpression
from scheval.types.environment import Environment
from scheval.types.symbol import Symbol


class Primitive:
    """A named host callable invoked with already-evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, evaluator, args: list[LispValue]) -> LispValue:
        return self.fn(evaluator, args)

    def __str__(self) -> str:
        return f"<primitive {self.name}>"

    def __repr__(self) -> str:
        return str(self)


class CompoundProcedure:
    """A closure: parameters, a non-empty body sequence and its defining environment."""

    __slots__ = ("parameters", "body", "env")

    def __init__(self, parameters: list[Symbol], body: list[SExpression], env: Environment):
        self.parameters: tuple[Symbol, ...] = tuple(parameters)
        self.body: tuple[SExpression, ...] = tuple(body)
        self.env: Environment = env

    def __str__(self) -> str:
        # The captured environment is never rendered; it may contain this procedure.
        from scheval.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return str(self)

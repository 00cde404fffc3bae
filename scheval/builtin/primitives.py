"""Primitive procedures and the global environment.

Each primitive body takes the evaluator and the list of already-evaluated
(under the lazy strategy: already-forced) arguments, mirroring how the
evaluator calls every Primitive.
"""
from __future__ import annotations

from typing import Iterable, Optional

from scheval import LispValue, PrimitiveFn
from scheval.errors import SchevalTypeError, SchevalArityError
from scheval.evaluation.special_forms.if_form import is_false
from scheval.types.environment import Environment, the_empty_environment
from scheval.types.procedure import Primitive
from scheval.types.symbol import Symbol


def _expect_arity(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise SchevalArityError(
            f"{name} requires exactly {count} argument(s), got {len(args)}",
            [Symbol(f"arg{i}") for i in range(count)],
            args,
        )


def _is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    if not all(_is_number(a) for a in args):
        raise SchevalTypeError(f"All arguments to {name} must be numbers")
    return args


def is_equal(a, b) -> bool:
    """Structural equality for list values; numbers compare by value."""
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        return a == b
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if type(a) != type(b) or len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


# -------------------------------
# Lists
# -------------------------------
def cons(evaluator, args: list[LispValue]) -> LispValue:
    """Prepend head to a list, or build a dotted pair (a tuple) for a non-list tail."""
    _expect_arity("cons", args, 2)
    head, tail = args
    if isinstance(tail, list):
        return [head] + tail
    return (head, tail)


def car(evaluator, args: list[LispValue]) -> LispValue:
    _expect_arity("car", args, 1)
    xs = args[0]
    if isinstance(xs, tuple):
        return xs[0]
    if isinstance(xs, list) and xs:
        return xs[0]
    raise SchevalTypeError(f"car expects a non-empty list or pair, got {xs!r}")


def cdr(evaluator, args: list[LispValue]) -> LispValue:
    _expect_arity("cdr", args, 1)
    xs = args[0]
    if isinstance(xs, tuple):
        return xs[1]
    if isinstance(xs, list) and xs:
        return xs[1:]
    raise SchevalTypeError(f"cdr expects a non-empty list or pair, got {xs!r}")


def list_builtin(evaluator, args: list[LispValue]) -> list[LispValue]:
    return list(args)


def null(evaluator, args: list[LispValue]) -> bool:
    _expect_arity("null?", args, 1)
    return isinstance(args[0], list) and not args[0]


def map_builtin(evaluator, args: list[LispValue]) -> list[LispValue]:
    """(map f xs ys ...) applies f element-wise, stopping at the shortest list."""
    if len(args) < 2:
        raise SchevalArityError(
            "map requires a procedure and at least one list",
            [Symbol("proc"), Symbol("list")],
            args,
        )
    proc, *lists = args
    for xs in lists:
        if not isinstance(xs, list):
            raise SchevalTypeError(f"map expects lists, got {xs!r}")
    return [evaluator.force(evaluator.apply(proc, list(items))) for items in zip(*lists)]


# -------------------------------
# Arithmetic
# -------------------------------
def add(evaluator, args: list[LispValue]) -> LispValue:
    return sum(_numbers("+", args))


def sub(evaluator, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise SchevalArityError("- requires at least 1 argument", [Symbol("x")], args)
    _numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(evaluator, args: list[LispValue]) -> LispValue:
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(evaluator, args: list[LispValue]) -> LispValue:
    """Divide left to right; with one arg returns the reciprocal."""
    if not args:
        raise SchevalArityError("/ requires at least 1 argument", [Symbol("x")], args)
    _numbers("/", args)
    if len(args) == 1:
        return 1 / args[0]
    result = args[0]
    for x in args[1:]:
        result /= x
    return result


# -------------------------------
# Comparison and predicates
# -------------------------------
def equals(evaluator, args: list[LispValue]) -> bool:
    """True if all arguments are equal (or zero/one arg)."""
    return all(is_equal(a, b) for a, b in zip(args, args[1:]))


def lt(evaluator, args: list[LispValue]) -> bool:
    """Chainable less-than."""
    return all(a < b for a, b in zip(_numbers("<", args), args[1:]))


def lte(evaluator, args: list[LispValue]) -> bool:
    return all(a <= b for a, b in zip(_numbers("<=", args), args[1:]))


def gt(evaluator, args: list[LispValue]) -> bool:
    """Chainable greater-than."""
    return all(a > b for a, b in zip(_numbers(">", args), args[1:]))


def gte(evaluator, args: list[LispValue]) -> bool:
    return all(a >= b for a, b in zip(_numbers(">=", args), args[1:]))


def logical_not(evaluator, args: list[LispValue]) -> bool:
    """(not x) is true only when x is the designated false value."""
    _expect_arity("not", args, 1)
    return is_false(args[0])


def is_eq(evaluator, args: list[LispValue]) -> bool:
    """Identity, except that symbols and numbers compare by value."""
    _expect_arity("eq?", args, 2)
    a, b = args
    if isinstance(a, Symbol) or (_is_number(a) and _is_number(b)):
        return a == b
    return a is b


PRIMITIVE_PROCEDURES: dict[str, PrimitiveFn] = {
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "list": list_builtin,
    "map": map_builtin,
    "null?": null,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "eq?": is_eq,
}


def primitive_procedure_objects(
    table: Optional[dict[str, PrimitiveFn]] = None,
) -> dict[Symbol, Primitive]:
    table = PRIMITIVE_PROCEDURES if table is None else table
    return {Symbol(name): Primitive(name, fn) for name, fn in table.items()}


def init_global_environment(
    extra: Optional[Iterable[tuple[str, PrimitiveFn]]] = None,
) -> Environment:
    """Build the single global frame: every primitive plus `true` and `false`.

    `extra` adds (name, host callable) pairs on top of the standard table.
    """
    table = dict(PRIMITIVE_PROCEDURES)
    if extra is not None:
        table.update(extra)
    objects = primitive_procedure_objects(table)
    env = the_empty_environment().extend(list(objects.keys()), list(objects.values()))
    env.define(Symbol("true"), True)
    env.define(Symbol("false"), False)
    return env

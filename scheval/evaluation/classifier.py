"""Expression classification and destructuring.

Every expression is classified once into an ExpressionKind; the evaluator
dispatches on that kind. Accessors destructure a form and raise
SchevalSyntaxError when the form has too few parts.
"""

from __future__ import annotations

from enum import Enum

from scheval import SExpression
from scheval.errors import SchevalSyntaxError, SchevalUnknownExpressionType
from scheval.types.symbol import (
    BEGIN,
    COND,
    DEFINE,
    ELSE,
    IF,
    LAMBDA,
    QUOTE,
    SET,
    Symbol,
)


class ExpressionKind(Enum):
    LITERAL = "literal"
    VARIABLE = "variable"
    QUOTE = "quote"
    ASSIGNMENT = "assignment"
    DEFINITION = "definition"
    LAMBDA = "lambda"
    IF = "if"
    BEGIN = "begin"
    COND = "cond"
    APPLICATION = "application"


TAGS: dict[Symbol, ExpressionKind] = {
    QUOTE: ExpressionKind.QUOTE,
    SET: ExpressionKind.ASSIGNMENT,
    DEFINE: ExpressionKind.DEFINITION,
    LAMBDA: ExpressionKind.LAMBDA,
    IF: ExpressionKind.IF,
    BEGIN: ExpressionKind.BEGIN,
    COND: ExpressionKind.COND,
}


def is_self_evaluating(expr: SExpression) -> bool:
    # bool is an int subclass; the two booleans self-evaluate as well
    return isinstance(expr, (int, float, str))


def is_variable(expr: SExpression) -> bool:
    return isinstance(expr, Symbol)


def is_tagged_list(expr: SExpression, tag: Symbol) -> bool:
    return isinstance(expr, list) and len(expr) > 0 and expr[0] == tag


def is_quoted(expr: SExpression) -> bool:
    return is_tagged_list(expr, QUOTE)


def is_assignment(expr: SExpression) -> bool:
    return is_tagged_list(expr, SET)


def is_definition(expr: SExpression) -> bool:
    return is_tagged_list(expr, DEFINE)


def is_lambda(expr: SExpression) -> bool:
    return is_tagged_list(expr, LAMBDA)


def is_if(expr: SExpression) -> bool:
    return is_tagged_list(expr, IF)


def is_begin(expr: SExpression) -> bool:
    return is_tagged_list(expr, BEGIN)


def is_cond(expr: SExpression) -> bool:
    return is_tagged_list(expr, COND)


def is_application(expr: SExpression) -> bool:
    """Any non-empty list whose head is not a reserved tag."""
    if not isinstance(expr, list) or not expr:
        return False
    head = expr[0]
    return not (isinstance(head, Symbol) and head in TAGS)


def classify(expr: SExpression) -> ExpressionKind:
    """Decide which expression variant `expr` is.

    Raises SchevalUnknownExpressionType for anything outside the grammar,
    including the empty list.
    """
    if is_self_evaluating(expr):
        return ExpressionKind.LITERAL
    if is_variable(expr):
        return ExpressionKind.VARIABLE
    if isinstance(expr, list) and expr:
        head = expr[0]
        if isinstance(head, Symbol):
            kind = TAGS.get(head)
            if kind is not None:
                return kind
        return ExpressionKind.APPLICATION
    raise SchevalUnknownExpressionType(expr)


def _part(expr: list, index: int, form: str) -> SExpression:
    if len(expr) <= index:
        raise SchevalSyntaxError(f"Malformed {form}: {expr!r}")
    return expr[index]


def _check_parameters(params: SExpression, form: str) -> list[Symbol]:
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise SchevalSyntaxError(f"{form} parameters must be a list of symbols, got {params!r}")
    if len(set(params)) != len(params):
        raise SchevalSyntaxError(f"{form} parameters must be distinct, got {params!r}")
    return params


# quote
def text_of_quotation(expr: list) -> SExpression:
    return _part(expr, 1, "quote")


# set!
def assignment_variable(expr: list) -> Symbol:
    var = _part(expr, 1, "set!")
    if not isinstance(var, Symbol):
        raise SchevalSyntaxError(f"set! target must be a symbol, got {var!r}")
    return var


def assignment_value(expr: list) -> SExpression:
    return _part(expr, 2, "set!")


# lambda
def lambda_parameters(expr: list) -> list[Symbol]:
    return _check_parameters(_part(expr, 1, "lambda"), "lambda")


def lambda_body(expr: list) -> list[SExpression]:
    body = expr[2:]
    if not body:
        raise SchevalSyntaxError(f"lambda requires at least one body expression: {expr!r}")
    return body


# define
def definition_variable(expr: list) -> Symbol:
    target = _part(expr, 1, "define")
    if isinstance(target, list):
        target = _part(target, 0, "define")
    if not isinstance(target, Symbol):
        raise SchevalSyntaxError(f"define target must be a symbol, got {target!r}")
    return target


def definition_value(expr: list) -> SExpression:
    """The value expression; (define (f x) body...) becomes (lambda (x) body...)."""
    from scheval.evaluation.desugar import make_lambda

    target = _part(expr, 1, "define")
    if isinstance(target, list):
        params = _check_parameters(target[1:], "define")
        return make_lambda(params, expr[2:])
    if len(expr) != 3:
        raise SchevalSyntaxError(f"define requires exactly one value expression: {expr!r}")
    return expr[2]


# if
def if_predicate(expr: list) -> SExpression:
    return _part(expr, 1, "if")


def if_consequent(expr: list) -> SExpression:
    return _part(expr, 2, "if")


def if_alternative(expr: list) -> SExpression:
    if len(expr) > 3:
        return expr[3]
    return False


# begin
def begin_actions(expr: list) -> list[SExpression]:
    return expr[1:]


# application
def operator(expr: list) -> SExpression:
    return _part(expr, 0, "application")


def operands(expr: list) -> list[SExpression]:
    return expr[1:]


# cond
def cond_clauses(expr: list) -> list[SExpression]:
    return expr[1:]


def cond_predicate(clause: SExpression) -> SExpression:
    if not isinstance(clause, list):
        raise SchevalSyntaxError(f"cond clause must be a list, got {clause!r}")
    return _part(clause, 0, "cond clause")


def cond_actions(clause: list) -> list[SExpression]:
    return clause[1:]


def is_else_clause(clause: SExpression) -> bool:
    return cond_predicate(clause) == ELSE

"""Syntax constructors and derived-form rewriting (cond -> nested if)."""

from __future__ import annotations

from scheval import SExpression
from scheval.errors import SchevalMalformedCond
from scheval.evaluation.classifier import (
    cond_actions,
    cond_clauses,
    cond_predicate,
    is_else_clause,
)
from scheval.types.symbol import BEGIN, IF, LAMBDA, Symbol


def make_lambda(parameters: list[Symbol], body: list[SExpression]) -> list:
    return [LAMBDA, list(parameters), *body]


def make_if(predicate: SExpression, consequent: SExpression, alternative: SExpression) -> list:
    return [IF, predicate, consequent, alternative]


def make_begin(seq: list[SExpression]) -> list:
    return [BEGIN, *seq]


def sequence_to_exp(seq: list[SExpression]) -> SExpression:
    if len(seq) == 1:
        return seq[0]
    return make_begin(seq)


def expand_clauses(clauses: list[SExpression]) -> SExpression:
    # else must come last; checked before any clause is rewritten
    for index, clause in enumerate(clauses):
        if is_else_clause(clause) and index != len(clauses) - 1:
            raise SchevalMalformedCond(f"else clause is not last: {clause!r}")

    expansion: SExpression = False
    for clause in reversed(clauses):
        if is_else_clause(clause):
            expansion = sequence_to_exp(cond_actions(clause))
        else:
            expansion = make_if(
                cond_predicate(clause),
                sequence_to_exp(cond_actions(clause)),
                expansion,
            )
    return expansion


def cond_to_if(expr: list) -> SExpression:
    return expand_clauses(cond_clauses(expr))

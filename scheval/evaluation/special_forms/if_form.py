from scheval import SExpression, LispValue
from scheval.errors import SchevalSyntaxError
from scheval.evaluation.classifier import if_alternative, if_consequent, if_predicate
from scheval.types.environment import Environment


def is_true(value: LispValue) -> bool:
    # Only the designated true value counts; 1, 0 and () are not booleans here
    return value is True


def is_false(value: LispValue) -> bool:
    return value is False


def if_form(expr: list[SExpression], env: Environment, evaluator) -> LispValue:
    if len(expr) not in (3, 4):
        raise SchevalSyntaxError("if requires a predicate, a consequent and an optional alternative")

    predicate = evaluator.actual_value(if_predicate(expr), env)
    if is_true(predicate):
        return evaluator.eval(if_consequent(expr), env)
    return evaluator.eval(if_alternative(expr), env)

from scheval import SExpression, LispValue
from scheval.evaluation.classifier import definition_value, definition_variable
from scheval.types.environment import Environment
from scheval.types.symbol import OK


def define_form(expr: list[SExpression], env: Environment, evaluator) -> LispValue:
    """
    (define name value) or (define (name params...) body...)
    Always binds in the innermost frame of `env`.
    """
    name = definition_variable(expr)
    value = evaluator.eval(definition_value(expr), env)
    env.define(name, value)
    return OK

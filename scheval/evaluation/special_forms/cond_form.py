from scheval import SExpression, LispValue
from scheval.evaluation.desugar import cond_to_if
from scheval.types.environment import Environment


def cond_form(expr: list[SExpression], env: Environment, evaluator) -> LispValue:
    """Rewrite into nested ifs, then evaluate the rewrite."""
    return evaluator.eval(cond_to_if(expr), env)

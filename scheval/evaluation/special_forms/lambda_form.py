from scheval import SExpression, LispValue
from scheval.evaluation.classifier import lambda_body, lambda_parameters
from scheval.types.environment import Environment
from scheval.types.procedure import CompoundProcedure


def lambda_form(expr: list[SExpression], env: Environment, evaluator) -> LispValue:
    # The closure captures env itself, not a copy.
    return CompoundProcedure(lambda_parameters(expr), lambda_body(expr), env)

from scheval import SExpression, LispValue
from scheval.errors import SchevalSyntaxError
from scheval.evaluation.classifier import begin_actions
from scheval.types.environment import Environment


def begin_form(expr: list[SExpression], env: Environment, evaluator) -> LispValue:
    actions = begin_actions(expr)
    if not actions:
        raise SchevalSyntaxError("begin requires at least one expression")
    return evaluator.eval_sequence(actions, env)

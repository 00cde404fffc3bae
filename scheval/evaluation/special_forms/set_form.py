from scheval import SExpression, LispValue
from scheval.errors import SchevalSyntaxError
from scheval.evaluation.classifier import assignment_value, assignment_variable
from scheval.types.environment import Environment
from scheval.types.symbol import OK


def set_form(expr: list[SExpression], env: Environment, evaluator) -> LispValue:
    """(set! var value): overwrite an existing binding, found by searching outward."""
    if len(expr) != 3:
        raise SchevalSyntaxError("set! requires exactly 2 arguments: (set! var value)")
    var_sym = assignment_variable(expr)
    value = evaluator.eval(assignment_value(expr), env)
    env.set(var_sym, value)
    return OK

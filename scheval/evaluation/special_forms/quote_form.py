from scheval import SExpression, LispValue
from scheval.errors import SchevalSyntaxError
from scheval.evaluation.classifier import text_of_quotation
from scheval.types.environment import Environment


def quote_form(expr: list[SExpression], env: Environment, evaluator) -> LispValue:
    if len(expr) != 2:
        raise SchevalSyntaxError("quote expects exactly 1 argument")
    return text_of_quotation(expr)

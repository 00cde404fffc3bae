"""Registry of special forms for the scheval evaluator.

Maps each special ExpressionKind to the handler implementing its evaluation
rule. The evaluator consults this table after classifying an expression and
before falling back to literals, variables and application.
"""

from scheval.evaluation.classifier import ExpressionKind
from scheval.evaluation.special_forms.quote_form import quote_form
from scheval.evaluation.special_forms.set_form import set_form
from scheval.evaluation.special_forms.define_form import define_form
from scheval.evaluation.special_forms.lambda_form import lambda_form
from scheval.evaluation.special_forms.if_form import if_form
from scheval.evaluation.special_forms.begin_form import begin_form
from scheval.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    ExpressionKind.QUOTE: quote_form,
    ExpressionKind.ASSIGNMENT: set_form,
    ExpressionKind.DEFINITION: define_form,
    ExpressionKind.LAMBDA: lambda_form,
    ExpressionKind.IF: if_form,
    ExpressionKind.BEGIN: begin_form,
    ExpressionKind.COND: cond_form,
}

import pytest

from scheval.errors import SchevalSyntaxError, SchevalUnknownExpressionType
from scheval.evaluation import classifier as c
from scheval.evaluation.classifier import ExpressionKind, classify
from scheval.reader.parser import read
from scheval.types.symbol import LAMBDA, Symbol


@pytest.mark.parametrize(
    "source, kind",
    [
        ("42", ExpressionKind.LITERAL),
        ("3.5", ExpressionKind.LITERAL),
        ('"hello"', ExpressionKind.LITERAL),
        ("#t", ExpressionKind.LITERAL),
        ("x", ExpressionKind.VARIABLE),
        ("(quote a)", ExpressionKind.QUOTE),
        ("'a", ExpressionKind.QUOTE),
        ("(set! x 1)", ExpressionKind.ASSIGNMENT),
        ("(define x 1)", ExpressionKind.DEFINITION),
        ("(define (f x) x)", ExpressionKind.DEFINITION),
        ("(lambda (x) x)", ExpressionKind.LAMBDA),
        ("(if a b c)", ExpressionKind.IF),
        ("(begin 1 2)", ExpressionKind.BEGIN),
        ("(cond (else 1))", ExpressionKind.COND),
        ("(f 1 2)", ExpressionKind.APPLICATION),
        ("((lambda (x) x) 1)", ExpressionKind.APPLICATION),
        ("(1 2)", ExpressionKind.APPLICATION),
    ],
)
def test_classify(source, kind):
    assert classify(read(source)) is kind


def test_classify_unknown_values():
    for value in (None, [], {"a": 1}, (1, 2)):
        with pytest.raises(SchevalUnknownExpressionType) as info:
            classify(value)
        assert info.value.expression == value


def test_tagged_list_predicates():
    expr = read("(if a b)")
    assert c.is_tagged_list(expr, Symbol("if"))
    assert c.is_if(expr)
    assert not c.is_begin(expr)
    assert not c.is_application(expr)
    assert not c.is_tagged_list(Symbol("if"), Symbol("if"))
    assert not c.is_tagged_list([], Symbol("if"))
    assert c.is_application(read("(g 1)"))
    assert not c.is_application([])


def test_self_evaluating_and_variables():
    assert c.is_self_evaluating(1)
    assert c.is_self_evaluating("text")
    assert not c.is_self_evaluating(Symbol("x"))
    assert c.is_variable(Symbol("x"))
    assert not c.is_variable("x")


def test_if_accessors():
    expr = read("(if p c a)")
    assert c.if_predicate(expr) == Symbol("p")
    assert c.if_consequent(expr) == Symbol("c")
    assert c.if_alternative(expr) == Symbol("a")
    # absent alternative is the boolean false value
    assert c.if_alternative(read("(if p c)")) is False


def test_definition_shorthand_becomes_lambda():
    expr = read("(define (add a b) (+ a b))")
    assert c.definition_variable(expr) == Symbol("add")
    assert c.definition_value(expr) == [LAMBDA, [Symbol("a"), Symbol("b")], read("(+ a b)")]


def test_plain_definition():
    expr = read("(define x (+ 1 2))")
    assert c.definition_variable(expr) == Symbol("x")
    assert c.definition_value(expr) == read("(+ 1 2)")


def test_lambda_and_application_accessors():
    lam = read("(lambda (x y) (f x) (g y))")
    assert c.lambda_parameters(lam) == [Symbol("x"), Symbol("y")]
    assert c.lambda_body(lam) == [read("(f x)"), read("(g y)")]

    app = read("(f 1 2)")
    assert c.operator(app) == Symbol("f")
    assert c.operands(app) == [1, 2]
    assert c.operands(read("(f)")) == []


@pytest.mark.parametrize(
    "accessor, source",
    [
        (c.if_consequent, "(if p)"),
        (c.if_predicate, "(if)"),
        (c.text_of_quotation, "(quote)"),
        (c.assignment_value, "(set! x)"),
        (c.assignment_variable, "(set! 1 2)"),
        (c.lambda_body, "(lambda (x))"),
        (c.lambda_parameters, "(lambda x x)"),
        (c.lambda_parameters, "(lambda (x 1) x)"),
        (c.lambda_parameters, "(lambda (x x) x)"),
        (c.definition_variable, "(define)"),
        (c.definition_variable, "(define 1 2)"),
        (c.definition_value, "(define x)"),
    ],
)
def test_malformed_forms_raise_on_access(accessor, source):
    with pytest.raises(SchevalSyntaxError):
        accessor(read(source))


def test_cond_clause_accessors():
    clause = read("(p a b)")
    assert c.cond_predicate(clause) == Symbol("p")
    assert c.cond_actions(clause) == [Symbol("a"), Symbol("b")]
    assert c.is_else_clause(read("(else 1)"))
    assert not c.is_else_clause(clause)
    with pytest.raises(SchevalSyntaxError):
        c.cond_predicate(5)

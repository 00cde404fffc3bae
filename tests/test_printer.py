import io

from scheval.interpreter import Interpreter
from scheval.printer import PROCEDURE_ENV_PLACEHOLDER, to_string, user_print
from scheval.types.procedure import Primitive
from scheval.types.symbol import Symbol
from scheval.types.thunk import Thunk


def test_atoms_and_lists():
    assert to_string(1) == "1"
    assert to_string(2.5) == "2.5"
    assert to_string(True) == "#t"
    assert to_string(False) == "#f"
    assert to_string(Symbol("ok")) == "ok"
    assert to_string('say "hi"') == '"say \\"hi\\""'
    assert to_string([1, [Symbol("a"), "b"], []]) == '(1 (a "b") ())'
    assert to_string((1, 2)) == "(1 . 2)"


def test_primitive_rendering():
    assert to_string(Primitive("car", lambda evaluator, args: None)) == "<primitive car>"


def test_compound_procedure_elides_environment(interp):
    interp.eval("(define (add a b) (+ a b))")
    proc = interp.eval("add")
    assert to_string(proc) == f"(compound-procedure (a b) ((+ a b)) {PROCEDURE_ENV_PLACEHOLDER})"
    assert str(proc) == to_string(proc)


def test_self_referential_closure_prints():
    interp = Interpreter()
    interp.eval("(define (loop) loop)")
    assert "compound-procedure" in str(interp.eval("(loop)"))


def test_thunk_rendering():
    thunk = Thunk(Symbol("x"), None)
    assert to_string(thunk) == "<thunk>"
    thunk.memoize(5)
    assert to_string(thunk) == "5"
    assert repr(thunk) == "<evaluated-thunk 5>"


def test_user_print_appends_newline():
    out = io.StringIO()
    user_print([1, 2], out)
    assert out.getvalue() == "(1 2)\n"

import io

import pytest

from scheval import repl
from scheval.config import get_log_level, get_recursion_limit, get_strategy_name
from scheval.errors import SchevalConfigError
from scheval.interpreter import Interpreter
from scheval.repl import INPUT_PROMPT, OUTPUT_PROMPT, driver_loop


def feeder(lines):
    it = iter(lines)

    def _input():
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


def test_driver_loop_prints_results_and_recovers_from_errors(interp):
    out = io.StringIO()
    driver_loop(
        interp,
        feeder(["(define x 2)", "(+ x 1)", "(car '())", "y", "(lambda (a) a)"]),
        out,
    )
    text = out.getvalue()
    assert text.count(INPUT_PROMPT) == 6
    assert f"{OUTPUT_PROMPT}\nok\n" in text
    assert f"{OUTPUT_PROMPT}\n3\n" in text
    assert ";;; Error: car expects a non-empty list or pair" in text
    assert ";;; Error: Unbound variable y" in text
    assert "(compound-procedure (a) (a) <procedure-env>)" in text


def test_lazy_driver_prints_forced_values():
    interp = Interpreter("lazy")
    out = io.StringIO()
    driver_loop(interp, feeder(["(define (id x) x)", "(id (+ 40 2))"]), out)
    assert f"{OUTPUT_PROMPT}\n42\n" in out.getvalue()


def test_interpreter_prelude_and_empty_input():
    interp = Interpreter("eager", prelude="(define (square x) (* x x))")
    assert interp.eval("(square 4)") == 16
    assert interp.eval("") is None
    assert interp.strategy_name == "eager"


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("SCHEVAL_STRATEGY", raising=False)
    monkeypatch.delenv("SCHEVAL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SCHEVAL_RECURSION_LIMIT", raising=False)
    assert get_strategy_name() == "eager"
    assert get_log_level() == "WARNING"
    assert get_recursion_limit() is None


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("SCHEVAL_STRATEGY", "LAZY")
    monkeypatch.setenv("SCHEVAL_LOG_LEVEL", "debug")
    monkeypatch.setenv("SCHEVAL_RECURSION_LIMIT", "5000")
    assert get_strategy_name() == "lazy"
    assert get_log_level() == "DEBUG"
    assert get_recursion_limit() == 5000
    assert Interpreter().strategy_name == "lazy"


@pytest.mark.parametrize(
    "var, value, getter",
    [
        ("SCHEVAL_STRATEGY", "sloppy", get_strategy_name),
        ("SCHEVAL_RECURSION_LIMIT", "lots", get_recursion_limit),
        ("SCHEVAL_RECURSION_LIMIT", "-1", get_recursion_limit),
    ],
)
def test_config_rejects_bad_values(monkeypatch, var, value, getter):
    monkeypatch.setenv(var, value)
    with pytest.raises(SchevalConfigError):
        getter()


def test_main_loads_files_and_starts_loop(monkeypatch, tmp_path):
    monkeypatch.delenv("SCHEVAL_RECURSION_LIMIT", raising=False)
    source = tmp_path / "prog.scm"
    source.write_text("(define x 41)", encoding="utf-8")
    started = []
    monkeypatch.setattr(repl, "driver_loop", lambda interpreter: started.append(interpreter))

    assert repl.main(["--strategy", "lazy", "--log-level", "WARNING", str(source)]) == 0
    (interp,) = started
    assert interp.strategy_name == "lazy"
    assert interp.eval("(+ x 1)") == 42


def test_main_reports_load_errors(monkeypatch, tmp_path, capsys):
    source = tmp_path / "bad.scm"
    source.write_text("(car '())", encoding="utf-8")
    monkeypatch.setattr(repl, "driver_loop", lambda interpreter: None)
    assert repl.main([str(source)]) == 1
    assert ";;; Error:" in capsys.readouterr().err

import pytest

from scheval.builtin.primitives import init_global_environment
from scheval.interpreter import Interpreter

# Strategy-independent behaviour runs twice:
# 1) with the applicative-order evaluator ["eager"]
# 2) with the call-by-need evaluator ["lazy"]
# Tests that only hold for one strategy build their own Interpreter.


@pytest.fixture(params=["eager", "lazy"])
def strategy(request):
    return request.param


@pytest.fixture
def interp(strategy):
    return Interpreter(strategy)


@pytest.fixture
def env():
    """Return a fresh global environment for each test."""
    return init_global_environment()

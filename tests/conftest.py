import pytest

from lispy.builtin import register
from lispy.evaluation import evaluate
from lispy.interpreter import Interpreter
from lispy.reader import read
from lispy.types import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter without the prelude, so only core builtins are bound."""
    return Interpreter(prelude=None)


@pytest.fixture
def run(env):
    """Read and evaluate a line of source against the `env` fixture."""
    def _run(source):
        return evaluate(env, read(source))
    return _run

import io

import pytest

from minilisp.interpreter import Interpreter
from minilisp.runtime_context import Runtime
from minilisp.types.environment import Environment


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def runtime(out):
    return Runtime(out=out, max_depth=50)


@pytest.fixture
def interp(out):
    return Interpreter(out=out)


@pytest.fixture
def run(interp, out):
    """Evaluate code and return (value, printed lines)."""
    def _run(code):
        value = interp.eval(code)
        return value, out.getvalue().splitlines()
    return _run

import pytest

from sprig.builtin.env_builtin import register
from sprig.interpreter import Interpreter
from sprig.runtime_context import Context
from sprig.types.environment import Environment


class Output(list):
    """Output sink that records every line written to it."""

    def __call__(self, text):
        self.append(text)


@pytest.fixture
def output():
    return Output()


@pytest.fixture
def interp(output):
    return Interpreter(output=output)


@pytest.fixture
def env():
    """A fresh root environment with the builtin library."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def ctx(env, output):
    return Context(root=env, output=output)

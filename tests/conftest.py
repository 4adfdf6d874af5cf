import pytest

from simplysp.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh interpreter reading from <stdin>."""
    return Interpreter()


@pytest.fixture
def line_reader():
    """Factory for Repl line sources that hand out the given lines, then signal end of input."""
    def make(lines):
        it = iter(lines)

        def read_line(prompt):
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        return read_line
    return make

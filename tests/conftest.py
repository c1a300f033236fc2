import pytest
import tempfile
from pathlib import Path

from arithmetic import Operation
from scientific_calculator import ScientificCalculator


@pytest.fixture
def temp_dir_fixture():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def calc():
    return ScientificCalculator()


@pytest.fixture
def press():
    """Feeds a token sequence: digit/'.' strings, Operation members, or 'equals'."""
    def _press(calculator, tokens):
        for token in tokens:
            if token == 'equals':
                calculator.equal()
            elif token == '.':
                calculator.input_dot()
            elif isinstance(token, str):
                for d in token:
                    calculator.input_digit(d)
            elif token is Operation.PI:
                calculator.input_pi()
            elif token is Operation.RECALL:
                calculator.recall()
            elif token is Operation.CLEAR:
                calculator.clear()
            elif token is Operation.BACKSPACE:
                calculator.backspace()
            elif token in (Operation.ADD, Operation.SUBTRACT, Operation.MULTIPLY,
                           Operation.DIVIDE, Operation.EXPONENT):
                calculator.set_operator(token)
            else:
                calculator.apply_function(token)
        return calculator
    return _press

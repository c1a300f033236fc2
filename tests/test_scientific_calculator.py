import math

import pytest

from arithmetic import Operation
from calculator import ERROR
from labels import Labels
from scientific_calculator import ScientificCalculator


class TestUnaryFunctions:

    def test_sine_of_180_is_exact_zero(self, calc, press):
        press(calc, ['180', Operation.SINE])
        assert calc.state.current_input == '0'
        assert calc.history == ['sine(180) = 0']

    def test_cosine_of_90_is_exact_zero(self, calc, press):
        press(calc, ['90', Operation.COSINE])
        assert calc.state.current_input == '0'

    def test_sqrt(self, calc, press):
        press(calc, ['81', Operation.SQRT])
        assert calc.state.current_input == '9'
        assert calc.state.awaiting_fresh_operand is True
        assert calc.history == ['sqrt(81) = 9']

    def test_square_factorial_percent(self, calc, press):
        press(calc, ['12', Operation.SQUARE])
        assert calc.state.current_input == '144'
        press(calc, ['5', Operation.FACTORIAL])
        assert calc.state.current_input == '120'
        press(calc, ['50', Operation.PERCENT])
        assert calc.state.current_input == '0.5'

    def test_log10(self, calc, press):
        press(calc, ['1000', Operation.LOG10])
        assert calc.state.current_input == '3'

    def test_tangent_asymptote(self, calc, press):
        press(calc, ['90', Operation.TANGENT])
        assert calc.state.current_input == ERROR
        assert calc.history == ['tangent(90) = Error']

    def test_factorial_too_large(self, calc, press):
        press(calc, ['171', Operation.FACTORIAL])
        assert calc.state.current_input == ERROR
        assert calc.state.last_answer == 0

    def test_factorial_of_170_uses_scientific_notation(self, calc, press):
        press(calc, ['170', Operation.FACTORIAL])
        assert calc.state.current_input.startswith('7.257416e+306')

    def test_function_on_error_stays_error(self, calc, press):
        press(calc, ['1', Operation.DIVIDE, '0', 'equals'])
        entries = len(calc.history)
        press(calc, [Operation.SQRT])
        assert calc.state.current_input == ERROR
        assert len(calc.history) == entries

    def test_result_becomes_second_operand(self, calc, press):
        press(calc, ['5', Operation.ADD, '9', Operation.SQRT])
        assert calc.state.pending_operation is Operation.ADD
        assert calc.state.previous_operand == '5'
        press(calc, ['equals'])
        assert calc.state.current_input == '8'

    def test_digit_after_function_starts_fresh(self, calc, press):
        press(calc, ['9', Operation.SQRT, '4'])
        assert calc.state.current_input == '4'

    def test_translated_history(self, press):
        calc = ScientificCalculator(labels=Labels('es'))
        press(calc, ['9', Operation.SQRT])
        assert calc.history == ['raíz cuadrada(9) = 3']

    def test_rejects_binary_operation(self, calc):
        with pytest.raises(ValueError):
            calc.apply_function(Operation.ADD)


class TestExponentKey:

    def test_first_press_stages_base(self, calc, press):
        press(calc, ['5'])
        calc.press_exponent()
        assert calc.state.pending_operation is Operation.EXPONENT
        assert calc.state.previous_operand == '5'
        assert calc.state.awaiting_fresh_operand is True
        assert calc.history == []

    def test_second_press_evaluates(self, calc, press):
        press(calc, ['2'])
        calc.press_exponent()
        press(calc, ['3'])
        calc.press_exponent()
        assert calc.state.current_input == '8'
        assert calc.state.pending_operation is None
        assert calc.state.previous_operand == ''
        assert calc.history == ['2^3 = 8']

    def test_double_press_raises_to_itself(self, calc, press):
        press(calc, ['3'])
        calc.press_exponent()
        calc.press_exponent()
        assert calc.state.current_input == '27'

    def test_replaces_other_pending_operation(self, calc, press):
        press(calc, ['4', Operation.ADD, '2'])
        calc.press_exponent()
        assert calc.state.pending_operation is Operation.EXPONENT
        assert calc.state.previous_operand == '2'

    def test_equals_resolves_staged_exponent(self, calc, press):
        press(calc, ['10'])
        calc.press_exponent()
        press(calc, ['2', 'equals'])
        assert calc.state.current_input == '100'
        assert calc.state.last_answer == 100

    def test_overflow(self, calc, press):
        press(calc, ['10'])
        calc.press_exponent()
        press(calc, ['400'])
        calc.press_exponent()
        assert calc.state.current_input == ERROR


class TestPi:

    def test_pi_as_second_operand(self, calc, press):
        press(calc, ['2', Operation.MULTIPLY, Operation.PI, 'equals'])
        assert float(calc.state.current_input) == pytest.approx(2 * math.pi)

    def test_digit_after_pi_replaces(self, calc, press):
        press(calc, [Operation.PI, '7'])
        assert calc.state.current_input == '7'

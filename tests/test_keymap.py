import pytest

from arithmetic import Operation
from keymap import dispatch_action, dispatch_key


def type_keys(calc, keys):
    return [dispatch_key(calc, k) for k in keys]


def test_keyboard_arithmetic(calc):
    assert all(type_keys(calc, ['1', '2', '+', '3', 'Enter']))
    assert calc.state.current_input == '15'


def test_keyboard_symbols(calc):
    type_keys(calc, ['8', '×', '2', '='])
    assert calc.state.current_input == '16'
    type_keys(calc, ['9', '÷', '3', 'Enter'])
    assert calc.state.current_input == '3'
    type_keys(calc, ['2', '^', '5', 'Return'])
    assert calc.state.current_input == '32'


def test_keyboard_functions_case_insensitive(calc):
    type_keys(calc, ['1', '6', 'R'])
    assert calc.state.current_input == '4'
    type_keys(calc, ['1', '0', '0', 'l'])
    assert calc.state.current_input == '2'
    type_keys(calc, ['9', '0', 's'])
    assert calc.state.current_input == '1'


def test_keyboard_percent_pi_recall(calc):
    type_keys(calc, ['5', '%'])
    assert calc.state.current_input == '0.05'
    type_keys(calc, ['P'])
    assert calc.state.current_input.startswith('3.14159')
    type_keys(calc, ['2', '+', '2', 'Enter', 'Escape', 'a'])
    assert calc.state.current_input == '4'


def test_keyboard_backspace_and_clear(calc):
    type_keys(calc, ['1', '2', '3', 'Backspace'])
    assert calc.state.current_input == '12'
    type_keys(calc, ['Delete'])
    assert calc.state.current_input == '0'


def test_modifiers_and_repeat_ignored(calc):
    assert dispatch_key(calc, '5', ctrl=True) is False
    assert dispatch_key(calc, '5', alt=True) is False
    assert dispatch_key(calc, '5', meta=True) is False
    assert dispatch_key(calc, '5', repeat=True) is False
    assert calc.state.current_input == '0'


def test_unknown_keys(calc):
    assert dispatch_key(calc, 'x') is False
    assert dispatch_key(calc, '²') is False
    assert dispatch_key(calc, '') is False


def test_button_actions(calc):
    for action in ['4', 'multiply', '2', 'calculate']:
        dispatch_action(calc, action)
    assert calc.state.current_input == '8'
    dispatch_action(calc, 'power')
    assert calc.state.current_input == '64'
    dispatch_action(calc, 'exp')
    assert calc.state.pending_operation is Operation.EXPONENT
    dispatch_action(calc, 'clear')
    assert calc.state.pending_operation is None
    dispatch_action(calc, 'ans')
    assert calc.state.current_input == '8'


def test_unknown_action(calc):
    with pytest.raises(KeyError):
        dispatch_action(calc, 'modulo')

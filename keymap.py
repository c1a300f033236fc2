# keymap.py
# 키보드 키/버튼 동작 이름 -> 계산기 입력 메서드 매핑 (Qt 에 의존하지 않음)

from arithmetic import Operation
from calculator import DIGITS

OPERATOR_KEYS = {
    '+': Operation.ADD,
    '-': Operation.SUBTRACT,
    '*': Operation.MULTIPLY,
    '×': Operation.MULTIPLY,
    '/': Operation.DIVIDE,
    '÷': Operation.DIVIDE,
    '^': Operation.EXPONENT,
}

FUNCTION_KEYS = {
    '%': Operation.PERCENT,
    's': Operation.SINE,
    'c': Operation.COSINE,
    't': Operation.TANGENT,
    'l': Operation.LOG10,
    'r': Operation.SQRT,  # r: root
}

# 버튼의 동작 이름(화면 배치에서 사용)
FUNCTION_ACTIONS = {
    'sin': Operation.SINE,
    'cos': Operation.COSINE,
    'tan': Operation.TANGENT,
    'log': Operation.LOG10,
    'sqrt': Operation.SQRT,
    'power': Operation.SQUARE,
    'factorial': Operation.FACTORIAL,
    'percent': Operation.PERCENT,
}

OPERATOR_ACTIONS = {
    'add': Operation.ADD,
    'subtract': Operation.SUBTRACT,
    'multiply': Operation.MULTIPLY,
    'divide': Operation.DIVIDE,
}


def dispatch_key(calc, key: str, ctrl: bool = False, alt: bool = False,
                 meta: bool = False, repeat: bool = False) -> bool:
    """
    키 하나를 처리한다. 처리했으면 True.
    key 는 문자('7', '+', 's') 또는 특수 키 이름('Enter', 'Backspace', 'Delete', 'Escape').
    """
    if repeat or ctrl or alt or meta or not key:
        return False

    if len(key) == 1 and key in DIGITS:
        calc.input_digit(key)
    elif key == '.':
        calc.input_dot()
    elif key in OPERATOR_KEYS:
        calc.set_operator(OPERATOR_KEYS[key])
    elif key in ('Enter', 'Return', '='):
        calc.equal()
    elif key == 'Backspace':
        calc.backspace()
    elif key in ('Delete', 'Escape'):
        calc.clear()
    elif key.lower() == 'p':
        calc.input_pi()
    elif key.lower() == 'a':
        calc.recall()
    elif key.lower() in FUNCTION_KEYS:
        calc.apply_function(FUNCTION_KEYS[key.lower()])
    else:
        return False
    return True


def dispatch_action(calc, action: str) -> None:
    """버튼 동작 이름 처리. 모르는 이름은 KeyError."""
    if len(action) == 1 and action in DIGITS:
        calc.input_digit(action)
    elif action == '.':
        calc.input_dot()
    elif action in OPERATOR_ACTIONS:
        calc.set_operator(OPERATOR_ACTIONS[action])
    elif action in FUNCTION_ACTIONS:
        calc.apply_function(FUNCTION_ACTIONS[action])
    elif action == 'calculate':
        calc.equal()
    elif action == 'exp':
        calc.press_exponent()
    elif action == 'pi':
        calc.input_pi()
    elif action == 'ans':
        calc.recall()
    elif action == 'clear':
        calc.clear()
    elif action == 'backspace':
        calc.backspace()
    else:
        raise KeyError(action)

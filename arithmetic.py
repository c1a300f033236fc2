# arithmetic.py
# Python 3.x, 표준 라이브러리만 사용
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import math
from enum import Enum
from typing import Union


class Operation(Enum):
    """계산기가 다루는 연산 태그(닫힌 집합)"""

    # 이항 연산
    ADD = 'add'
    SUBTRACT = 'subtract'
    MULTIPLY = 'multiply'
    DIVIDE = 'divide'
    EXPONENT = 'exponent'
    # 단항 함수
    SINE = 'sine'
    COSINE = 'cosine'
    TANGENT = 'tangent'
    LOG10 = 'log10'
    SQRT = 'sqrt'
    SQUARE = 'square'
    FACTORIAL = 'factorial'
    PERCENT = 'percent'
    # 상태 기계가 직접 처리하는 의사 연산
    PI = 'pi'
    RECALL = 'recall'
    CLEAR = 'clear'
    BACKSPACE = 'backspace'


class ErrorTag(Enum):
    """연산 실패 종류. 예외 대신 반환값으로 전달된다."""

    NON_FINITE = 'non_finite'
    DOMAIN_ERROR = 'domain_error'
    UNDEFINED = 'undefined'
    PARSE_ERROR = 'parse_error'


Outcome = Union[float, ErrorTag]

BINARY_OPERATIONS = frozenset({
    Operation.ADD,
    Operation.SUBTRACT,
    Operation.MULTIPLY,
    Operation.DIVIDE,
    Operation.EXPONENT,
})

UNARY_OPERATIONS = frozenset({
    Operation.SINE,
    Operation.COSINE,
    Operation.TANGENT,
    Operation.LOG10,
    Operation.SQRT,
    Operation.SQUARE,
    Operation.FACTORIAL,
    Operation.PERCENT,
})

ZERO_SNAP = 1e-14  # 이보다 작은 절댓값은 부동소수점 잡음으로 보고 0 처리
MAX_FACTORIAL = 170  # 170! 이 float 로 표현 가능한 마지막 값


def is_error(outcome: Outcome) -> bool:
    return isinstance(outcome, ErrorTag)


def _finite_or_error(value: float) -> Outcome:
    return value if math.isfinite(value) else ErrorTag.NON_FINITE


def _snap_zero(value: float) -> float:
    return 0.0 if abs(value) < ZERO_SNAP else value


def _degrees_to_radians(a: float) -> float:
    # 큰 각도의 정밀도 손실을 막기 위해 360 으로 먼저 줄인다
    return math.radians(math.fmod(a, 360))


# 이항 연산
def add(a: float, b: float) -> Outcome:
    return _finite_or_error(a + b)


def subtract(a: float, b: float) -> Outcome:
    return _finite_or_error(a - b)


def multiply(a: float, b: float) -> Outcome:
    return _finite_or_error(a * b)


def divide(a: float, b: float) -> Outcome:
    if b == 0 or not math.isfinite(a) or not math.isfinite(b):
        return ErrorTag.NON_FINITE
    return _finite_or_error(a / b)


def exponent(a: float, base: float = 10) -> Outcome:
    """base 의 a 제곱. 기본 밑은 10 (10ˣ 키)."""
    if not math.isfinite(a) or not math.isfinite(base):
        return ErrorTag.NON_FINITE
    try:
        result = math.pow(base, a)
    except OverflowError:
        return ErrorTag.NON_FINITE
    except ValueError:
        # 음수 밑의 분수 지수, 0 의 음수 제곱
        return ErrorTag.NON_FINITE
    return _finite_or_error(result)


# 단항 함수 (각도는 degree)
def sine(a: float) -> Outcome:
    if not math.isfinite(a):
        return ErrorTag.NON_FINITE
    return _snap_zero(math.sin(_degrees_to_radians(a)))


def cosine(a: float) -> Outcome:
    if not math.isfinite(a):
        return ErrorTag.NON_FINITE
    return _snap_zero(math.cos(_degrees_to_radians(a)))


def tangent(a: float) -> Outcome:
    if not math.isfinite(a):
        return ErrorTag.NON_FINITE
    reduced = math.fmod(a, 360)
    # 90 의 홀수배에서는 점근선
    if abs(math.fmod(reduced, 180)) == 90:
        return ErrorTag.UNDEFINED
    return _finite_or_error(math.tan(math.radians(reduced)))


def log10(a: float) -> Outcome:
    if not math.isfinite(a) or a <= 0:
        return ErrorTag.DOMAIN_ERROR
    return math.log10(a)


def sqrt(a: float) -> Outcome:
    if not math.isfinite(a) or a < 0:
        return ErrorTag.DOMAIN_ERROR
    return math.sqrt(a)


def square(a: float) -> Outcome:
    if not math.isfinite(a):
        return ErrorTag.NON_FINITE
    try:
        return _finite_or_error(a ** 2)
    except OverflowError:
        return ErrorTag.NON_FINITE


def factorial(a: float) -> Outcome:
    if not math.isfinite(a) or a < 0 or a != int(a) or a > MAX_FACTORIAL:
        return ErrorTag.DOMAIN_ERROR
    result = 1.0
    for i in range(2, int(a) + 1):
        result *= i
    return _finite_or_error(result)


def percent(a: float) -> Outcome:
    if not math.isfinite(a):
        return ErrorTag.NON_FINITE
    return a / 100


def evaluate_binary(op: Operation, a: float, b: float) -> Outcome:
    """이항 연산 분기. 지수 연산은 a 가 밑, b 가 지수."""
    if op is Operation.ADD:
        return add(a, b)
    if op is Operation.SUBTRACT:
        return subtract(a, b)
    if op is Operation.MULTIPLY:
        return multiply(a, b)
    if op is Operation.DIVIDE:
        return divide(a, b)
    if op is Operation.EXPONENT:
        return exponent(b, a)
    raise ValueError(f'not a binary operation: {op}')


def evaluate_unary(op: Operation, a: float) -> Outcome:
    if op is Operation.SINE:
        return sine(a)
    if op is Operation.COSINE:
        return cosine(a)
    if op is Operation.TANGENT:
        return tangent(a)
    if op is Operation.LOG10:
        return log10(a)
    if op is Operation.SQRT:
        return sqrt(a)
    if op is Operation.SQUARE:
        return square(a)
    if op is Operation.FACTORIAL:
        return factorial(a)
    if op is Operation.PERCENT:
        return percent(a)
    raise ValueError(f'not a unary operation: {op}')

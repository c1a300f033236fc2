# calculator.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, NamedTuple, Optional, Union

from arithmetic import (
    BINARY_OPERATIONS,
    ErrorTag,
    Operation,
    ZERO_SNAP,
    evaluate_binary,
    is_error,
)

logger = logging.getLogger('calculator')

ERROR = 'Error'  # 오류 표시 상태(어떤 숫자 문자열과도 겹치지 않음)
HISTORY_LIMIT = 10
SCIENTIFIC_THRESHOLD = 1e15
MAX_FRACTION_DIGITS = 12
DIGITS = '0123456789'

OPERATOR_SYMBOLS = {
    Operation.ADD: '+',
    Operation.SUBTRACT: '-',
    Operation.MULTIPLY: '×',
    Operation.DIVIDE: '÷',
    Operation.EXPONENT: '^',
}


@dataclass
class CalculatorState:
    current_input: str = '0'
    previous_operand: str = ''
    pending_operation: Optional[Operation] = None
    awaiting_fresh_operand: bool = False  # 다음 숫자가 현재 값을 대체하는지
    operator_selected: bool = False  # 연산자를 막 골라 두 번째 피연산자가 아직 없음
    last_answer: float = 0.0
    history: List[str] = field(default_factory=list)


class DisplaySnapshot(NamedTuple):
    """표시부에 넘기는 값 묶음"""

    text: str
    previous_operand: str
    pending_operation: Optional[Operation]
    current_input: str


def parse_operand(text: str) -> Optional[float]:
    """유한한 숫자로 읽히지 않으면 None"""
    if text == ERROR:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def format_number(value: float) -> str:
    if value.is_integer() and abs(value) < SCIENTIFIC_THRESHOLD:
        return str(int(value))
    return repr(value)


def normalize_result(value: float) -> str:
    """
    계산 결과를 표시/저장용 문자열로 바꾼다.
    1e15 이상은 지수 표기(소수 6자리), 그 외 소수는 12자리로 반올림,
    1e-14 미만은 0.
    """
    if abs(value) >= SCIENTIFIC_THRESHOLD:
        return f'{value:.6e}'
    if not value.is_integer():
        value = round(value, MAX_FRACTION_DIGITS)
    if abs(value) < ZERO_SNAP:
        value = 0.0
    return format_number(value)


def internal_label(tag: str) -> str:
    # 번역 테이블이 없을 때: 태그 이름 그대로, 오류만 'Error'
    return ERROR if tag == 'error' else tag


class Calculator:
    """연산 엔진: 입력 상태와 사칙연산/지수/= 처리"""

    def __init__(
        self,
        labels: Optional[Callable[[str], str]] = None,
        display_sink: Optional[Callable[[DisplaySnapshot], None]] = None,
        history_sink: Optional[Callable[[str], None]] = None,
        history: Optional[Iterable[str]] = None,
        history_limit: int = HISTORY_LIMIT,
    ) -> None:
        self.labels = labels or internal_label
        self.display_sink = display_sink
        self.history_sink = history_sink
        self.history_limit = history_limit
        self.state = CalculatorState()
        if history:
            self.state.history = list(history)[-history_limit:]

    @property
    def history(self) -> List[str]:
        return list(self.state.history)

    # 숫자 입력
    def input_digit(self, d: str) -> None:
        if len(d) != 1 or d not in DIGITS:
            raise ValueError(f'not a digit: {d!r}')
        s = self.state
        if s.awaiting_fresh_operand or s.current_input == ERROR:
            s.current_input = d
            s.awaiting_fresh_operand = False
        elif s.current_input == '0':
            s.current_input = d
        else:
            s.current_input += d
        s.operator_selected = False
        self._refresh(d)

    def input_dot(self) -> None:
        s = self.state
        if s.awaiting_fresh_operand or s.current_input == ERROR:
            s.current_input = '0.'
            s.awaiting_fresh_operand = False
        elif '.' not in s.current_input:
            s.current_input += '.'
        s.operator_selected = False
        self._refresh('.')

    # 연산자
    def set_operator(self, op: Operation) -> None:
        if op not in BINARY_OPERATIONS:
            raise ValueError(f'not a binary operator: {op}')
        s = self.state
        if s.pending_operation is not None and not s.operator_selected:
            # 두 번째 피연산자까지 입력된 상태: 직전 연산을 먼저 처리(왼쪽부터 순서대로)
            result = self._evaluate_pending()
            if is_error(result):
                self._set_error(result)
                s.previous_operand = ERROR
            else:
                s.current_input = result
                s.previous_operand = result
        else:
            s.previous_operand = s.current_input
        self._select(op)
        self._refresh(op.value)

    def equal(self) -> None:
        s = self.state
        if s.pending_operation is None or s.operator_selected:
            self._refresh('=')
            return
        result = self._evaluate_pending()
        if is_error(result):
            self._set_error(result)
        else:
            self._supply(result)
            s.last_answer = float(result)
        s.previous_operand = ''
        s.pending_operation = None
        self._refresh('=')

    # 제어
    def clear(self) -> None:
        """진행 중인 계산만 초기화한다. 기록과 직전 답은 유지."""
        s = self.state
        s.current_input = '0'
        s.previous_operand = ''
        s.pending_operation = None
        s.awaiting_fresh_operand = False
        s.operator_selected = False
        self._refresh(Operation.CLEAR.value)

    def backspace(self) -> None:
        s = self.state
        if s.operator_selected and s.pending_operation is not None:
            # 연산자 선택 취소
            s.pending_operation = None
            s.previous_operand = ''
            s.awaiting_fresh_operand = False
            s.operator_selected = False
        elif len(s.current_input) > 1:
            s.current_input = self._drop_last(s.current_input)
        elif s.pending_operation is not None:
            s.pending_operation = None
            s.current_input = s.previous_operand or '0'
            s.previous_operand = ''
            s.awaiting_fresh_operand = False
        else:
            s.current_input = '0'
        self._refresh(Operation.BACKSPACE.value)

    def recall(self) -> None:
        self._supply(normalize_result(self.state.last_answer))
        self._refresh(Operation.RECALL.value)

    # 표시 문자열
    def display_text(self) -> str:
        return self.snapshot().text

    def snapshot(self) -> DisplaySnapshot:
        s = self.state
        text = self._shown(s.current_input)
        if s.previous_operand and s.pending_operation is not None:
            text = f'{self._shown(s.previous_operand)} {OPERATOR_SYMBOLS[s.pending_operation]}'
            if not s.operator_selected:
                text += f' {self._shown(s.current_input)}'
        return DisplaySnapshot(text, s.previous_operand, s.pending_operation, s.current_input)

    # 내부 유틸
    def _select(self, op: Operation) -> None:
        self.state.pending_operation = op
        self.state.awaiting_fresh_operand = True
        self.state.operator_selected = True

    def _supply(self, text: str) -> None:
        # 계산 결과/π/Ans 처럼 입력 없이 채워진 값: 다음 숫자는 새로 시작
        self.state.current_input = text
        self.state.awaiting_fresh_operand = True
        self.state.operator_selected = False

    def _evaluate_pending(self) -> Union[str, ErrorTag]:
        s = self.state
        prev = parse_operand(s.previous_operand)
        cur = parse_operand(s.current_input)
        if prev is None or cur is None:
            return ErrorTag.PARSE_ERROR
        outcome = evaluate_binary(s.pending_operation, prev, cur)
        result = outcome if is_error(outcome) else normalize_result(outcome)
        self._record_history(self._binary_entry(s.pending_operation, prev, cur, result))
        return result

    def _binary_entry(self, op: Operation, a: float, b: float, result: Union[str, ErrorTag]) -> str:
        result_text = self.labels('error') if is_error(result) else result
        if op is Operation.EXPONENT:
            return f'{format_number(a)}^{format_number(b)} = {result_text}'
        return f'{format_number(a)} {self.labels(op.value)} {format_number(b)} = {result_text}'

    def _record_history(self, entry: str) -> None:
        history = self.state.history
        history.append(entry)
        while len(history) > self.history_limit:
            history.pop(0)
        if self.history_sink is not None:
            self.history_sink(entry)

    def _set_error(self, tag: ErrorTag) -> None:
        logger.warning('계산 오류: %s', tag.value)
        self._supply(ERROR)
        self.state.last_answer = 0.0

    def _shown(self, text: str) -> str:
        return self.labels('error') if text == ERROR else text

    @staticmethod
    def _drop_last(text: str) -> str:
        # 남은 문자열이 숫자로 읽히지 않으면('-', '1e+' 등) 더 지운다
        if text == ERROR:
            return '0'
        text = text[:-1]
        while text and parse_operand(text) is None:
            text = text[:-1]
        return text or '0'

    def _refresh(self, token: str) -> None:
        snapshot = self.snapshot()
        logger.debug('입력 %s -> %r', token, snapshot.text)
        if self.display_sink is not None:
            self.display_sink(snapshot)

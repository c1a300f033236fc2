# scientific_calculator.py
# Python 3.x
# 공학 기능 확장: 단항 함수(sin/cos/tan/log/√/x²/n!/%), π, 지수 키

import math

from arithmetic import UNARY_OPERATIONS, ErrorTag, Operation, evaluate_unary, is_error
from calculator import Calculator, format_number, normalize_result, parse_operand


class ScientificCalculator(Calculator):
    """Calculator 에 공학 기능을 더한다. 각도는 degree 기준."""

    def apply_function(self, op: Operation) -> None:
        """현재 값에 단항 함수를 바로 적용한다. 대기 중인 이항 연산은 그대로 둔다."""
        if op not in UNARY_OPERATIONS:
            raise ValueError(f'not a unary function: {op}')
        operand = parse_operand(self.state.current_input)
        if operand is None:
            self._set_error(ErrorTag.PARSE_ERROR)
            self._refresh(op.value)
            return

        outcome = evaluate_unary(op, operand)
        if is_error(outcome):
            self._record_history(self._unary_entry(op, operand, self.labels('error')))
            self._set_error(outcome)
        else:
            result = normalize_result(outcome)
            self._record_history(self._unary_entry(op, operand, result))
            self._supply(result)
        self._refresh(op.value)

    def press_exponent(self) -> None:
        """
        xʸ 키. 지수 연산이 대기 중이 아니면 현재 값을 밑으로 잡고 지수 입력을 기다린다.
        이미 대기 중이면 밑^현재값 을 계산하고 연산을 끝낸다.
        """
        s = self.state
        if s.pending_operation is not Operation.EXPONENT:
            s.previous_operand = s.current_input
            self._select(Operation.EXPONENT)
            self._refresh(Operation.EXPONENT.value)
            return

        result = self._evaluate_pending()
        if is_error(result):
            self._set_error(result)
        else:
            self._supply(result)
        s.pending_operation = None
        s.previous_operand = ''
        self._refresh(Operation.EXPONENT.value)

    def input_pi(self) -> None:
        # 현재 입력을 π로 대체
        self._supply(repr(math.pi))
        self._refresh(Operation.PI.value)

    def _unary_entry(self, op: Operation, operand: float, result_text: str) -> str:
        return f'{self.labels(op.value)}({format_number(operand)}) = {result_text}'

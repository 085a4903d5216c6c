# calculator.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging
import math
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

MAX_DIGITS = 10  # 디스플레이 자릿수 제한
EXPONENT_THRESHOLD = 999_999_999  # 이보다 크면 지수 표기
ROUND_DIGITS = 10  # 부동소수점 오차 보정용 반올림 자릿수
ERROR_TEXT = 'Error'

logger = logging.getLogger('calculator')


class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Operator':
        """UI 기호(x, ÷)를 내부 연산자로 변환"""
        return cls(_OPERATOR_ALIASES.get(symbol, symbol))

    def apply(self, a: float, b: float) -> float:
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUB:
            return a - b
        if self is Operator.MUL:
            return a * b
        # 0 나누기는 ZeroDivisionError로 전달
        return a / b


class Command(Enum):
    CLEAR = 'C'
    BACKSPACE = 'Backspace'
    EQUALS = '='
    PERCENT = '%'
    TOGGLE_SIGN = '+/-'
    DECIMAL = '.'


_OPERATOR_ALIASES = {'x': '*', '÷': '/'}
OPERATOR_SYMBOLS = ('+', '-', '*', '/', 'x', '÷')
DIGITS = tuple('0123456789')

Token = Union[Command, Operator, str]


def parse_token(raw: str) -> Optional[Token]:
    """입력 문자열을 Command / Operator / 숫자 문자로 변환, 어휘 밖이면 None"""
    if raw in DIGITS:
        return raw
    if raw in OPERATOR_SYMBOLS:
        return Operator.from_symbol(raw)
    try:
        return Command(raw)
    except ValueError:
        return None


def _to_exponential(value: float, fraction_digits: int) -> str:
    # '1.23457e+09' -> '1.23457e+9'
    mantissa, exponent = '{:.{}e}'.format(value, fraction_digits).split('e')
    return '{}e{:+d}'.format(mantissa, int(exponent))


def format_result(value: float) -> str:
    """계산 결과를 최대 10자 표시 문자열로 변환한다.

    - 절댓값이 999,999,999 초과: 소수 5자리 지수 표기
    - 그 외: 소수 10자리 반올림 후 뒤쪽 0 제거
    - 10자 초과: 소수점이 있으면 소수 자릿수를 줄이고, 없으면 소수 3자리 지수 표기
    """
    if not math.isfinite(value):
        return ERROR_TEXT

    if abs(value) > EXPONENT_THRESHOLD:
        return _to_exponential(value, 5)

    rounded = round(value, ROUND_DIGITS)
    if rounded == 0:
        # -0 포함
        return '0'

    s = format(Decimal(repr(rounded)).normalize(), 'f')

    if len(s) > MAX_DIGITS:
        if '.' in s:
            integer_part = s.split('.')[0]
            places = max(0, MAX_DIGITS - len(integer_part) - 1)
            s = '{:.{}f}'.format(rounded, places)
        else:
            s = _to_exponential(rounded, 3)

    return s


def _to_number(s: str) -> float:
    # 'Error' 등 숫자가 아닌 표시는 NaN
    try:
        return float(s)
    except ValueError:
        return math.nan


class Calculator:
    """연산 엔진: 표시값/대기값/대기 연산자 상태와 토큰 처리"""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._display = '0'  # 현재 입력(문자열)
        self._pending = '0'  # 연산자 앞에서 저장한 값
        self._operator: Optional[Operator] = None  # 대기 연산자

    # 관찰용 API
    def display_value(self) -> str:
        return self._display

    def pending_value(self) -> str:
        return self._pending

    def pending_operator(self) -> str:
        return self._operator.value if self._operator else ''

    @property
    def current_number(self) -> float:
        return _to_number(self._display)

    @property
    def previous_number(self) -> float:
        return _to_number(self._pending)

    def submit(self, raw: str) -> None:
        """토큰 하나를 받아 상태를 갱신한다. 어휘 밖의 토큰은 무시."""
        token = parse_token(raw)
        if token is None:
            logger.debug('무시된 입력: %r', raw)
            return

        if token is Command.CLEAR:
            self.reset()
        elif token is Command.BACKSPACE:
            self.backspace()
        elif token is Command.EQUALS:
            self.evaluate()
        elif token is Command.PERCENT:
            self.percent()
        elif token is Command.TOGGLE_SIGN:
            self.negative_positive()
        elif token is Command.DECIMAL:
            self.input_dot()
        elif isinstance(token, Operator):
            self.set_operator(token)
        else:
            self.input_digit(token)

        logger.debug('입력=%r 표시=%s 대기=%s 연산자=%r',
                     raw, self._display, self._pending, self.pending_operator())

    def backspace(self) -> None:
        cur = self._display
        if cur == '0':
            return
        if len(cur) == 1 or (len(cur) == 2 and cur.startswith('-')):
            self._display = '0'
            return
        self._display = cur[:-1]

    def evaluate(self) -> None:
        """대기 연산자를 적용하고 결과를 표시값으로 옮긴다."""
        if self._operator is None:
            return

        a = self.previous_number
        b = self.current_number
        try:
            result = self._operator.apply(a, b)
        except ZeroDivisionError:
            logger.warning('0으로 나누기: %s / %s', self._pending, self._display)
            self._set_error()
            return

        self._display = format_result(result)
        self._pending = '0'
        self._operator = None

    def percent(self) -> None:
        self._display = format_result(self.current_number / 100)

    def negative_positive(self) -> None:
        cur = self._display
        if cur in ('0', ERROR_TEXT):
            return
        if cur.startswith('-'):
            self._display = cur[1:]
        else:
            self._display = '-' + cur

    def input_dot(self) -> None:
        cur = self._display
        if '.' in cur:
            return
        # 빈 값/0/오류 상태면 '0.'으로 새로 시작
        if cur in ('0', '', ERROR_TEXT):
            self._display = '0.'
            return
        if cur == '-0':
            self._display = '-0.'
            return
        self._display = cur + '.'

    def set_operator(self, op: Operator) -> None:
        # 대기 중인 연산이 있으면 먼저 계산(연쇄), 대기값이 정확히 '0'이면 건너뜀
        if self._operator is not None and self._pending != '0':
            self.evaluate()

        self._operator = op
        self._pending = self._display
        self._display = '0'

    def input_digit(self, d: str) -> None:
        cur = self._display
        if len(cur) >= MAX_DIGITS:
            return
        if cur == '0' and d == '0':
            return
        # 초기 0 또는 오류 상태는 교체
        if cur in ('0', ERROR_TEXT):
            self._display = d
            return
        if cur == '-0':
            self._display = '-' + d
            return
        self._display = cur + d

    def _set_error(self) -> None:
        self._display = ERROR_TEXT
        self._pending = '0'
        self._operator = None

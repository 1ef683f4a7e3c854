# core/helpers.py

"""
이 모듈은 core 패키지 내부의 다른 모듈들이 공통적으로 사용하는
저수준(low-level) 도우미 함수들을 제공합니다.
"""

import math
from numbers import Real
from typing import Type

from core.exceptions import InvalidInput

# 프로젝트 전역에서 사용할 부동소수점 비교를 위한 허용 오차
TOLERANCE = 1e-9

def is_less_or_equal(a: float, b: float) -> bool:
    """
    부동소수점 오차를 고려하여 a <= b 인지 안전하게 비교합니다.
    a가 b보다 작거나, 두 수의 차이가 허용 오차보다 작으면 True를 반환합니다.
    """
    return (a - b) < TOLERANCE

def require_number(name: str, value, error: Type[InvalidInput] = InvalidInput, allow_zero: bool = False) -> None:
    """
    값이 유한한 실수이며 양수(allow_zero=True 이면 0 이상)인지 검사합니다.
    bool 은 숫자로 인정하지 않습니다.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise error(f"'{name}' must be a number, got {type(value).__name__}.")
    if not math.isfinite(value):
        raise error(f"'{name}' must be finite, got {value}.")
    if allow_zero and value < 0:
        raise error(f"'{name}' must be zero or positive, got {value}.")
    if not allow_zero and value <= 0:
        raise error(f"'{name}' must be positive, got {value}.")

# core/section/rectangular.py

"""
이 모듈은 복철근 사각형 단면(RectangularSection)의 기하학적 특성을 정의합니다.
이 클래스는 불변(immutable) 객체로, 생성 시 단면 치수에 대한 유효성을 검사합니다.
모든 단위는 mm 기준입니다.
"""

from dataclasses import dataclass

from core.exceptions import SectionError
from core.helpers import require_number

@dataclass(frozen=True)
class RectangularSection:
    """
    Attributes:
        b (float): 단면의 폭 (mm).
        h (float): 단면의 전체 높이 (mm).
        d1 (float): 인장연단에서 인장철근 도심까지의 거리 (mm).
        d2 (float): 압축연단에서 압축철근 도심까지의 거리 (mm).
    """
    b: float = 300.0
    h: float = 550.0
    d1: float = 50.0
    d2: float = 50.0

    def __post_init__(self):
        for name in ("b", "h", "d1", "d2"):
            require_number(name, getattr(self, name), SectionError)
        if not (0 < self.d2 < self.d < self.h):
            raise SectionError(
                f"Section must satisfy 0 < d2 < d < h (d2={self.d2}, d={self.d}, h={self.h}).")

    @property
    def d(self) -> float:
        """인장철근의 유효깊이 (d) : 콘크리트 압축연단에서 인장철근 도심까지의 거리"""
        return self.h - self.d1

    @property
    def gross_area(self) -> float:
        return self.b * self.h

    @property
    def steel_lever_arm(self) -> float:
        """압축철근 합력의 팔길이 z_s = d - d2 (인장철근 도심 기준)"""
        return self.d - self.d2

# core/section/reinforcement.py

"""
이 모듈은 인장/압축 철근층(ReinforcementLayer)과 이를 구성하는
철근 그룹(BarGroup)을 정의합니다.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from core.exceptions import ReinforcementError
from core.helpers import require_number


class ReinforcementRole(Enum):
    TENSION = "tension"
    COMPRESSION = "compression"


def bar_area(diameter: float) -> float:
    """원형 철근 1개의 단면적 π·D²/4 (mm^2)"""
    return math.pi * diameter ** 2 / 4


@dataclass(frozen=True)
class BarGroup:
    """같은 직경의 철근 묶음 (개수, 직경)."""
    count: int
    diameter: float

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count <= 0:
            raise ReinforcementError(f"Bar count must be a positive integer, got {self.count!r}.")
        require_number("diameter", self.diameter, ReinforcementError)

    @property
    def area(self) -> float:
        return self.count * bar_area(self.diameter)


@dataclass(frozen=True)
class ReinforcementLayer:
    """한 층의 철근 총 단면적과 역할(인장/압축). 해석 전에 고정됩니다."""
    role: ReinforcementRole
    groups: Tuple[BarGroup, ...] = field(default_factory=tuple)

    @property
    def area(self) -> float:
        return sum(group.area for group in self.groups)

    @property
    def total_bars(self) -> int:
        return sum(group.count for group in self.groups)

# core/material/material.py

"""
이 모듈은 콘크리트와 철근 재료의 설계 특성을 정의하는
데이터 클래스들을 제공합니다.

각 클래스는 불변(immutable) 객체로 설계되어, 한 번의 해석 동안
설계강도와 설계변형률이 바뀌지 않도록 보장합니다.
객체 생성 시 입력값의 유효성 검사를 수행합니다.
모든 단위는 N, mm, MPa 기준입니다.
"""

import math
from dataclasses import dataclass

import core.constants as const
from core.exceptions import MaterialError
from core.helpers import require_number

# ==============================================================================
# Module Root Level Constants
# ==============================================================================
STEEL_ELASTIC_MODULUS = 200000          # MPa (200 GPa)

# ==============================================================================
# Material Classes
# ==============================================================================
@dataclass(frozen=True)
class Steel:
    """철근의 설계 특성(EN 1992-1-1, 3.2.7)과 이선형 탄소성 응력-변형률 관계."""
    fyk: float = 500.0
    gamma_s: float = 1.15
    Es: float = STEEL_ELASTIC_MODULUS

    def __post_init__(self):
        require_number("fyk", self.fyk, MaterialError)
        require_number("gamma_s", self.gamma_s, MaterialError)
        require_number("Es", self.Es, MaterialError)

    @property
    def fyd(self) -> float:
        """설계항복강도 fyd = fyk / γs (MPa)"""
        return self.fyk / self.gamma_s

    @property
    def yield_strain(self) -> float:
        """설계항복변형률 εyd = fyd / Es"""
        return self.fyd / self.Es

    def stress(self, strain: float) -> float:
        """
        변형률에 대응하는 철근 응력(MPa)을 반환합니다. 인장(+), 압축(-).
        |ε| < εyd 이면 탄성(ε·Es), 그 이상이면 부호를 유지한 채 fyd 에서 소성 수평.
        """
        if abs(strain) < self.yield_strain:
            return strain * self.Es
        return math.copysign(self.fyd, strain)


@dataclass(frozen=True)
class Concrete:
    """콘크리트의 설계 특성. fcd = αcc·fck / γc (EN 1992-1-1, 3.1.6)"""
    fck: float = 25.0
    gamma_c: float = 1.5
    ultimate_strain: float = 0.0035
    alpha_cc: float = 0.85

    def __post_init__(self):
        require_number("fck", self.fck, MaterialError)
        require_number("gamma_c", self.gamma_c, MaterialError)
        require_number("ultimate_strain", self.ultimate_strain, MaterialError)
        require_number("alpha_cc", self.alpha_cc, MaterialError)
        if self.alpha_cc > 1.0:
            raise MaterialError("alpha_cc must be between 0 and 1.0.")

    @property
    def fcd(self) -> float:
        """설계압축강도 (MPa)"""
        return self.alpha_cc * self.fck / self.gamma_c

    @property
    def j_lim(self) -> float:
        """연성 확보를 위한 중립축 깊이비 한계 (x/d)"""
        if self.fck <= const.NORMAL_STRENGTH_FCK_LIMIT:
            return const.J_LIM_NORMAL_STRENGTH
        return const.J_LIM_HIGH_STRENGTH

# core/engine.py

from dataclasses import dataclass
from typing import Optional

from loguru import logger

import core.constants as const
from core.material.material import Concrete, Steel
from core.section.rectangular import RectangularSection
from core.solver import EquilibriumSolver, EquilibriumState, SolverResult, SolverSettings
from core.exceptions import NonDuctileFailure
from core.helpers import is_less_or_equal

# ==============================================================================
# 결과 반환을 위한 데이터 클래스 정의
# ==============================================================================
@dataclass(frozen=True)
class MomentComponents:
    """인장철근 도심에 대한 저항모멘트의 구성."""
    z_c: float
    z_s: float
    zc_ratio: float
    m_concrete: float
    m_compression_steel: float

    @property
    def m_rd(self) -> float:
        return self.m_concrete + self.m_compression_steel

@dataclass(frozen=True)
class MomentResult:
    """단면 해석의 최종 결과 (M_Rd, x, 항복 및 연성 판정)."""
    as1: float
    as2: float
    m_rd: float
    x: float
    j: float
    j_lim: float
    is_ductile: bool
    tension_yielded: bool
    compression_yielded: bool
    moment: MomentComponents
    solver_result: SolverResult

    @property
    def state(self) -> EquilibriumState:
        return self.solver_result.state

# ==============================================================================
# 판정 및 모멘트 계산 함수
# ==============================================================================
def classify_yield(strain: float, yield_strain: float) -> bool:
    """
    철근 변형률의 절대값이 설계항복변형률 이상이면 항복으로 판정합니다.
    Steel.stress 의 소성 분기와 같은 기준입니다.
    """
    return not abs(strain) < yield_strain

def resisting_moment(Fc: float, Fs2: float, x: float, d: float, d2: float) -> MomentComponents:
    """
    인장철근 도심에 대한 설계 저항모멘트를 계산합니다 (kN, mm -> kNm).
    콘크리트 합력은 z_c = d - 0.4x, 압축철근 합력은 z_s = d - d2 에 작용하며,
    두 힘은 같은 회전 방향이므로 절대값을 취합니다.
    """
    z_c = d - const.STRESS_BLOCK_CENTROID_FACTOR * x
    z_s = d - d2
    return MomentComponents(
        z_c=z_c,
        z_s=z_s,
        zc_ratio=z_c / d,
        m_concrete=abs(Fc) * z_c * const.KNMM_TO_KNM,
        m_compression_steel=abs(Fs2) * z_s * const.KNMM_TO_KNM,
    )

# ==============================================================================
# 설계 엔진 클래스
# ==============================================================================
class DesignEngine:
    """
    EC2 에 따른 복철근 사각형 단면의 설계 휨저항(M_Rd) 해석 엔진.
    철근량은 mm^2, 힘은 kN, 모멘트는 kNm 단위입니다.
    """

    def __init__(self, settings: Optional[SolverSettings] = None):
        self.solver = EquilibriumSolver(settings)

    def analyze(self, section: RectangularSection, concrete: Concrete, steel: Steel,
                as1: float, as2: float = 0.0) -> MomentResult:
        """
        주어진 인장/압축 철근량에 대해 평형 중립축 깊이와 M_Rd 를 계산합니다.
        연성 조건 위반은 결과의 is_ductile 로만 보고합니다.
        """
        solver_result = self.solver.solve(section, concrete, steel, as1, as2)
        state = solver_result.state

        is_ductile = self.check_ductility(state, concrete)
        eps_yd = steel.yield_strain
        moment = resisting_moment(state.Fc, state.Fs2, state.x, section.d, section.d2)

        result = MomentResult(
            as1=as1,
            as2=as2,
            m_rd=moment.m_rd,
            x=state.x,
            j=state.j,
            j_lim=concrete.j_lim,
            is_ductile=is_ductile,
            tension_yielded=classify_yield(state.eps_s1, eps_yd),
            compression_yielded=classify_yield(state.eps_s2, eps_yd),
            moment=moment,
            solver_result=solver_result,
        )

        if not is_ductile:
            logger.warning("j = x/d = {:.4f} > j_lim = {:.2f}, not the desired failure type", state.j, concrete.j_lim)
        logger.info("M_Rd = {:.2f} kNm, x = {:.2f} mm (As1={:.1f}, As2={:.1f} mm^2)", result.m_rd, result.x, as1, as2)
        return result

    def analyze_or_raise(self, section: RectangularSection, concrete: Concrete, steel: Steel,
                         as1: float, as2: float = 0.0) -> MomentResult:
        """analyze 와 같으나, 연성 조건을 만족하지 못하면 NonDuctileFailure 를 발생시킵니다."""
        result = self.analyze(section, concrete, steel, as1, as2)
        if not result.is_ductile:
            raise NonDuctileFailure(j=result.j, j_lim=result.j_lim)
        return result

    def check_ductility(self, state: EquilibriumState, concrete: Concrete) -> bool:
        """j = x/d <= j_lim 이면 연성 파괴 영역으로 판정합니다."""
        return is_less_or_equal(state.j, concrete.j_lim)

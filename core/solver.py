# core/solver.py

"""
이 모듈은 복철근 사각형 단면의 중립축 깊이(x)를 힘의 평형으로부터 찾는
EquilibriumSolver 를 제공합니다.

각 시행 깊이 x 에서 변형률 적합조건(압축연단 εcu 기준 닮은꼴 삼각형)으로
철근 변형률을 구하고, 콘크리트 응력블록 압축력과 두 철근층의 힘을 합산합니다.
힘은 kN 단위이며 인장이 양수(+), 압축이 음수(-)입니다.
"""

import math
from dataclasses import dataclass
from typing import Optional

from loguru import logger

import core.constants as const
from core.exceptions import DivergentEquilibrium, InvalidInput, MissingTensionReinforcement, ReinforcementError
from core.material.material import Concrete, Steel
from core.section.rectangular import RectangularSection
from core.helpers import require_number

SOLVER_METHODS = ("bisection", "march")

# ==============================================================================
# 결과 반환을 위한 데이터 클래스 정의
# ==============================================================================
@dataclass(frozen=True)
class EquilibriumState:
    """하나의 시행 중립축 깊이에 대한 단면 상태. 매 시행마다 새로 생성됩니다."""
    x: float
    j: float
    eps_s1: float
    eps_s2: float
    Fc: float
    Fs1: float
    Fs2: float

    @property
    def net_force(self) -> float:
        """단면에 작용하는 축방향 합력 N = Fs1 + Fc + Fs2 (kN)"""
        return self.Fs1 + self.Fc + self.Fs2

@dataclass(frozen=True)
class SolverResult:
    state: EquilibriumState
    iterations: int
    method: str

@dataclass(frozen=True)
class SolverSettings:
    """
    Attributes:
        tolerance (float): 평형 판정 허용오차 |N| <= tolerance (kN).
        step (float): 'march' 의 증분이자 탐색 가능한 최소 깊이 (mm).
        max_iterations (int): 'bisection' 의 최대 반복 횟수.
        method (str): 'bisection' (기본) 또는 'march'.
    """
    tolerance: float = const.DEFAULT_FORCE_TOLERANCE
    step: float = const.DEFAULT_DEPTH_STEP
    max_iterations: int = const.DEFAULT_MAX_ITERATIONS
    method: str = "bisection"

    def __post_init__(self):
        require_number("tolerance", self.tolerance)
        require_number("step", self.step)
        if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int) or self.max_iterations <= 0:
            raise InvalidInput(f"'max_iterations' must be a positive integer, got {self.max_iterations!r}.")
        if self.method not in SOLVER_METHODS:
            raise InvalidInput(f"Unknown solver method: '{self.method}'. Choose from {SOLVER_METHODS}.")

def check_reinforcement(as1: float, as2: float) -> None:
    """철근량을 검사합니다. As1 은 0 보다 커야 하고, As2 는 0 이상이어야 합니다."""
    require_number("as1", as1, ReinforcementError, allow_zero=True)
    require_number("as2", as2, ReinforcementError, allow_zero=True)
    if as1 == 0:
        raise MissingTensionReinforcement()

# ==============================================================================
# 평형 탐색 클래스
# ==============================================================================
class EquilibriumSolver:
    """
    중립축 깊이 x 에 대해 단조 감소하는 축방향 합력 N(x) 의 근을 찾습니다.

    x → 0 에서 N 은 As1·fyd + As2·fyd > 0 에 수렴하고, 콘크리트 압축력이
    x 에 비례하여 증가하므로 N(x) 는 x 에 대해 순감소합니다.
    따라서 [step, h] 구간에서 해는 유일합니다.
    """

    def __init__(self, settings: Optional[SolverSettings] = None):
        self.settings = settings or SolverSettings()

    def state_at(self, section: RectangularSection, concrete: Concrete, steel: Steel,
                 as1: float, as2: float, x: float) -> EquilibriumState:
        """주어진 중립축 깊이 x(mm) 에서 단면의 변형률과 힘을 계산합니다."""
        if x <= 0:
            raise InvalidInput(f"Neutral axis depth must be positive, got x={x}.")
        d, d2 = section.d, section.d2
        eps_cu = concrete.ultimate_strain

        j = x / d
        if j > concrete.j_lim:
            logger.debug("x={:.3f} mm: j={:.4f} > j_lim={:.2f}, outside ductile region", x, j, concrete.j_lim)

        # 변형률 적합조건 (압축연단 εcu 기준 닮은꼴 삼각형)
        eps_s1 = eps_cu * (d - x) / x
        eps_s2 = eps_cu * (d2 - x) / x

        Fc = -const.STRESS_BLOCK_DEPTH_FACTOR * x * section.b * concrete.fcd * const.N_TO_KN
        Fs1 = as1 * steel.stress(eps_s1) * const.N_TO_KN
        Fs2 = as2 * steel.stress(eps_s2) * const.N_TO_KN

        return EquilibriumState(x=x, j=j, eps_s1=eps_s1, eps_s2=eps_s2, Fc=Fc, Fs1=Fs1, Fs2=Fs2)

    def solve(self, section: RectangularSection, concrete: Concrete, steel: Steel,
              as1: float, as2: float = 0.0) -> SolverResult:
        """설정된 방법으로 평형 중립축 깊이를 찾습니다. 실패 시 DivergentEquilibrium."""
        check_reinforcement(as1, as2)
        if self.settings.method == "march":
            result = self._march(section, concrete, steel, as1, as2)
        else:
            result = self._bisect(section, concrete, steel, as1, as2)
        logger.debug("{} converged after {} iterations: x={:.3f} mm, N={:.4f} kN",
                     result.method, result.iterations, result.state.x, result.state.net_force)
        return result

    def _bisect(self, section, concrete, steel, as1, as2) -> SolverResult:
        """[내부용] [step, h] 구간 이분법 탐색."""
        tol = self.settings.tolerance
        lo, hi = self.settings.step, section.h

        lo_state = self.state_at(section, concrete, steel, as1, as2, lo)
        if lo_state.net_force <= -tol:
            raise DivergentEquilibrium("root lies below the smallest admissible depth",
                                       lo, lo_state.net_force, tol)
        if abs(lo_state.net_force) <= tol:
            return SolverResult(state=lo_state, iterations=1, method="bisection")

        hi_state = self.state_at(section, concrete, steel, as1, as2, hi)
        if hi_state.net_force > tol:
            raise DivergentEquilibrium("net force still tensile at x = h",
                                       hi, hi_state.net_force, tol)
        if abs(hi_state.net_force) <= tol:
            return SolverResult(state=hi_state, iterations=2, method="bisection")

        state = lo_state
        for iteration in range(1, self.settings.max_iterations + 1):
            mid = (lo + hi) / 2.0
            state = self.state_at(section, concrete, steel, as1, as2, mid)
            if abs(state.net_force) <= tol:
                return SolverResult(state=state, iterations=iteration, method="bisection")
            if state.net_force > 0:
                lo = mid
            else:
                hi = mid
        raise DivergentEquilibrium(f"no convergence within {self.settings.max_iterations} iterations",
                                   state.x, state.net_force, tol)

    def _march(self, section, concrete, steel, as1, as2) -> SolverResult:
        """[내부용] x 를 step 씩 증가시키며 처음으로 N <= tolerance 가 되는 깊이를 찾습니다."""
        tol, step = self.settings.tolerance, self.settings.step
        max_steps = math.ceil(section.h / step)

        for iteration in range(1, max_steps + 1):
            # 누적 합 대신 곱으로 계산하여 반올림 오차 누적을 피한다
            x = iteration * step
            state = self.state_at(section, concrete, steel, as1, as2, x)
            if state.net_force <= tol:
                if state.net_force < -tol:
                    raise DivergentEquilibrium("step overshoots the tolerance band",
                                               x, state.net_force, tol)
                return SolverResult(state=state, iterations=iteration, method="march")
        raise DivergentEquilibrium("net force still tensile at x = h", state.x, state.net_force, tol)

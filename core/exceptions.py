# core/exceptions.py

"""
이 모듈은 프로젝트에서 사용되는 모든 사용자 정의 예외 클래스를
중앙에서 관리합니다.

각 예외는 특정 오류 상황을 명확하게 나타내어, 체계적이고 구체적인
오류 처리를 가능하게 합니다. 모든 예외는 기본 RCDException을 상속받습니다.
"""

class RCDException(Exception):
    """
    이 프로젝트(Reinforced Concrete Design)의 모든 사용자 정의 예외에 대한 기본 클래스입니다.
    이 클래스를 직접 발생시키기보다는, 이를 상속받는 더 구체적인 예외를 사용합니다.
    """
    pass

# --- 입력값 및 정의 관련 오류 ---

class InvalidInput(RCDException):
    """숫자가 아니거나, 유한하지 않거나, 허용 범위를 벗어난 입력값에 대한 기본 클래스입니다."""
    pass

class MaterialError(InvalidInput):
    """재료 정의와 관련된 오류입니다."""
    pass

class SectionError(InvalidInput):
    """단면 정의와 관련된 오류입니다."""
    pass

class ReinforcementError(InvalidInput):
    """철근 개수, 직경, 단면적 입력과 관련된 오류입니다."""
    pass

class MissingTensionReinforcement(ReinforcementError):
    """인장철근 단면적이 0일 때 발생합니다. 인장철근은 필수입니다."""
    def __init__(self, message: str = "Surface of tension steel is required (As1 must be > 0)."):
        self.message = message
        super().__init__(self.message)

# --- 설계 계산 과정에서 발생하는 오류 ---

class DesignError(RCDException):
    """설계 계산 과정에서 발생하는 일반적인 오류에 대한 기본 클래스입니다."""
    pass

class DivergentEquilibrium(DesignError):
    """
    중립축 깊이 탐색이 허용 범위 안에서 힘의 평형(|N| <= tolerance)을
    만족하는 해를 찾지 못했을 때 발생하는 예외입니다.
    """
    def __init__(self, reason: str, x: float, net_force: float, tolerance: float):
        message = (f"Force equilibrium not reached: {reason} "
                   f"(x={x:.3f} mm, N={net_force:.3f} kN, tolerance={tolerance} kN).")
        self.x = x
        self.net_force = net_force
        self.tolerance = tolerance
        self.message = message
        super().__init__(self.message)

class NonDuctileFailure(DesignError):
    """
    중립축 깊이비(j = x/d)가 한계값 j_lim 을 초과하여,
    인장철근 항복 이전에 콘크리트가 압괴되는 취성 파괴가 예상될 때 발생합니다.
    """
    def __init__(self, j: float, j_lim: float):
        message = (f"Ductility requirements not met. "
                   f"Neutral axis ratio x/d={j:.4f} exceeds the limit j_lim={j_lim:.2f}. "
                   f"Not the desired failure type.")
        self.j = j
        self.j_lim = j_lim
        self.message = message
        super().__init__(self.message)

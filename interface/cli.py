# interface/cli.py

from loguru import logger

from core.material.material import Concrete, Steel
from core.section.rectangular import RectangularSection
from core.section.reinforcement import ReinforcementLayer, ReinforcementRole
from core.solver import SolverSettings
from core.engine import DesignEngine, MomentResult
from core.exceptions import RCDException, InvalidInput

from services.reinforcement_collector import ReinforcementCollector

_ROLE_LABELS = {
    ReinforcementRole.TENSION: "인장",
    ReinforcementRole.COMPRESSION: "압축",
}

# --- [1. 기본 사용자 입력(Prompt) 함수] ---

def _read(message: str) -> str:
    """[내부용] 한 줄을 입력받습니다. 입력이 끝나면(EOF) InvalidInput."""
    try:
        return input(message).strip()
    except EOFError:
        raise InvalidInput("Input ended before the reinforcement entry was complete.") from None

def prompt_int(message: str) -> int:
    """정수 입력을 받습니다. 숫자가 아니면 InvalidInput."""
    raw = _read(message)
    try:
        return int(raw)
    except ValueError:
        raise InvalidInput(f"Expected an integer, got '{raw}'.") from None

def prompt_float(message: str) -> float:
    """실수 입력을 받습니다. 숫자가 아니면 InvalidInput."""
    raw = _read(message)
    try:
        return float(raw)
    except ValueError:
        raise InvalidInput(f"Expected a number, got '{raw}'.") from None

def prompt_for_reinforcement(role: ReinforcementRole) -> ReinforcementLayer:
    """
    철근 개수와 직경을 반복 입력받아 누적합니다. 개수 0 을 입력하면 종료합니다.
    인장철근이 하나도 없으면 MissingTensionReinforcement 가 발생합니다.
    """
    label = _ROLE_LABELS[role]
    collector = ReinforcementCollector(role)
    print(f"\n--- {label}철근 입력 ---")
    while True:
        count = prompt_int(f"{label}철근 개수 (입력 종료: 0): ")
        if count == 0:
            break
        diameter = prompt_float(f"{label}철근 직경 (mm): ")
        group = collector.add_bars(count, diameter)
        logger.debug("{} bars: {} x D{} -> total {:.1f} mm^2", role.value, group.count, group.diameter, collector.area)
    return collector.freeze()

# --- [2. 결과 출력(Display) 함수] ---

def display_design_values(concrete: Concrete, steel: Steel):
    """재료의 설계값을 출력합니다."""
    print("\n--- 재료 설계값 ---")
    print(f"  - fcd = {concrete.fcd:.3f} MPa")
    print(f"  - fyd = {steel.fyd:.3f} MPa")
    print(f"  - εyd = {steel.yield_strain:.6f}")
    print(f"  - j_lim = {concrete.j_lim:.2f}")

def display_result(result: MomentResult):
    """단면 해석 결과를 가독성 높게 출력합니다."""
    print("\n" + "="*40)
    print("      ✅ 단면 해석 결과")
    print("="*40)
    print(f"  - 인장철근 단면적 As1 : {result.as1:.2f} mm^2")
    print(f"  - 압축철근 단면적 As2 : {result.as2:.2f} mm^2")
    print(f"\n  [철근 항복 판정]")
    print(f"  - 인장철근 : {'항복 (Yield)' if result.tension_yielded else '항복하지 않음 (Not yield)'}")
    if result.as2 > 0:
        print(f"  - 압축철근 : {'항복 (Yield)' if result.compression_yielded else '항복하지 않음 (Not yield)'}")
    else:
        print("  - 압축철근 : 없음")
    print(f"\n  [연성 판정]")
    print(f"  - x/d = {result.j:.4f} (j_lim = {result.j_lim:.2f}) : {'OK' if result.is_ductile else 'NG'}")
    if not result.is_ductile:
        print("  - j > j_lim : 원하는 파괴 형태가 아닙니다 (취성 파괴 우려).")
    print(f"\n  [설계 휨저항]")
    print(f"  - 팔길이 z_c = {result.moment.z_c:.2f} mm (z_c/d = {result.moment.zc_ratio:.3f})")
    print(f"  - 팔길이 z_s = {result.moment.z_s:.2f} mm")
    print(f"  - 설계 모멘트 M_Rd : {result.m_rd:.2f} kNm")
    print(f"  - 최종 중립축 깊이 x : {result.x:.2f} mm")
    print("="*40)

def display_error(error: Exception):
    print("\n" + "-"*40)
    print("      ❌ 오류 발생 (Error)")
    print(f"  오류 유형: {type(error).__name__}")
    print(f"  상세 내용: {error}")
    print("-"*40)

# --- [3. 메인 워크플로우(Workflow) 함수] ---

def run_analysis_workflow(section: RectangularSection, concrete: Concrete, steel: Steel,
                          settings: SolverSettings = None) -> int:
    """
    철근을 입력받아 설계 휨저항을 계산하고 결과를 출력합니다.
    정상 종료 시 0, 오류 발생 시 1 을 반환합니다 (프로세스 종료 코드).
    """
    print("\n>>> 복철근 사각형 단면 M_Rd 해석을 시작합니다.")
    display_design_values(concrete, steel)
    try:
        tension = prompt_for_reinforcement(ReinforcementRole.TENSION)
        print(f"인장철근 단면적 As1: {tension.area:.2f} mm^2")
        compression = prompt_for_reinforcement(ReinforcementRole.COMPRESSION)
        print(f"압축철근 단면적 As2: {compression.area:.2f} mm^2")

        engine = DesignEngine(settings)
        result = engine.analyze(section, concrete, steel, tension.area, compression.area)
        display_result(result)
        return 0

    except RCDException as e:
        display_error(e)
        return 1

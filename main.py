# main.py

import sys
from interface import cli
from core.logging import configure_logging
from core.material.material import Concrete, Steel
from core.section.rectangular import RectangularSection
from core.solver import SolverSettings
from core.exceptions import RCDException

# ==========================================================
# 사용자 설정 (User Configuration)
# ==========================================================
# 이 부분만 수정하면 프로그램 전체에 적용됩니다.
SECTION = dict(b=300, h=550, d1=50, d2=50)                              # mm
CONCRETE = dict(fck=25, gamma_c=1.5, ultimate_strain=0.0035, alpha_cc=0.85)
STEEL = dict(fyk=500, gamma_s=1.15, Es=200000)                          # MPa
SOLVER = dict(tolerance=0.1, step=0.01, max_iterations=200, method="bisection")
LOG_LEVEL = "WARNING"

def build_configuration():
    """
    사용자 설정값으로 단면, 재료, 탐색 설정 객체를 생성합니다.
    잘못된 설정값은 RCDException 으로 보고되고 프로그램이 종료됩니다.
    """
    try:
        return (RectangularSection(**SECTION), Concrete(**CONCRETE), Steel(**STEEL), SolverSettings(**SOLVER))
    except RCDException as e:
        print("="*50)
        print("❌ 설정 오류 (Configuration Error)")
        print(f"{e}")
        print("main.py 상단의 사용자 설정을 수정해주세요.")
        print("="*50)
        sys.exit(1) # 프로그램 비정상 종료

def main():
    """
    EC2 복철근 사각형 단면 설계 휨저항 계산 프로그램의 메인 실행 함수.
    """
    configure_logging(LOG_LEVEL)
    print("="*50)
    print("   Doubly Reinforced Beam M_Rd Calculator (EC2)")
    print("="*50)
    print("이 프로그램은 Eurocode 2 에 따라 복철근 사각형 단면의 설계 휨저항을 계산합니다.")
    print("모든 치수 단위는 'mm', 재료강도 단위는 'MPa' 입니다.")

    section, concrete, steel, settings = build_configuration()
    print(f"단면: b={section.b}, h={section.h}, d={section.d}, d2={section.d2} (mm)")

    sys.exit(cli.run_analysis_workflow(section, concrete, steel, settings))

if __name__ == "__main__":
    main()

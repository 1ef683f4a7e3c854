# main_batch.py

import numpy as np
import pandas as pd
from interface.batch_runner import BatchRunner
from core.logging import configure_logging
import time


# =================================
# 사용자 배치 실행 시나리오 정의
# =================================

# --- 인장철근량 변화 (단철근) ---
tension_sweep = {
    "fck": [25, 30],
    "fyk": [500],
    "b": [300], "h": [550], "d1": [50], "d2": [50],
    "n1": list(range(2, 9)), "dia1": [16, 20, 25],
    "n2": [0], "dia2": [0],
}

# --- 압축철근량 변화 (복철근) ---
compression_sweep = {
    "fck": [25],
    "fyk": [500],
    "b": [300], "h": [550], "d1": [50], "d2": [50],
    "n1": [4, 6], "dia1": [20, 25],
    "n2": [0, 2, 3, 4], "dia2": [16, 20],
}

# --- 단면 치수 변화 ---
section_sweep = {
    "fck": [25, 40, 60],
    "fyk": [500],
    "b": np.linspace(250, 500, int((500-250)/50)+1),
    "h": np.linspace(400, 800, int((800-400)/100)+1),
    "d1": [50], "d2": [50],
    "n1": [4], "dia1": [20],
    "n2": [2], "dia2": [16],
}


def main():
    """
    M_Rd Calculator (Batch Mode)의 메인 실행 함수.
    재료, 치수 단위 : (N, mm, MPa), 결과 : x (mm), M_Rd (kNm)
    """
    configure_logging("ERROR")
    print("="*50)
    print("    M_Rd Calculator - Batch Mode")
    print("="*50)

    # 실행할 배치 입력
    param = tension_sweep
    # param = compression_sweep
    # param = section_sweep

    start_time = time.time()

    runner = BatchRunner(param)
    runner.run()
    df = runner.to_dataframe()

    with pd.option_context("display.max_rows", None, "display.width", 200):
        print(df)

    end_time = time.time()
    print(f"총 실행 시간: {end_time - start_time:.2f} 초")

if __name__ == "__main__":
    main()

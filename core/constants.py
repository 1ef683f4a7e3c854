# core/constants.py

"""
EC2 (EN 1992-1-1) 휨 해석에 사용되는 공통 상수를 정의합니다.
모든 단위는 N, mm, MPa 기준이며, 힘은 kN, 모멘트는 kNm 으로 보고합니다.
"""

# --- 등가 직사각형 응력블록 (EN 1992-1-1, 3.1.7(3)) ---
STRESS_BLOCK_DEPTH_FACTOR = 0.8         # λ : 응력블록 깊이 = 0.8x
STRESS_BLOCK_CENTROID_FACTOR = STRESS_BLOCK_DEPTH_FACTOR / 2  # 압축연단에서 합력 위치 = 0.4x

# --- 연성 확보를 위한 중립축 깊이비 한계 (x/d) ---
J_LIM_NORMAL_STRENGTH = 0.45            # fck <= 50 MPa
J_LIM_HIGH_STRENGTH = 0.35              # fck > 50 MPa
NORMAL_STRENGTH_FCK_LIMIT = 50.0

# --- 단위 변환 ---
N_TO_KN = 1e-3
KNMM_TO_KNM = 1e-3

# --- 평형 탐색 기본값 ---
DEFAULT_FORCE_TOLERANCE = 0.1           # kN
DEFAULT_DEPTH_STEP = 0.01               # mm
DEFAULT_MAX_ITERATIONS = 200

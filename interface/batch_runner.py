# interface/batch_runner.py

import itertools
from numbers import Integral
import pandas as pd
from tqdm.auto import tqdm
from typing import Dict, List, Any, Optional

from core.material.material import Concrete, Steel
from core.section.rectangular import RectangularSection
from core.section.reinforcement import BarGroup
from core.solver import SolverSettings
from core.engine import DesignEngine
from core.exceptions import RCDException, ReinforcementError

class BatchRunner:
    """
    단면/재료/배근 파라미터의 여러 조합에 대해 M_Rd 해석을 일괄 수행합니다.
    """
    def __init__(self, params: Dict[str, List[Any]], settings: Optional[SolverSettings] = None):
        self.params = params
        self.engine = DesignEngine(settings)
        self.results = []

    def run(self):
        """배치 실행을 시작하고 모든 조합에 대한 계산을 수행합니다."""
        combinations = self._generate_combinations()

        for combo in tqdm(combinations, desc="Batch Processing", ncols=120):
            try:
                section, concrete, steel, as1, as2 = self._setup_case_from_combo(combo)
                result = self.engine.analyze(section, concrete, steel, as1, as2)
                self.results.append({
                    **combo,
                    "status": "OK",
                    "d": section.d,
                    "as1": as1,
                    "as2": as2,
                    "rho1": as1 / (section.b * section.d),
                    "x": result.x,
                    "j": result.j,
                    "j_lim": result.j_lim,
                    "is_ductile": result.is_ductile,
                    "tension_yielded": result.tension_yielded,
                    "compression_yielded": result.compression_yielded,
                    "m_rd": result.m_rd,
                    "iterations": result.solver_result.iterations,
                })
            except RCDException as e:
                self.results.append({**combo, "status": "Error", "message": str(e)})
            except Exception as e:
                self.results.append({**combo, "status": "Critical Error", "message": str(e)})

    def _generate_combinations(self) -> List[Dict[str, Any]]:
        """itertools.product를 사용하여 모든 파라미터 조합 딕셔너리를 생성합니다."""
        keys = self.params.keys()
        values = self.params.values()
        return [dict(zip(keys, p)) for p in itertools.product(*values)]

    def _setup_case_from_combo(self, combo: Dict[str, Any]) -> tuple:
        """조합 딕셔너리로부터 단면, 재료 객체와 철근량을 생성합니다. 없는 키는 기본값."""
        section = RectangularSection(
            b=float(combo.get('b', 300)),
            h=float(combo.get('h', 550)),
            d1=float(combo.get('d1', 50)),
            d2=float(combo.get('d2', 50)),
        )
        concrete = Concrete(fck=float(combo.get('fck', 25)))
        steel = Steel(fyk=float(combo.get('fyk', 500)))

        as1 = self._layer_area(combo, "n1", "dia1")
        as2 = self._layer_area(combo, "n2", "dia2")
        return section, concrete, steel, as1, as2

    def _layer_area(self, combo: Dict[str, Any], count_key: str, dia_key: str) -> float:
        """[내부용] 철근 개수가 정확히 0 이면 해당 층이 없는 것으로 보고, 그 외에는 BarGroup 으로 검사합니다."""
        count = combo.get(count_key, 0)
        if count == 0 and not isinstance(count, bool):
            return 0.0
        if dia_key not in combo:
            raise ReinforcementError(f"'{dia_key}' is required when '{count_key}'={count!r}.")
        if isinstance(count, Integral) and not isinstance(count, bool):
            count = int(count)
        return BarGroup(count, combo[dia_key]).area

    def to_dataframe(self) -> pd.DataFrame:
        """결과를 pandas DataFrame으로 변환하고 출력 단위를 조정합니다."""
        df = pd.DataFrame(self.results)
        if df.empty:
            return df

        # 철근량은 cm2, 철근비는 % 로 출력
        for col in ('as1', 'as2'):
            if col in df.columns:
                df[col] = df[col] / 1e2
        if 'rho1' in df.columns:
            df['rho1'] = df['rho1'] * 100
        return df

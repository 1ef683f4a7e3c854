# services/reinforcement_collector.py

"""
이 모듈은 사용자가 반복 입력하는 (철근 개수, 직경) 조합을 누적하여
인장/압축 철근층의 총 단면적을 구하는 ReinforcementCollector 서비스를 제공합니다.
입력이 끝나면 freeze() 로 불변 ReinforcementLayer 를 만들어 해석에 넘깁니다.
"""

from typing import List

from core.section.reinforcement import BarGroup, ReinforcementLayer, ReinforcementRole
from core.exceptions import MissingTensionReinforcement


class ReinforcementCollector:
    """하나의 철근층(인장 또는 압축)에 대한 철근 그룹 누적기."""

    def __init__(self, role: ReinforcementRole):
        self.role = role
        self.groups: List[BarGroup] = []

    @property
    def area(self) -> float:
        """지금까지 누적된 철근 단면적 (mm^2)"""
        return sum(group.area for group in self.groups)

    def add_bars(self, count: int, diameter: float) -> BarGroup:
        """철근 그룹을 추가합니다. 잘못된 개수/직경은 ReinforcementError."""
        group = BarGroup(count=count, diameter=diameter)
        self.groups.append(group)
        return group

    def freeze(self) -> ReinforcementLayer:
        """
        누적된 철근 그룹으로 불변 ReinforcementLayer 를 생성합니다.
        인장철근층에 철근이 하나도 없으면 MissingTensionReinforcement.
        """
        layer = ReinforcementLayer(role=self.role, groups=tuple(self.groups))
        if self.role is ReinforcementRole.TENSION and layer.area <= 0:
            raise MissingTensionReinforcement()
        return layer

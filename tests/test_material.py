"""Material design values and the bilinear steel law."""
import math

import pytest

from core.material.material import Concrete, Steel
from core.section.rectangular import RectangularSection
from core.section.reinforcement import BarGroup, bar_area
from core.exceptions import InvalidInput, MaterialError, ReinforcementError, SectionError


class TestConcrete:

    def test_design_strength(self, concrete):
        """fcd = 0.85 * 25 / 1.5"""
        assert concrete.fcd == pytest.approx(14.1667, abs=1e-4)

    def test_j_lim_normal_strength(self, concrete):
        assert concrete.j_lim == 0.45
        assert Concrete(fck=50).j_lim == 0.45

    def test_j_lim_high_strength(self):
        assert Concrete(fck=60).j_lim == 0.35

    @pytest.mark.parametrize("kwargs", [
        {"fck": 0},
        {"fck": -25},
        {"fck": "25"},
        {"fck": True},
        {"gamma_c": float("nan")},
        {"alpha_cc": 1.2},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(MaterialError):
            Concrete(**kwargs)


class TestSteel:

    def test_design_values(self, steel):
        assert steel.fyd == pytest.approx(434.7826, abs=1e-4)
        assert steel.yield_strain == pytest.approx(0.0021739, abs=1e-7)

    @pytest.mark.parametrize("strain, expected", [
        (0.0, 0.0),
        (0.001, 200.0),
        (-0.001, -200.0),
        (0.01, 500 / 1.15),
        (-0.01, -500 / 1.15),
    ])
    def test_bilinear_stress(self, steel, strain, expected):
        assert steel.stress(strain) == pytest.approx(expected)

    def test_stress_continuous_at_yield(self, steel):
        eps_yd = steel.yield_strain
        assert steel.stress(eps_yd) == pytest.approx(steel.fyd)
        assert steel.stress(eps_yd * (1 - 1e-9)) == pytest.approx(steel.fyd)

    def test_stress_capped_at_yield(self, steel):
        assert abs(steel.stress(0.5)) == pytest.approx(steel.fyd)

    def test_invalid_modulus_rejected(self):
        with pytest.raises(MaterialError):
            Steel(Es=0)

    def test_material_error_is_invalid_input(self):
        with pytest.raises(InvalidInput):
            Steel(fyk=-500)


class TestSection:

    def test_reference_section(self, section):
        assert section.d == 500
        assert section.steel_lever_arm == 450
        assert section.gross_area == 300 * 550

    @pytest.mark.parametrize("kwargs", [
        {"b": 0},
        {"d2": 600},
        {"d1": 550},
        {"d2": 0},
        {"h": "550"},
    ])
    def test_invalid_geometry_rejected(self, kwargs):
        with pytest.raises(SectionError):
            RectangularSection(**kwargs)


class TestBarGroup:

    def test_bar_area(self):
        assert bar_area(20) == pytest.approx(math.pi * 100)
        assert BarGroup(4, 20).area == pytest.approx(1256.637, abs=1e-3)

    @pytest.mark.parametrize("count, diameter", [(-1, 20), (2, 0), (2.5, 20), (True, 20)])
    def test_invalid_group_rejected(self, count, diameter):
        with pytest.raises(ReinforcementError):
            BarGroup(count, diameter)

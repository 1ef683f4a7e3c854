"""M_Rd, yield classification and ductility of the solved section."""
import math

import pytest

from core.material.material import Concrete
from core.engine import DesignEngine, classify_yield, resisting_moment
from core.exceptions import MissingTensionReinforcement, NonDuctileFailure, ReinforcementError

AS_4D20 = 4 * math.pi * 20 ** 2 / 4
AS_8D32 = 8 * math.pi * 32 ** 2 / 4


@pytest.fixture(scope="module")
def engine():
    return DesignEngine()


@pytest.fixture(scope="module")
def singly(engine, section, concrete, steel):
    return engine.analyze(section, concrete, steel, AS_4D20, 0.0)


@pytest.fixture(scope="module")
def doubly(engine, section, concrete, steel):
    return engine.analyze(section, concrete, steel, AS_4D20, AS_4D20)


class TestSinglyReinforced:
    """4 D20 tension steel only."""

    def test_ductile_failure(self, singly):
        assert singly.is_ductile
        assert singly.j <= 0.45
        assert singly.j_lim == 0.45

    def test_tension_steel_yields(self, singly):
        assert singly.tension_yielded

    def test_neutral_axis(self, singly):
        assert singly.x == pytest.approx(160.695, abs=0.05)

    def test_design_moment(self, singly):
        assert singly.m_rd == pytest.approx(238.06, abs=0.1)

    def test_moment_from_concrete_only(self, singly, section):
        expected = abs(singly.state.Fc) * (section.d - 0.4 * singly.x) / 1000
        assert singly.m_rd == pytest.approx(expected)
        assert singly.moment.m_compression_steel == 0

    def test_lever_arms(self, singly, section):
        assert singly.moment.z_c == pytest.approx(section.d - 0.4 * singly.x)
        assert singly.moment.z_s == 450
        assert singly.moment.zc_ratio == pytest.approx(singly.moment.z_c / section.d)


class TestDoublyReinforced:
    """4 D20 top and bottom."""

    def test_smaller_neutral_axis(self, doubly, singly):
        assert doubly.x < singly.x

    def test_yield_classification(self, doubly):
        assert doubly.tension_yielded
        assert not doubly.compression_yielded

    def test_moment_components(self, doubly, section):
        state = doubly.state
        expected = (abs(state.Fc) * (section.d - 0.4 * state.x) + abs(state.Fs2) * (section.d - section.d2)) / 1000
        assert doubly.m_rd == pytest.approx(expected)
        assert doubly.m_rd == pytest.approx(250.9, abs=0.3)

    def test_repeated_analysis_identical(self, engine, section, concrete, steel, doubly):
        again = engine.analyze(section, concrete, steel, AS_4D20, AS_4D20)
        assert again.x == doubly.x
        assert again.m_rd == doubly.m_rd


class TestNonDuctile:
    """8 D32 tension steel: x/d ≈ 0.77, tension steel stays elastic."""

    def test_flagged_but_solved(self, engine, section, concrete, steel):
        result = engine.analyze(section, concrete, steel, AS_8D32, 0.0)
        assert not result.is_ductile
        assert not result.tension_yielded
        assert result.x == pytest.approx(386.96, abs=0.2)
        assert abs(result.state.net_force) <= 0.1

    def test_analyze_or_raise(self, engine, section, concrete, steel):
        with pytest.raises(NonDuctileFailure) as exc_info:
            engine.analyze_or_raise(section, concrete, steel, AS_8D32, 0.0)
        assert exc_info.value.j > exc_info.value.j_lim

    def test_high_strength_limit(self, engine, section, steel):
        """Same steel, fck=60: j_lim drops to 0.35."""
        result = engine.analyze(section, Concrete(fck=60), steel, 3 * AS_4D20, 0.0)
        assert result.j_lim == 0.35
        assert result.is_ductile == (result.j <= 0.35)

    def test_ductile_section_passes(self, engine, section, concrete, steel):
        result = engine.analyze_or_raise(section, concrete, steel, AS_4D20, 0.0)
        assert result.is_ductile


class TestReinforcementChecks:

    def test_missing_tension_steel(self, engine, section, concrete, steel):
        with pytest.raises(MissingTensionReinforcement):
            engine.analyze(section, concrete, steel, 0.0, AS_4D20)

    @pytest.mark.parametrize("as1, as2", [(-100.0, 0.0), (AS_4D20, -1.0), ("1256", 0.0)])
    def test_invalid_areas(self, engine, section, concrete, steel, as1, as2):
        with pytest.raises(ReinforcementError):
            engine.analyze(section, concrete, steel, as1, as2)


class TestHelpers:

    @pytest.mark.parametrize("strain, expected", [
        (0.003, True),
        (-0.003, True),
        (0.002, True),
        (0.001, False),
        (-0.001, False),
        (0.0, False),
    ])
    def test_classify_yield(self, strain, expected):
        assert classify_yield(strain, 0.002) is expected

    def test_resisting_moment_sign_independent(self):
        compressive = resisting_moment(-100.0, -50.0, 100.0, 500.0, 50.0)
        tensile = resisting_moment(100.0, 50.0, 100.0, 500.0, 50.0)
        assert compressive.m_rd == pytest.approx(68.5)
        assert tensile.m_rd == pytest.approx(compressive.m_rd)
        assert compressive.z_c == 460
        assert compressive.z_s == 450


class TestYieldRuleConsistency:
    """Yield classification follows the same boundary as the stress law."""

    @pytest.mark.parametrize("factor", [1 - 1e-12, 1 - 1e-7])
    def test_just_below_yield_is_elastic(self, steel, factor):
        strain = steel.yield_strain * factor
        assert steel.stress(strain) == pytest.approx(strain * steel.Es, rel=1e-15)
        assert not classify_yield(strain, steel.yield_strain)
        assert not classify_yield(-strain, steel.yield_strain)

    def test_at_yield_is_plastic(self, steel):
        strain = steel.yield_strain
        assert steel.stress(strain) == steel.fyd
        assert classify_yield(strain, steel.yield_strain)

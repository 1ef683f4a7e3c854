import pytest

from core.material.material import Concrete, Steel
from core.section.rectangular import RectangularSection


@pytest.fixture(scope="module")
def section():
    """b=300, h=550, d1=d2=50 (d=500)"""
    return RectangularSection()


@pytest.fixture(scope="module")
def concrete():
    return Concrete()


@pytest.fixture(scope="module")
def steel():
    return Steel()

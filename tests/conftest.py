import math

import pytest

from planetgen.models import PlanetParameters
from planetgen.noise_field import NoiseField


def zero_primitive(x, y, z):
    return 0.0


def ramp_primitive(x, y, z):
    """Smooth deterministic stand-in for Perlin noise, roughly in [-1, 1]."""
    return math.sin(1.7 * x + 0.3) * math.cos(1.3 * y - 0.2) * math.sin(0.9 * z + 1.1)


@pytest.fixture
def zero_noise():
    return NoiseField(primitive=zero_primitive)


@pytest.fixture
def ramp_noise():
    return NoiseField(primitive=ramp_primitive)


@pytest.fixture
def earth():
    return PlanetParameters()


@pytest.fixture
def warm_ocean():
    # Mean temperature high enough that the polar band can never fire
    return PlanetParameters(temperature=100.0, water=0.5)

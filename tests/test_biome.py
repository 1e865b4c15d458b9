"""
Tests for the ordered biome decision table.

Thresholds used throughout: radius 1, K 0.1, min height -1, dH 2.
With water 0.5 the water line sits exactly at radius 1; at the equator
(mean 15 °C) the snow coefficient caps at 0.91 so the snow line is
1.082 and the beach line 1.00656.
"""

import math

import pytest

from planetgen.biome import Biome, BiomeClassifier, color_for_biome
from planetgen.constants import BIOME_COLORS
from planetgen.models import PlanetParameters


class ScriptedRandom:
    """randrange() stand-in returning queued values; fails when exhausted."""

    def __init__(self, values=()):
        self.values = list(values)
        self.calls = 0

    def randrange(self, n):
        self.calls += 1
        return self.values.pop(0)


def make(rng=None, band_noise=None, **overrides):
    fields = dict(terrain_scale=0.1, temperature=15.0, water=0.5)
    fields.update(overrides)
    return BiomeClassifier(PlanetParameters(**fields), radius=1.0,
                           min_height=-1.0, dh=2.0,
                           rng=rng if rng is not None else ScriptedRandom(),
                           band_noise=band_noise)


def test_thresholds_at_equator():
    c = make()
    assert c.water_height == pytest.approx(0.0)
    assert c.local_temperature(0.0) == pytest.approx(60.0)
    snow = c.snow_height(0.0)
    assert snow == pytest.approx(0.082)
    assert c.sand_height(snow) == pytest.approx(0.00656)


def test_local_temperature_falls_with_latitude_either_side():
    c = make()
    assert c.local_temperature(math.radians(30)) == pytest.approx(30.0)
    assert c.local_temperature(math.radians(-30)) == pytest.approx(30.0)


def test_snow_line_drops_toward_poles():
    c = make()
    lats = [0.0, 0.5, 0.9, 1.2]
    heights = [c.snow_height(lat) for lat in lats]
    assert heights == sorted(heights, reverse=True)


@pytest.mark.parametrize("adj, expected", [
    (0.95, Biome.WATER),
    (1.0, Biome.WATER),      # water line is inclusive
    (1.003, Biome.SAND),
    (1.05, Biome.GRASS),
    (1.09, Biome.SNOW),
])
def test_terrestrial_bands_at_equator(adj, expected):
    assert make().classify_biome(adj, 0.0) is expected


def test_equator_never_draws_random_numbers():
    rng = ScriptedRandom()
    c = make(rng=rng)
    for adj in (0.9, 1.0, 1.003, 1.05, 1.2):
        c.classify_biome(adj, 0.0)
    assert rng.calls == 0


def test_non_terrestrial_skips_sand_and_grass():
    c = make(terrestrial=False, red=0.2, green=0.3, blue=0.4,
             band_noise=lambda x: 0.1)
    assert c.classify_biome(1.003, 0.0) is Biome.TINT
    r, g, b, a = c.classify(1.003, 0.0)
    assert (r, g, b, a) == pytest.approx((0.3, 0.4, 0.5, 1.0))


def test_tint_banding_samples_twice_the_latitude():
    seen = []
    c = make(terrestrial=False, band_noise=lambda x: seen.append(x) or 0.0)
    c.classify(1.05, 0.25)
    assert seen == [pytest.approx(0.5)]


def test_dry_world_has_no_water_or_snow():
    c = make(water=0.0)
    assert c.classify_biome(0.95, 0.0) is Biome.GRASS
    assert c.classify_biome(1.5, 0.0) is Biome.GRASS


def test_polar_band_snow_above_water_line():
    rng = ScriptedRandom([0])
    c = make(rng=rng)
    assert c.classify_biome(1.05, math.radians(80)) is Biome.SNOW
    assert rng.calls == 1


def test_polar_band_ice_shelf_or_open_water():
    lat = math.radians(80)
    # 20° past the band edge: second gate is 0.349**0.9 ≈ 0.388
    assert make(rng=ScriptedRandom([0, 10])).classify_biome(0.95, lat) is Biome.ICE_SHELF
    assert make(rng=ScriptedRandom([0, 45])).classify_biome(0.95, lat) is Biome.WATER


def test_polar_band_gate_falls_through_to_table():
    # 2° past the band edge: gate is 0.0349**0.25 ≈ 0.432, a 0.45 draw misses
    lat = math.radians(62)
    rng = ScriptedRandom([45])
    c = make(rng=rng)
    assert c.classify_biome(0.95, lat) is Biome.WATER
    assert rng.calls == 1


def test_polar_band_without_water_still_draws_then_falls_through():
    rng = ScriptedRandom([0])
    c = make(rng=rng, water=0.0)
    assert c.classify_biome(0.95, math.radians(80)) is not Biome.WATER
    assert rng.calls == 1


def test_southern_hemisphere_is_symmetric():
    c1 = make(rng=ScriptedRandom([0]))
    c2 = make(rng=ScriptedRandom([0]))
    assert (c1.classify_biome(1.05, math.radians(80))
            is c2.classify_biome(1.05, math.radians(-80)))


def test_flat_world_with_water_is_all_water():
    # Zero height range: every threshold collapses to the water surface
    c = BiomeClassifier(PlanetParameters(temperature=100.0, water=0.5), radius=1.0,
                        min_height=0.0, dh=0.0, rng=ScriptedRandom())
    for lat in (-1.5, -0.7, 0.0, 0.7, 1.5):
        assert c.classify(1.0, lat) == (*BIOME_COLORS['water'], 1.0)


def test_palette_colors():
    assert color_for_biome(Biome.SAND) == (0.761, 0.698, 0.502)
    assert color_for_biome(Biome.SNOW) == (1.0, 0.98, 0.98)
    assert make().classify(1.05, 0.0) == (0.0, 154.0 / 255.0, 23.0 / 255.0, 1.0)

"""Per-vertex biome classification by elevation, latitude and temperature.

The classifier is an ordered decision table: the first matching row wins
and later rows never re-check earlier conditions:

1. polar band (randomised snow / ice shelf / open water)
2. below water level      → water
3. below beach level      → sand (terrestrial only)
4. above snow line        → snow
5. otherwise              → grass, or a latitude-banded base tint
"""

import logging
import math
import random
from enum import Enum

from .constants import (
    BIOME_COLORS,
    EQUATOR_TEMP_OFFSET_C,
    SNOW_COEFF_PER_DEGREE,
    SNOW_COEFF_CAP,
    SAND_BAND_FRACTION,
    POLAR_LATITUDE,
    POLAR_DRAW_EXPONENT,
    ICE_SHELF_DRAW_EXPONENT,
    RANDOM_DRAW_BUCKETS,
)
from .models import PlanetParameters
from .noise_field import band_noise as _default_band_noise

logger = logging.getLogger(__name__)


class Biome(str, Enum):
    WATER = "water"
    ICE_SHELF = "ice_shelf"
    SAND = "sand"
    SNOW = "snow"
    GRASS = "grass"
    TINT = "tint"


def color_for_biome(b: Biome) -> tuple:
    """Return the RGB color for a fixed-palette biome."""
    return BIOME_COLORS[b.value]


class BiomeClassifier:
    """Map an elevated lattice point to a biome and RGBA color.

    Parameters
    ----------
    params : PlanetParameters
        Temperature, water fraction, terrain scale, terrestrial flag and tint.
    radius : float
        Display radius of the undisplaced sphere.
    min_height, dh : float
        Heightmap minimum and range; thresholds are scaled by both.
    rng : random.Random, optional
        Source for the polar-band draws.  Pass a seeded instance for
        reproducible meshes.
    band_noise : callable, optional
        ``f(x) -> float`` used for the non-terrestrial latitude banding.
    """

    def __init__(self, params: PlanetParameters, radius: float,
                 min_height: float, dh: float,
                 rng: random.Random | None = None, band_noise=None):
        self.params = params
        self.radius = radius
        self.min_height = min_height
        self.dh = dh
        self.rng = rng if rng is not None else random.Random()
        self.band_noise = band_noise or _default_band_noise

        K = params.terrain_scale
        self.water_height = (min_height + params.water * dh) * K

    # ── Thresholds ──────────────────────────────────────────────────────

    def local_temperature(self, latitude: float) -> float:
        """Linear falloff of 1 °C per degree away from the equator."""
        return (self.params.temperature + EQUATOR_TEMP_OFFSET_C) - math.degrees(abs(latitude))

    def snow_height(self, latitude: float) -> float:
        coeff = SNOW_COEFF_PER_DEGREE * self.local_temperature(latitude)
        if coeff > SNOW_COEFF_CAP:
            coeff = SNOW_COEFF_CAP
        return (self.min_height + coeff * self.dh) * self.params.terrain_scale

    def sand_height(self, snow_height: float) -> float:
        return self.water_height + (snow_height - self.water_height) * SAND_BAND_FRACTION

    def _draw(self) -> float:
        return self.rng.randrange(RANDOM_DRAW_BUCKETS) * 0.01

    # ── Classification ──────────────────────────────────────────────────

    def classify_biome(self, adj_radius: float, latitude: float) -> Biome:
        """Pick the biome for a point at ``adj_radius`` (pre-smoothing)."""
        p = self.params
        abs_lat = abs(latitude)
        has_water = p.water > 0.0

        snow_h = self.snow_height(latitude)
        sand_h = self.sand_height(snow_h)

        # Polar band: (|lat| - 45°) past the mean temperature, thinned randomly
        # toward its equatorward edge.  Short-circuit order fixes draw count.
        excess = max(0.0, abs_lat - (POLAR_LATITUDE + math.radians(p.temperature)))
        if (math.degrees(abs_lat - POLAR_LATITUDE) > p.temperature
                and self._draw() < excess ** POLAR_DRAW_EXPONENT
                and has_water):
            if adj_radius > self.radius + self.water_height:
                return Biome.SNOW
            if self._draw() < excess ** ICE_SHELF_DRAW_EXPONENT:
                return Biome.ICE_SHELF
            return Biome.WATER

        if adj_radius <= self.radius + self.water_height and has_water:
            return Biome.WATER
        if adj_radius < self.radius + sand_h and p.terrestrial:
            return Biome.SAND
        if adj_radius > self.radius + snow_h and has_water:
            return Biome.SNOW
        if p.terrestrial:
            return Biome.GRASS
        return Biome.TINT

    def classify(self, adj_radius: float, latitude: float) -> tuple:
        """Return the (r, g, b, a) color for a lattice point."""
        biome = self.classify_biome(adj_radius, latitude)
        if biome is Biome.TINT:
            n = self.band_noise(latitude * 2)
            p = self.params
            return (p.red + n, p.green + n, p.blue + n, 1.0)
        r, g, b = color_for_biome(biome)
        return (r, g, b, 1.0)

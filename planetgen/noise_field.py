"""Octave ("fractal") noise sampling over 3-D directions."""

import logging

import numpy as np
from noise import pnoise1, pnoise3

from .constants import DEFAULT_OCTAVES, MAX_OCTAVE_FREQUENCY

logger = logging.getLogger(__name__)


class NoiseField:
    """Finite fractal sum of a 3-D gradient-noise primitive.

    Octave ``k`` samples ``primitive(direction * 2**k)`` weighted by
    ``0.5**k``.  Octaves whose frequency would exceed 32 contribute nothing,
    so the output stays within roughly twice the primitive's range.

    Parameters
    ----------
    primitive : callable, optional
        ``f(x, y, z) -> float``.  Defaults to Perlin noise from the
        ``noise`` package with the given ``base`` permutation offset.
    octaves : int
        Number of octaves to accumulate (capped by the frequency limit).
    base : int
        Permutation offset passed to ``pnoise3`` when no primitive is given.
    """

    def __init__(self, primitive=None, octaves: int = DEFAULT_OCTAVES, base: int = 0):
        if primitive is None:
            def primitive(x, y, z):
                return pnoise3(x, y, z, base=base)
        self.primitive = primitive
        self.octaves = octaves

    def sample(self, direction) -> float:
        x, y, z = direction
        total = 0.0
        frequency = 1.0
        amplitude = 1.0
        for _ in range(self.octaves):
            if frequency > MAX_OCTAVE_FREQUENCY:
                break
            total += self.primitive(x * frequency, y * frequency, z * frequency) * amplitude
            frequency *= 2.0
            amplitude *= 0.5
        return total

    def sample_many(self, directions: np.ndarray) -> np.ndarray:
        """Sample an (n, 3) array of directions, returning an (n,) array."""
        directions = np.asarray(directions, dtype=np.float64).reshape(-1, 3)
        out = np.empty(len(directions), dtype=np.float64)
        for k, d in enumerate(directions):
            out[k] = self.sample(d)
        return out


def band_noise(x: float) -> float:
    """Single-octave 1-D noise used for latitude banding on gas/rock worlds."""
    return pnoise1(x)

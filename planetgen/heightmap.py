"""Height-field sampling on the planet's latitude/longitude lattice.

Provides:
1. Stack/sector angles for every lattice point
2. Unit-sphere lattice directions
3. A HeightMap of octave-noise samples with its observed range
"""

import logging
import math
import time
from dataclasses import dataclass

import numpy as np

from .constants import DEFAULT_RESOLUTION_SCALE
from .models import Tessellation
from .noise_field import NoiseField

logger = logging.getLogger(__name__)


def lattice_angles(tess: Tessellation):
    """Return (stack_angles, sector_angles) as 1-D arrays.

    Stack angles run from +pi/2 (north pole) down to -pi/2; sector angles
    from 0 to 2*pi inclusive, so the last column closes the seam.
    """
    stack_step = math.pi / tess.stack_count
    sector_step = 2 * math.pi / tess.sector_count
    stack_angles = math.pi / 2 - np.arange(tess.rows) * stack_step
    sector_angles = np.arange(tess.columns) * sector_step
    return stack_angles, sector_angles


def unit_lattice(tess: Tessellation) -> np.ndarray:
    """Unit-sphere position of every lattice point, shape (rows * columns, 3)."""
    stack_angles, sector_angles = lattice_angles(tess)
    sa, se = np.meshgrid(stack_angles, sector_angles, indexing='ij')  # (rows, cols)
    xy = np.cos(sa)
    dirs = np.empty((tess.lattice_size, 3), dtype=np.float64)
    dirs[:, 0] = (xy * np.cos(se)).ravel()
    dirs[:, 1] = (xy * np.sin(se)).ravel()
    dirs[:, 2] = np.sin(sa).ravel()
    return dirs


@dataclass
class HeightMap:
    """Raw noise sample per lattice point, flat row-major by stack."""
    heights: np.ndarray
    sector_count: int
    stack_count: int
    min_height: float = 0.0
    max_height: float = 0.0

    @property
    def dh(self) -> float:
        return self.max_height - self.min_height

    @property
    def columns(self) -> int:
        return self.sector_count + 1

    def index(self, i: int, j: int) -> int:
        return i * self.columns + j

    def __getitem__(self, key):
        i, j = key
        return self.heights[self.index(i, j)]

    def as_grid(self) -> np.ndarray:
        """Read-only (stack_count+1, sector_count+1) view of the samples."""
        grid = self.heights.reshape(self.stack_count + 1, self.columns)
        grid.flags.writeable = False
        return grid


def build_heightmap(tess: Tessellation, noise_field: NoiseField,
                    resolution_scale: float = DEFAULT_RESOLUTION_SCALE) -> HeightMap:
    """Sample octave noise at every lattice point.

    Directions are taken on the unit sphere and multiplied by
    ``resolution_scale`` before sampling.  The running min/max start at
    zero, so ``min_height <= 0 <= max_height`` always holds.
    """
    t0 = time.perf_counter()
    dirs = unit_lattice(tess) * resolution_scale
    heights = noise_field.sample_many(dirs)

    min_height = min(0.0, float(heights.min()))
    max_height = max(0.0, float(heights.max()))

    heights.flags.writeable = False
    hm = HeightMap(heights=heights,
                   sector_count=tess.sector_count,
                   stack_count=tess.stack_count,
                   min_height=min_height,
                   max_height=max_height)
    logger.debug(f"Heightmap sampled in {time.perf_counter() - t0:.2f}s")
    logger.info(f"Heightmap: {tess.rows}x{tess.columns}, "
                f"min={min_height:.3f}, max={max_height:.3f}, dH={hm.dh:.3f}")
    return hm

"""Data classes and path management."""

import logging
import pathlib
from dataclasses import dataclass

from .constants import (
    OUTPUT_DIR,
    MIN_SECTOR_COUNT,
    MIN_STACK_COUNT,
    DEFAULT_SECTOR_COUNT,
    DEFAULT_STACK_COUNT,
    DEFAULT_DISPLAY_RADIUS,
)

logger = logging.getLogger(__name__)


class PathManager:
    """Manage paths relative to the planetgen output directory."""

    @staticmethod
    def get_output_path(filename: str) -> pathlib.Path:
        """Get the output file path, creating the output directory if needed."""
        path = pathlib.Path(filename)
        if path.is_absolute():
            return path
        OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        return OUTPUT_DIR / path


@dataclass(frozen=True)
class PlanetParameters:
    """Physical description of a planet.

    Defaults describe the Earth: polar radius, mass and sidereal day.
    """
    radius: float = 6357000.0       # m
    mass: float = 5.9722e24         # kg
    day: float = 86164.0            # sidereal rotation period (s)
    terrain_scale: float = 0.1      # K, height displacement per unit noise
    temperature: float = 15.0       # mean surface temperature (°C)
    water: float = 0.57             # water level as a fraction of the height range
    terrestrial: bool = True
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    @property
    def base_color(self) -> tuple:
        return (self.red, self.green, self.blue)


@dataclass
class Tessellation:
    """Lat/long grid resolution plus the mesh-space display radius."""
    radius: float = DEFAULT_DISPLAY_RADIUS
    sector_count: int = DEFAULT_SECTOR_COUNT
    stack_count: int = DEFAULT_STACK_COUNT

    def __post_init__(self):
        self.sector_count = int(self.sector_count)
        self.stack_count = int(self.stack_count)
        if self.sector_count < MIN_SECTOR_COUNT:
            logger.debug(f"Clamping sector count {self.sector_count} → {MIN_SECTOR_COUNT}")
            self.sector_count = MIN_SECTOR_COUNT
        if self.stack_count < MIN_STACK_COUNT:
            logger.debug(f"Clamping stack count {self.stack_count} → {MIN_STACK_COUNT}")
            self.stack_count = MIN_STACK_COUNT

    @property
    def columns(self) -> int:
        """Lattice points per stack (the seam column is stored twice)."""
        return self.sector_count + 1

    @property
    def rows(self) -> int:
        return self.stack_count + 1

    @property
    def lattice_size(self) -> int:
        return self.rows * self.columns

    @property
    def triangle_count(self) -> int:
        """Two cap rows of one triangle per sector, two per sector elsewhere."""
        return 2 * self.sector_count + 2 * self.sector_count * (self.stack_count - 2)

"""Configuration constants, paths, and logging setup."""

import os
import math
import pathlib
import logging

from dotenv import load_dotenv

# ── Physics ──────────────────────────────────────────────────────────────
G = 6.674e-11  # gravitational constant (m^3 / kg*s^2)

# ── Tessellation ─────────────────────────────────────────────────────────
MIN_SECTOR_COUNT = 3
MIN_STACK_COUNT = 2

DEFAULT_SECTOR_COUNT = 36
DEFAULT_STACK_COUNT = 18
DEFAULT_DISPLAY_RADIUS = 1.0

# ── Terrain noise ────────────────────────────────────────────────────────
# Spatial frequency applied to unit-sphere directions before sampling, so
# terrain feature size does not depend on the display radius.
DEFAULT_RESOLUTION_SCALE = 2.0

# Octaves at frequency 1, 2, 4, 8, 16, 32; anything past 32 contributes 0.
DEFAULT_OCTAVES = 6
MAX_OCTAVE_FREQUENCY = 32.0

# Face normals shorter than this are treated as degenerate (zero vector).
NORMAL_EPSILON = 1e-6

# ── Biome classification ────────────────────────────────────────────────
# Temperature at the equator is mean + offset, falling 1 °C per degree of latitude.
EQUATOR_TEMP_OFFSET_C = 45.0
SNOW_COEFF_PER_DEGREE = 0.85 / 15.0
SNOW_COEFF_CAP = 0.91          # cap snow so it still appears at lower latitudes
SAND_BAND_FRACTION = 0.08      # beach band as a fraction of water→snow span
POLAR_LATITUDE = math.pi / 4   # polar band starts this far from the equator
POLAR_DRAW_EXPONENT = 0.25
ICE_SHELF_DRAW_EXPONENT = 0.9
RANDOM_DRAW_BUCKETS = 50       # draws are randrange(50) * 0.01 → [0, 0.49]

BIOME_COLORS = {
    'water':     (0.0, 94.0 / 255.0, 184.0 / 255.0),
    'ice_shelf': (180.0 / 255.0, 207.0 / 255.0, 250.0 / 255.0),
    'sand':      (0.761, 0.698, 0.502),
    'snow':      (1.0, 0.98, 0.98),
    'grass':     (0.0, 154.0 / 255.0, 23.0 / 255.0),
}

# ── Render buffers ──────────────────────────────────────────────────────
FLOATS_PER_POSITION = 3
FLOATS_PER_NORMAL = 3
FLOATS_PER_COLOR = 4
INTERLEAVED_FLOATS = FLOATS_PER_POSITION + FLOATS_PER_NORMAL + FLOATS_PER_COLOR
INTERLEAVED_STRIDE = INTERLEAVED_FLOATS * 4  # bytes (float32)

# Load environment variables
load_dotenv()

# Configure base paths
BASE_DIR = pathlib.Path(__file__).parent.parent.absolute()
OUTPUT_DIR = pathlib.Path(os.environ.get("PLANETGEN_OUTPUT_DIR", BASE_DIR / "output"))

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default


# CLI defaults: a 512 x 256 lattice for exported meshes
CLI_SECTOR_COUNT = _env_int("PLANETGEN_SECTORS", 512)
CLI_STACK_COUNT = _env_int("PLANETGEN_STACKS", 256)

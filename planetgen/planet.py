"""Planet: thin orchestrator that delegates to focused modules."""

import logging
import random
import time

import numpy as np

from .biome import BiomeClassifier
from .constants import (
    DEFAULT_DISPLAY_RADIUS,
    DEFAULT_SECTOR_COUNT,
    DEFAULT_STACK_COUNT,
    DEFAULT_RESOLUTION_SCALE,
    INTERLEAVED_STRIDE,
)
from .heightmap import HeightMap, build_heightmap
from .mesh import MeshBuffers, MeshBuilder
from .models import PlanetParameters, Tessellation
from .noise_field import NoiseField
from .packing import interleave
from . import physics

logger = logging.getLogger(__name__)

_FLOAT_SIZE = np.dtype(np.float32).itemsize
_INDEX_SIZE = np.dtype(np.uint32).itemsize


class Planet:
    def __init__(self, params: PlanetParameters | None = None,
                 radius: float = DEFAULT_DISPLAY_RADIUS,
                 sector_count: int = DEFAULT_SECTOR_COUNT,
                 stack_count: int = DEFAULT_STACK_COUNT,
                 seed: int | None = None,
                 noise_field: NoiseField | None = None,
                 band_noise=None,
                 resolution_scale: float = DEFAULT_RESOLUTION_SCALE):
        """
        params: physical description; defaults to an Earth-like planet.
        radius, sector_count, stack_count: mesh-space size and lattice resolution.
        seed: fixes the polar-band random draws so rebuilds are reproducible.
        noise_field, band_noise: terrain and latitude-banding noise sources.
        resolution_scale: spatial frequency of terrain features.
        """
        self.params = params if params is not None else PlanetParameters()
        self.seed = seed
        self.noise_field = noise_field if noise_field is not None else NoiseField()
        self.band_noise = band_noise
        self.resolution_scale = resolution_scale

        self.tess = None
        self._heightmap = None
        self._buffers = MeshBuffers.empty()
        self._interleaved = np.zeros(0, dtype=np.float32)
        self._oblateness = physics.oblateness(self.params)

        self.set(radius, sector_count, stack_count)

    # ── Setters ─────────────────────────────────────────────────────────

    def set(self, radius: float, sector_count: int, stack_count: int) -> None:
        """Replace geometry and rebuild everything from the heightmap down."""
        self.tess = Tessellation(radius=radius,
                                 sector_count=sector_count,
                                 stack_count=stack_count)
        self._heightmap = build_heightmap(self.tess, self.noise_field,
                                          self.resolution_scale)
        self._build()

    def set_radius(self, radius: float) -> None:
        if radius != self.tess.radius:
            self.set(radius, self.tess.sector_count, self.tess.stack_count)

    def set_sector_count(self, sector_count: int) -> None:
        if sector_count != self.tess.sector_count:
            self.set(self.tess.radius, sector_count, self.tess.stack_count)

    def set_stack_count(self, stack_count: int) -> None:
        if stack_count != self.tess.stack_count:
            self.set(self.tess.radius, self.tess.sector_count, stack_count)

    # ── Build ───────────────────────────────────────────────────────────

    def _make_rng(self) -> random.Random:
        # Fresh source per build so identical inputs give identical meshes
        return random.Random(self.seed) if self.seed is not None else random.Random()

    def _build(self) -> None:
        t0 = time.perf_counter()
        hm = self._heightmap
        classifier = BiomeClassifier(self.params, self.tess.radius,
                                     hm.min_height, hm.dh,
                                     rng=self._make_rng(),
                                     band_noise=self.band_noise)
        builder = MeshBuilder(self.params, self.tess, hm, classifier,
                              bulge=self._oblateness)
        buffers = builder.build()
        self._interleaved = interleave(buffers.vertices, buffers.normals, buffers.colors)
        self._interleaved.flags.writeable = False
        self._buffers = buffers.freeze()
        logger.debug(f"Planet rebuilt in {time.perf_counter() - t0:.2f}s")

    # ── Geometry ────────────────────────────────────────────────────────

    @property
    def radius(self) -> float:
        return self.tess.radius

    @property
    def sector_count(self) -> int:
        return self.tess.sector_count

    @property
    def stack_count(self) -> int:
        return self.tess.stack_count

    @property
    def heightmap(self) -> HeightMap:
        return self._heightmap

    @property
    def oblateness(self) -> float:
        """Equatorial bulge added to the xy radius of every vertex."""
        return self._oblateness

    # ── Buffers (read-only views, replaced on rebuild) ──────────────────

    @property
    def vertices(self) -> np.ndarray:
        return self._buffers.vertices

    @property
    def normals(self) -> np.ndarray:
        return self._buffers.normals

    @property
    def colors(self) -> np.ndarray:
        return self._buffers.colors

    @property
    def indices(self) -> np.ndarray:
        return self._buffers.indices

    @property
    def line_indices(self) -> np.ndarray:
        return self._buffers.line_indices

    @property
    def interleaved_vertices(self) -> np.ndarray:
        return self._interleaved

    @property
    def interleaved_stride(self) -> int:
        """Bytes between consecutive interleaved records."""
        return INTERLEAVED_STRIDE

    # ── Counts and sizes ────────────────────────────────────────────────

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3

    @property
    def normal_count(self) -> int:
        return len(self.normals) // 3

    @property
    def color_count(self) -> int:
        return len(self.colors) // 4

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def line_index_count(self) -> int:
        return len(self.line_indices)

    @property
    def triangle_count(self) -> int:
        return self.index_count // 3

    @property
    def interleaved_vertex_count(self) -> int:
        return self.vertex_count

    @property
    def vertex_size(self) -> int:
        return len(self.vertices) * _FLOAT_SIZE

    @property
    def normal_size(self) -> int:
        return len(self.normals) * _FLOAT_SIZE

    @property
    def color_size(self) -> int:
        return len(self.colors) * _FLOAT_SIZE

    @property
    def index_size(self) -> int:
        return len(self.indices) * _INDEX_SIZE

    @property
    def line_index_size(self) -> int:
        return len(self.line_indices) * _INDEX_SIZE

    @property
    def interleaved_vertex_size(self) -> int:
        return len(self._interleaved) * _FLOAT_SIZE

    # ── Debug ───────────────────────────────────────────────────────────

    def describe(self) -> str:
        return ("===== Planet =====\n"
                f"        Radius: {self.radius}\n"
                f"  Sector Count: {self.sector_count}\n"
                f"   Stack Count: {self.stack_count}\n"
                f"Triangle Count: {self.triangle_count}\n"
                f"   Index Count: {self.index_count}\n"
                f"  Vertex Count: {self.vertex_count}\n"
                f"  Normal Count: {self.normal_count}\n"
                f"   Color Count: {self.color_count}")

    def log_summary(self) -> None:
        for line in self.describe().splitlines():
            logger.info(line)

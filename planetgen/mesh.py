"""Planet surface mesh: vertex placement and flat-shaded triangulation.

Lattice vertices are placed on the displaced, oblate sphere and colored by
biome; each stack row is then turned into independent triangles so every
face carries its own normal.

Cell corners, viewed from outside with north up::

    v1--v3      i   (top, toward +z)
    |    |
    v2--v4      i+1

The first stack emits (v1, v2, v4), the last stack (v1, v2, v3) and every
other stack a quad v1-v2-v3-v4 split into (v1, v2, v3) and (v3, v2, v4).
"""

import logging
import time
from dataclasses import dataclass

import numpy as np

from .biome import BiomeClassifier
from .constants import NORMAL_EPSILON
from .heightmap import HeightMap, lattice_angles
from .models import PlanetParameters, Tessellation

logger = logging.getLogger(__name__)


@dataclass
class MeshBuffers:
    """Flat render buffers.

    ``vertices``/``normals`` hold 3 floats and ``colors`` 4 floats per
    flat-shaded vertex.  ``indices`` are triangle triples and
    ``line_indices`` wireframe pairs, both into the flat vertex list.
    """
    vertices: np.ndarray
    normals: np.ndarray
    colors: np.ndarray
    indices: np.ndarray
    line_indices: np.ndarray

    @classmethod
    def empty(cls) -> "MeshBuffers":
        f = np.zeros(0, dtype=np.float32)
        u = np.zeros(0, dtype=np.uint32)
        return cls(f, f.copy(), f.copy(), u, u.copy())

    def freeze(self) -> "MeshBuffers":
        for arr in (self.vertices, self.normals, self.colors,
                    self.indices, self.line_indices):
            arr.flags.writeable = False
        return self


def face_normals(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    """Unit normals of triangles (a, b, c), each an (n, 3) array.

    Computed as (b - a) x (c - a).  Triangles whose cross product is no
    longer than ``NORMAL_EPSILON`` get a zero normal.
    """
    n = np.cross(b - a, c - a)
    length = np.linalg.norm(n, axis=-1)
    out = np.zeros_like(n)
    ok = length > NORMAL_EPSILON
    out[ok] = n[ok] / length[ok, None]
    return out


def place_vertices(heightmap: HeightMap, tess: Tessellation,
                   params: PlanetParameters, bulge: float):
    """Displace the lattice by terrain height and equatorial bulge.

    Returns
    -------
    positions : np.ndarray  — (lattice_size, 3) final vertex positions
    adj_radius : np.ndarray — (lattice_size,) radius before water smoothing
    latitudes : np.ndarray  — (lattice_size,) stack angle of each point
    """
    K = params.terrain_scale
    raw = heightmap.heights
    radius = tess.radius

    adj_radius = radius + raw * K
    water_surface = radius + (heightmap.min_height + heightmap.dh * params.water) * K
    # Underwater terrain is flattened toward the surface by a second factor of K
    placed = np.where(adj_radius < water_surface,
                      water_surface + raw * K ** 2,
                      adj_radius)

    stack_angles, sector_angles = lattice_angles(tess)
    sa, se = np.meshgrid(stack_angles, sector_angles, indexing='ij')
    sa = sa.ravel()
    se = se.ravel()

    # Bulge widens the xy extent only; poles keep the undistorted radius
    xy = (placed + bulge) * np.cos(sa)
    positions = np.empty((tess.lattice_size, 3), dtype=np.float64)
    positions[:, 0] = xy * np.cos(se)
    positions[:, 1] = xy * np.sin(se)
    positions[:, 2] = placed * np.sin(sa)
    return positions, adj_radius, sa


# ── Row layouts ─────────────────────────────────────────────────────────
# corners: which of (v1, v2, v3, v4) are emitted, in order
# triangles / lines: offsets into the emitted corners of one cell
_FIRST_STACK = {
    'corners': (0, 1, 3),
    'triangles': (0, 1, 2),
    'lines': (0, 1),
}
_LAST_STACK = {
    'corners': (0, 1, 2),
    'triangles': (0, 1, 2),
    'lines': (0, 1, 0, 2),
}
_BODY_STACK = {
    'corners': (0, 1, 2, 3),
    'triangles': (0, 1, 2, 2, 1, 3),
    'lines': (0, 1, 0, 2),
}


class MeshBuilder:
    """Build flat-shaded render buffers for one planet configuration."""

    def __init__(self, params: PlanetParameters, tess: Tessellation,
                 heightmap: HeightMap, classifier: BiomeClassifier,
                 bulge: float = 0.0):
        self.params = params
        self.tess = tess
        self.heightmap = heightmap
        self.classifier = classifier
        self.bulge = bulge

    def lattice_vertices(self):
        """Positions (n, 3) and RGBA colors (n, 4) of every lattice point."""
        positions, adj_radius, latitudes = place_vertices(
            self.heightmap, self.tess, self.params, self.bulge)

        # Sequential: the classifier's random draws follow lattice order
        colors = np.empty((len(positions), 4), dtype=np.float64)
        classify = self.classifier.classify
        for k in range(len(positions)):
            colors[k] = classify(adj_radius[k], latitudes[k])
        return positions, colors

    def _row_layout(self, i: int) -> dict:
        if i == 0:
            return _FIRST_STACK
        if i == self.tess.stack_count - 1:
            return _LAST_STACK
        return _BODY_STACK

    def triangulate(self, positions: np.ndarray, colors: np.ndarray) -> MeshBuffers:
        """Emit independent per-face vertices for every stack row."""
        S = self.tess.sector_count
        cols = self.tess.columns
        sectors = np.arange(S)

        out_v, out_n, out_c, out_i, out_l = [], [], [], [], []
        base = 0
        for i in range(self.tess.stack_count):
            top = i * cols + sectors
            bottom = (i + 1) * cols + sectors
            cell = (top, bottom, top + 1, bottom + 1)  # v1, v2, v3, v4

            layout = self._row_layout(i)
            ids = [cell[c] for c in layout['corners']]
            per_cell = len(ids)

            verts = np.stack([positions[c] for c in ids], axis=1)   # (S, per_cell, 3)
            cols_rgba = np.stack([colors[c] for c in ids], axis=1)  # (S, per_cell, 4)

            # One normal per cell from its first three emitted corners
            n = face_normals(verts[:, 0], verts[:, 1], verts[:, 2])
            nrm = np.repeat(n[:, None, :], per_cell, axis=1)

            k = base + sectors * per_cell
            tris = k[:, None] + np.asarray(layout['triangles'])
            lines = k[:, None] + np.asarray(layout['lines'])

            out_v.append(verts.reshape(-1))
            out_n.append(nrm.reshape(-1))
            out_c.append(cols_rgba.reshape(-1))
            out_i.append(tris.reshape(-1))
            out_l.append(lines.reshape(-1))
            base += S * per_cell

        return MeshBuffers(
            vertices=np.concatenate(out_v).astype(np.float32),
            normals=np.concatenate(out_n).astype(np.float32),
            colors=np.concatenate(out_c).astype(np.float32),
            indices=np.concatenate(out_i).astype(np.uint32),
            line_indices=np.concatenate(out_l).astype(np.uint32),
        )

    def build(self) -> MeshBuffers:
        t0 = time.perf_counter()
        positions, colors = self.lattice_vertices()
        t1 = time.perf_counter()
        buffers = self.triangulate(positions, colors)
        t2 = time.perf_counter()

        logger.debug(f"Lattice placement+biomes {t1 - t0:.2f}s, "
                     f"triangulation {t2 - t1:.2f}s")
        logger.info(f"Planet mesh: {len(buffers.vertices) // 3} verts, "
                    f"{len(buffers.indices) // 3} triangles, "
                    f"{len(buffers.line_indices) // 2} wireframe lines")
        return buffers

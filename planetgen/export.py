"""Mesh export: PLY / GLB / OBJ / STL files from a built Planet.

The flat-shaded vertex list is kept as-is (``process=False``) so each
face keeps its own vertices, colors and normal.
"""

import logging
import pathlib
import time

import numpy as np
import trimesh

from .models import PathManager

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ('ply', 'glb', 'obj', 'stl')


def _rgba_uint8(colors: np.ndarray) -> np.ndarray:
    """Float RGBA (possibly outside [0, 1] for tinted worlds) → uint8 RGBA."""
    rgba = np.asarray(colors, dtype=np.float64).reshape(-1, 4)
    return np.round(np.clip(rgba, 0.0, 1.0) * 255.0).astype(np.uint8)


def to_trimesh(planet) -> trimesh.Trimesh:
    """Build a trimesh over the planet's flat vertices with vertex colors."""
    verts = np.asarray(planet.vertices, dtype=np.float64).reshape(-1, 3)
    faces = np.asarray(planet.indices, dtype=np.int64).reshape(-1, 3)
    normals = np.asarray(planet.normals, dtype=np.float64).reshape(-1, 3)

    mesh = trimesh.Trimesh(vertices=verts, faces=faces,
                           vertex_normals=normals, process=False)
    mesh.visual = trimesh.visual.ColorVisuals(
        mesh=mesh, vertex_colors=_rgba_uint8(planet.colors))
    return mesh


def wireframe_segments(planet) -> np.ndarray:
    """Wireframe line segments as an (n, 2, 3) array of endpoints."""
    verts = np.asarray(planet.vertices, dtype=np.float64).reshape(-1, 3)
    pairs = np.asarray(planet.line_indices, dtype=np.int64).reshape(-1, 2)
    return verts[pairs]


def export_planet(planet, output_path: str, scale: float = 1.0) -> dict:
    """Write the planet mesh to disk; the format follows the file suffix.

    Relative paths resolve under the output directory.  Returns a summary
    dict with the written path, face/vertex counts and file size.
    """
    t0 = time.perf_counter()
    out = PathManager.get_output_path(output_path)
    file_type = out.suffix.lstrip('.').lower()
    if file_type not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported export format '{out.suffix}' "
                         f"(expected one of {', '.join(SUPPORTED_FORMATS)})")
    out.parent.mkdir(parents=True, exist_ok=True)

    mesh = to_trimesh(planet)
    if scale != 1.0:
        mesh.apply_scale(scale)

    mesh.export(str(out), file_type=file_type)

    elapsed = time.perf_counter() - t0
    size_mb = out.stat().st_size / 1024 / 1024
    logger.info(f"{out.name}: {len(mesh.faces)} faces, "
                f"{len(mesh.vertices)} vertices, {size_mb:.1f} MB, {elapsed:.1f}s")
    return {
        'output_path': str(pathlib.Path(out).resolve()),
        'faces': len(mesh.faces),
        'vertices': len(mesh.vertices),
        'size_mb': round(size_mb, 2),
        'elapsed_seconds': round(elapsed, 1),
    }

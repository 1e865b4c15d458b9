"""Interleaved vertex buffer packing for direct GPU upload."""

import numpy as np

from .constants import (
    FLOATS_PER_POSITION,
    FLOATS_PER_NORMAL,
    FLOATS_PER_COLOR,
    INTERLEAVED_FLOATS,
)


def interleave(vertices, normals, colors) -> np.ndarray:
    """Pack flat buffers into ``[px py pz nx ny nz r g b a]`` records.

    Returns a flat float32 array of ``INTERLEAVED_FLOATS`` per vertex, in
    the same vertex order as the inputs.
    """
    pos = np.asarray(vertices, dtype=np.float32).reshape(-1, FLOATS_PER_POSITION)
    nrm = np.asarray(normals, dtype=np.float32).reshape(-1, FLOATS_PER_NORMAL)
    col = np.asarray(colors, dtype=np.float32).reshape(-1, FLOATS_PER_COLOR)
    if not (len(pos) == len(nrm) == len(col)):
        raise ValueError(f"Buffer length mismatch: {len(pos)} positions, "
                         f"{len(nrm)} normals, {len(col)} colors")

    out = np.empty((len(pos), INTERLEAVED_FLOATS), dtype=np.float32)
    out[:, 0:3] = pos
    out[:, 3:6] = nrm
    out[:, 6:10] = col
    return out.ravel()

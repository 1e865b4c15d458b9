"""Time each component of a planet build."""

import logging
import time
import sys
import os
import random

# Ensure the project root is on the path
sys.path.insert(0, os.path.dirname(__file__))

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

from planetgen.biome import BiomeClassifier
from planetgen.heightmap import build_heightmap
from planetgen.mesh import MeshBuilder
from planetgen.models import Tessellation
from planetgen.noise_field import NoiseField
from planetgen.packing import interleave
from planetgen.physics import oblateness
from planetgen.scene import load_scene


def timed_build(scene: str, sectors: int = 512, stacks: int = 256, seed: int = 0):
    params = load_scene(scene, rng=random.Random(seed))
    tess = Tessellation(sector_count=sectors, stack_count=stacks)
    timings = {}

    # Phase 1: octave noise over the lattice
    t0 = time.perf_counter()
    hm = build_heightmap(tess, NoiseField())
    timings["1. Heightmap sampling"] = time.perf_counter() - t0

    classifier = BiomeClassifier(params, tess.radius, hm.min_height, hm.dh,
                                 rng=random.Random(seed))
    builder = MeshBuilder(params, tess, hm, classifier, bulge=oblateness(params))

    # Phase 2: displaced vertices + biome colors
    t0 = time.perf_counter()
    positions, colors = builder.lattice_vertices()
    timings["2. Vertex placement + biomes"] = time.perf_counter() - t0

    # Phase 3: flat-shaded triangles and normals
    t0 = time.perf_counter()
    buffers = builder.triangulate(positions, colors)
    timings["3. Triangulation"] = time.perf_counter() - t0

    # Phase 4: interleaved render buffer
    t0 = time.perf_counter()
    interleave(buffers.vertices, buffers.normals, buffers.colors)
    timings["4. Interleaving"] = time.perf_counter() - t0

    print("\n" + "=" * 60)
    print(f"BUILD COMPLETE: {scene} ({sectors}x{stacks})")
    print("=" * 60)
    total = 0
    for label, dur in timings.items():
        print(f"  {label}: {dur:.2f}s")
        total += dur
    print(f"  TOTAL: {total:.2f}s")
    print(f"  Triangles: {len(buffers.indices) // 3}")


if __name__ == "__main__":
    scene = sys.argv[1] if len(sys.argv) > 1 else "scenes/earth.txt"
    timed_build(scene)

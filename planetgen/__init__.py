"""planetgen package: procedural planet surface meshes.

Import constants FIRST so logging and environment configuration are in
place before any other module logs.
"""

from planetgen import constants as _constants  # noqa: F401

from planetgen.models import PlanetParameters, Tessellation
from planetgen.planet import Planet

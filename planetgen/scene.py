"""Plain-text planet scene descriptions.

One directive per line, keyed by its first letter::

    R 3389.5            radius in km
    M 6.417e23          mass in kg
    D 24.6              sidereal day in hours
    S 0.08              terrain scale
    T -60               mean temperature (°C)
    W 0.0               water level fraction
    C terrestrial       rocky world with grass/sand/snow biomes
    C color 193 68 14   any other C line makes a non-terrestrial world;
    C random            "color r g b" (0-255) or "random" sets its tint

Units are converted here (km → m, hours → s); the rest of the package
works in SI units only.
"""

import dataclasses
import logging
import pathlib
import random

from .models import PlanetParameters

logger = logging.getLogger(__name__)

_KM = 1000.0
_HOUR = 3600.0


class SceneParseError(ValueError):
    """Raised when a scene directive carries an unreadable value."""


def _number(value: str, lineno: int, key: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise SceneParseError(f"line {lineno}: bad value {value!r} for '{key}'") from None


def _parse_color(args: list, lineno: int, rng: random.Random) -> dict:
    fields = {'terrestrial': bool(args) and args[-1] == 'terrestrial'}
    if args and args[-1] == 'random':
        fields['red'] = rng.randrange(100) * 0.01
        fields['green'] = rng.randrange(100) * 0.01
        fields['blue'] = rng.randrange(100) * 0.01
    elif len(args) == 4 and args[0] == 'color':
        r, g, b = (_number(a, lineno, 'C') for a in args[1:])
        fields['red'] = r / 255.0
        fields['green'] = g / 255.0
        fields['blue'] = b / 255.0
    return fields


def parse_scene(text: str, rng: random.Random | None = None,
                base: PlanetParameters | None = None) -> PlanetParameters:
    """Parse scene text into PlanetParameters.

    Lines that are blank or start with an unknown key are ignored; later
    directives override earlier ones.
    """
    rng = rng if rng is not None else random.Random()
    fields = {}

    for lineno, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue
        key, args = tokens[0][0], tokens[1:]

        if key == 'C':
            fields.update(_parse_color(args, lineno, rng))
            continue
        if key not in 'RMDSTW' or not args:
            continue

        value = _number(args[0], lineno, key)
        if key == 'R':
            fields['radius'] = value * _KM
        elif key == 'M':
            fields['mass'] = value
        elif key == 'D':
            fields['day'] = value * _HOUR
        elif key == 'S':
            fields['terrain_scale'] = value
        elif key == 'T':
            fields['temperature'] = value
        elif key == 'W':
            fields['water'] = value

    params = dataclasses.replace(base or PlanetParameters(), **fields)
    logger.info(f"Scene: R={params.radius:.0f}m, M={params.mass:.3e}kg, "
                f"D={params.day:.0f}s, S={params.terrain_scale}, "
                f"T={params.temperature}, W={params.water}, "
                f"{'terrestrial' if params.terrestrial else 'non-terrestrial'}")
    return params


def load_scene(path, rng: random.Random | None = None) -> PlanetParameters:
    """Read a scene file; a missing file yields the default terrestrial planet."""
    path = pathlib.Path(path)
    if not path.exists():
        logger.warning(f"Unable to open scene file \"{path}\", "
                       f"generating terrestrial planet instead")
        return PlanetParameters()
    return parse_scene(path.read_text(), rng=rng)

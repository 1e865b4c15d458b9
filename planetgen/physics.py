"""Rotation-driven oblateness of a planet."""

import logging
import math

from .constants import G
from .models import PlanetParameters

logger = logging.getLogger(__name__)


def angular_velocity(day: float) -> float:
    """Angular velocity (rad/s) for a sidereal rotation period in seconds."""
    return 2 * math.pi / day


def oblateness(params: PlanetParameters) -> float:
    """Equatorial bulge as a fraction of the planet's radius.

    First-order centrifugal term ``R^4 w^2 / (G M)`` normalised by ``R``.
    A non-positive or non-finite rotation period, or a non-positive mass,
    gives no bulge.
    """
    R, M, day = params.radius, params.mass, params.day

    if math.isinf(day) and day > 0:
        return 0.0  # non-rotating
    if not day > 0:
        logger.warning(f"Rotation period {day!r} s is not positive, ignoring oblateness")
        return 0.0
    if not M > 0:
        logger.warning(f"Mass {M!r} kg is not positive, ignoring oblateness")
        return 0.0

    omega = angular_velocity(day)
    h = R ** 4 * omega ** 2 / (G * M)
    return h / R

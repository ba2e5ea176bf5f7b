# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Time → position mapping for Keplerian orbits.

The orbit is laid out in the horizontal X/Z plane with Y pointing up,
periapsis on +X. The ellipse is then oriented by three right-handed
rotations applied in a fixed order:

    1. about up (+Y) by the argument of periapsis
    2. about right (+X) by the inclination
    3. about up (+Y) by the longitude of the ascending node

The order defines the orientation convention of generated orbits and
must not be changed.
"""
import math

import numpy as np

from orrery.domain.kepler import solve_kepler
from orrery.domain.orbital_mechanics import OrbitParameters, OrbitalConstants

UP = (0.0, 1.0, 0.0)
RIGHT = (1.0, 0.0, 0.0)


def rotation_about_axis(axis: tuple[float, float, float], angle_rad: float) -> np.ndarray:
    """
    Right-handed 3×3 rotation matrix about a unit axis (Rodrigues).

    R = cos θ · I + sin θ · [k]× + (1 - cos θ) · k kᵀ
    """
    k = np.asarray(axis, dtype=np.float64)
    k = k / np.linalg.norm(k)
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    cross = np.array([
        [0.0, -k[2], k[1]],
        [k[2], 0.0, -k[0]],
        [-k[1], k[0], 0.0],
    ])
    return c * np.eye(3) + s * cross + (1.0 - c) * np.outer(k, k)


def orbital_plane_position(
    constants: OrbitalConstants,
    eccentric_anomaly: float,
) -> tuple[float, float, float]:
    """Unrotated position (a(cos E - e), 0, b sin E)."""
    return (
        constants.semi_major_axis * (math.cos(eccentric_anomaly) - constants.eccentricity),
        0.0,
        constants.semi_minor_axis * math.sin(eccentric_anomaly),
    )


def orient_orbit(
    vector: tuple[float, float, float],
    parameters: OrbitParameters,
) -> tuple[float, float, float]:
    """Apply argument → inclination → longitude rotations to a plane vector."""
    v = np.asarray(vector, dtype=np.float64)
    v = rotation_about_axis(UP, math.radians(parameters.argument)) @ v
    v = rotation_about_axis(RIGHT, math.radians(parameters.inclination)) @ v
    v = rotation_about_axis(UP, math.radians(parameters.longitude)) @ v
    return (float(v[0]), float(v[1]), float(v[2]))


def mean_anomaly_at(time: float, periapsis_time: float, mean_angular_motion: float) -> float:
    """M = (t - t_p) · n"""
    return (time - periapsis_time) * mean_angular_motion


def compute_orbital_position(time: float, body) -> tuple[float, float, float]:
    """
    Position of an initialized orbiting body at simulated time `time`.

    Pure: reads the body's parameters, constants and periapsis time and
    mutates nothing, so repeated calls with the same time agree exactly.

    Args:
        time: Global elapsed simulated time.
        body: Initialized OrbitingBody.

    Returns:
        (x, y, z) relative to the host centre.
    """
    constants = body.constants
    mean_anomaly = mean_anomaly_at(time, body.periapsis_time, constants.mean_angular_motion)
    eccentric_anomaly = solve_kepler(mean_anomaly, constants.eccentricity)
    plane = orbital_plane_position(constants, eccentric_anomaly)
    return orient_orbit(plane, body.parameters)


def compute_system_positions(system, time: float) -> list[tuple[float, float, float]]:
    """Positions of every body of a StarSystem at `time`, in body order."""
    return [compute_orbital_position(time, body) for body in system.bodies]

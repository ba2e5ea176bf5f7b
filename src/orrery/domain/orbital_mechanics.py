# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbital elements and derived orbital constants.

Pure derivations for elliptical orbits around a host whose
gravitational constant is normalized to 1 (mu = host mass).
No external dependencies beyond stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass

from orrery.domain.errors import ConfigurationError


def _validate_extents(apoapsis: float, periapsis: float) -> None:
    if periapsis <= 0 or apoapsis <= 0:
        raise ConfigurationError(
            f"apoapsis and periapsis must be positive, "
            f"got apoapsis={apoapsis}, periapsis={periapsis}"
        )
    if apoapsis < periapsis:
        raise ConfigurationError(
            f"apoapsis ({apoapsis}) must not be smaller than periapsis ({periapsis})"
        )


@dataclass(frozen=True)
class OrbitParameters:
    """Immutable orbital elements of one body.

    Distances are measured from the host centre, angles are in degrees.
    """
    apoapsis: float
    periapsis: float
    longitude: float = 0.0      # longitude of the ascending node
    argument: float = 0.0       # argument of periapsis
    inclination: float = 0.0

    def __post_init__(self) -> None:
        _validate_extents(self.apoapsis, self.periapsis)


@dataclass(frozen=True)
class OrbitalConstants:
    """Shape and rate of an elliptical orbit, derived once per body."""
    eccentricity: float
    semi_major_axis: float
    semi_minor_axis: float
    mean_angular_motion: float  # rad per unit of simulated time

    @property
    def orbital_period(self) -> float:
        """Time for one full revolution, 2π / n."""
        return 2.0 * math.pi / self.mean_angular_motion


def derive_orbital_constants(
    parameters: OrbitParameters,
    host_mass: float,
) -> OrbitalConstants:
    """
    Derive eccentricity, semi-axes and mean angular motion.

    e = (r_a - r_p) / (r_a + r_p)
    a = (r_p + r_a) / 2
    b = a · √(1 - e²)
    n = √(M / a³)

    Args:
        parameters: Orbital elements (only apoapsis/periapsis are used).
        host_mass: Mass of the host body, G normalized to 1.

    Returns:
        OrbitalConstants for the orbit.

    Raises:
        ConfigurationError: If apoapsis < periapsis, either is
            non-positive, or host_mass is non-positive.
    """
    apoapsis = parameters.apoapsis
    periapsis = parameters.periapsis
    _validate_extents(apoapsis, periapsis)
    if host_mass <= 0:
        raise ConfigurationError(f"host mass must be positive, got {host_mass}")

    eccentricity = (apoapsis - periapsis) / (apoapsis + periapsis)
    semi_major_axis = 0.5 * (periapsis + apoapsis)
    semi_minor_axis = semi_major_axis * math.sqrt(1.0 - eccentricity**2)
    mean_angular_motion = math.sqrt(host_mass / semi_major_axis**3)

    return OrbitalConstants(
        eccentricity=eccentricity,
        semi_major_axis=semi_major_axis,
        semi_minor_axis=semi_minor_axis,
        mean_angular_motion=mean_angular_motion,
    )

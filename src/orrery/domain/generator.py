# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Procedural star system generation.

Bodies are placed in successive radial bands around the host. Band i
spans [r_min_i, r_max_i]; the next band starts where the previous one
ended and is `band_growth_factor` times as wide at its outer edge:

    r_min_{i+1} = r_max_i
    r_max_{i+1} = growth · r_min_{i+1}

Within a band, periapsis ~ U(r_min/2, r_max/2) and
apoapsis ~ U(periapsis, r_max). This keeps nominal orbital extents ordered
and spaced but does not prove the ellipses never intersect: a low
periapsis can still bring a body close to the previous band.

All randomness comes from a numpy Generator passed in by the caller.
"""
import logging
from dataclasses import dataclass

import numpy as np

from orrery.domain.bodies import HostBody, OrbitingBody, StarSystem
from orrery.domain.errors import ConfigurationError
from orrery.domain.orbital_mechanics import OrbitParameters

logger = logging.getLogger(__name__)

DEFAULT_BAND_GROWTH_FACTOR = 1.5
DEFAULT_MIN_RADIUS = 200.0
DEFAULT_MAX_RADIUS = 500.0
MAX_LONGITUDE_DEG = 359.0

# Ranges used when a whole system is rolled from a single seed.
MIN_BODIES = 1
MAX_BODIES = 10
MIN_HOST_RADIUS = 40
MAX_HOST_RADIUS = 100


@dataclass(frozen=True)
class RadialBand:
    """Radial window [min_radius, max_radius] that one body is drawn from."""
    index: int
    min_radius: float
    max_radius: float

    @property
    def min_periapsis(self) -> float:
        return self.min_radius / 2.0

    @property
    def max_periapsis(self) -> float:
        return self.max_radius / 2.0


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable configuration for generating one star system."""
    count: int
    min_radius: float = DEFAULT_MIN_RADIUS
    max_radius: float = DEFAULT_MAX_RADIUS
    band_growth_factor: float = DEFAULT_BAND_GROWTH_FACTOR
    seed: int | None = None
    planar: bool = True
    max_inclination_deg: float = 0.0
    body_radius: float = 10.0
    body_density: float = 1.0
    periapsis_time: float = 0.0


def _validate_band_inputs(
    count: int,
    min_radius: float,
    max_radius: float,
    band_growth_factor: float,
) -> None:
    if count < 0:
        raise ConfigurationError(f"body count must be non-negative, got {count}")
    if min_radius <= 0:
        raise ConfigurationError(f"min_radius must be positive, got {min_radius}")
    if min_radius >= max_radius:
        raise ConfigurationError(
            f"min_radius ({min_radius}) must be smaller than max_radius ({max_radius})"
        )
    if band_growth_factor <= 1.0:
        raise ConfigurationError(
            f"band_growth_factor must be greater than 1, got {band_growth_factor}"
        )


def radial_bands(
    count: int,
    min_radius: float,
    max_radius: float,
    band_growth_factor: float = DEFAULT_BAND_GROWTH_FACTOR,
) -> list[RadialBand]:
    """
    Band windows for `count` bodies.

    Example: radial_bands(3, 100, 500) →
        [100, 500], [500, 750], [750, 1125]

    Raises:
        ConfigurationError: On negative count, non-positive or inverted
            radii, or a growth factor <= 1.
    """
    _validate_band_inputs(count, min_radius, max_radius, band_growth_factor)

    bands: list[RadialBand] = []
    lo, hi = float(min_radius), float(max_radius)
    for i in range(count):
        bands.append(RadialBand(index=i, min_radius=lo, max_radius=hi))
        lo = hi
        hi = band_growth_factor * lo
    return bands


def _draw_parameters(
    band: RadialBand,
    rng: np.random.Generator,
    planar: bool,
    max_inclination_deg: float,
) -> OrbitParameters:
    periapsis = float(rng.uniform(band.min_periapsis, band.max_periapsis))
    apoapsis = float(rng.uniform(periapsis, band.max_radius))
    longitude = float(rng.uniform(0.0, MAX_LONGITUDE_DEG))

    if planar:
        argument = 0.0
        inclination = 0.0
    else:
        argument = float(rng.uniform(0.0, 360.0))
        inclination = float(rng.uniform(0.0, max_inclination_deg))

    return OrbitParameters(
        apoapsis=apoapsis,
        periapsis=periapsis,
        longitude=longitude,
        argument=argument,
        inclination=inclination,
    )


def generate_orbit_parameters(
    count: int,
    min_radius: float,
    max_radius: float,
    rng: np.random.Generator,
    band_growth_factor: float = DEFAULT_BAND_GROWTH_FACTOR,
    planar: bool = True,
    max_inclination_deg: float = 0.0,
) -> list[OrbitParameters]:
    """
    Draw one set of orbital elements per radial band.

    The planar default draws exactly three values per body (periapsis,
    apoapsis, longitude) and leaves argument and inclination at zero.
    With planar=False the argument of periapsis is drawn from [0, 360)
    and the inclination from [0, max_inclination_deg).

    Args:
        count: Number of bodies (>= 0).
        min_radius: Inner edge of the first band.
        max_radius: Outer edge of the first band.
        rng: Caller-owned random generator, advanced in place.
        band_growth_factor: Outer-edge growth per band (> 1).
        planar: Keep every orbit in the reference plane.
        max_inclination_deg: Inclination ceiling for non-planar draws.

    Returns:
        List of OrbitParameters ordered from the innermost band outward.

    Raises:
        ConfigurationError: On invalid band inputs or a negative
            max_inclination_deg.
    """
    if max_inclination_deg < 0:
        raise ConfigurationError(
            f"max_inclination_deg must be non-negative, got {max_inclination_deg}"
        )
    bands = radial_bands(count, min_radius, max_radius, band_growth_factor)
    return [_draw_parameters(band, rng, planar, max_inclination_deg) for band in bands]


def generate_star_system(
    host: HostBody,
    config: GenerationConfig,
    rng: np.random.Generator | None = None,
) -> StarSystem:
    """
    Generate and initialize all bodies orbiting `host`.

    Uses `rng` when given, otherwise a fresh Generator seeded with
    config.seed. Either every body is built or an error is raised; no
    partial system is returned.

    Raises:
        ConfigurationError: On invalid configuration or host.
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)

    parameter_sets = generate_orbit_parameters(
        config.count,
        config.min_radius,
        config.max_radius,
        rng,
        band_growth_factor=config.band_growth_factor,
        planar=config.planar,
        max_inclination_deg=config.max_inclination_deg,
    )

    bodies: list[OrbitingBody] = []
    for idx, parameters in enumerate(parameter_sets):
        body = OrbitingBody(
            name=f"Body-{idx + 1}",
            radius=config.body_radius,
            density=config.body_density,
            periapsis_time=config.periapsis_time,
        )
        body.initialize(parameters, host)
        bodies.append(body)

    logger.debug(
        "Generated %d bodies around host (radius=%.6g, mass=%.6g)",
        len(bodies), host.radius, host.mass,
    )
    return StarSystem(host=host, bodies=tuple(bodies))


def random_generation_config(
    rng: np.random.Generator,
    min_bodies: int = MIN_BODIES,
    max_bodies: int = MAX_BODIES,
    **overrides,
) -> GenerationConfig:
    """Draw a body count in [min_bodies, max_bodies] and build a config."""
    if min_bodies < 0 or min_bodies > max_bodies:
        raise ConfigurationError(
            f"invalid body count range [{min_bodies}, {max_bodies}]"
        )
    count = int(rng.integers(min_bodies, max_bodies, endpoint=True))
    return GenerationConfig(count=count, **overrides)


def generate_random_star_system(
    seed: int | None = None,
    density: float = 1.0,
) -> StarSystem:
    """
    Roll a complete system from one seed.

    Host radius is an integer in [40, 100], the body count an integer in
    [1, 10], and bodies start in the [200, 500] band. The same seed
    always produces the same system.
    """
    rng = np.random.default_rng(seed)
    host_radius = float(rng.integers(MIN_HOST_RADIUS, MAX_HOST_RADIUS, endpoint=True))
    host = HostBody(radius=host_radius, density=density)
    config = random_generation_config(rng, seed=seed)
    return generate_star_system(host, config, rng=rng)

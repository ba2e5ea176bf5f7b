# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Host, orbiting body and star system models.

Mass is never stored: it is always read as density · radius³ so that a
change of radius or density is reflected immediately.
Orbital constants of an orbiting body are derived once, when the body is
initialized against its host, and are never recomputed per tick.
"""
from dataclasses import dataclass, field

from orrery.domain.errors import ConfigurationError
from orrery.domain.orbital_mechanics import (
    OrbitParameters,
    OrbitalConstants,
    derive_orbital_constants,
)
from orrery.domain.orbit_position import compute_orbital_position, compute_system_positions

DEFAULT_BODY_RADIUS = 10.0
DEFAULT_DENSITY = 1.0


class _MassiveBody:
    """Radius/density validation and derived mass shared by all bodies."""

    def __setattr__(self, name, value):
        if name in ('radius', 'density') and not value > 0:
            raise ConfigurationError(f"{name} must be positive, got {value}")
        super().__setattr__(name, value)

    @property
    def mass(self) -> float:
        """density · radius³"""
        return self.density * self.radius**3


@dataclass
class HostBody(_MassiveBody):
    """Central body (star) that the orbiting bodies revolve around."""
    radius: float
    density: float = DEFAULT_DENSITY


@dataclass
class OrbitingBody(_MassiveBody):
    """
    A body on a Keplerian orbit around a host.

    Construct, then call initialize() once before querying positions.
    The host is only read, never mutated.
    """
    name: str = ""
    radius: float = DEFAULT_BODY_RADIUS
    density: float = DEFAULT_DENSITY
    periapsis_time: float = 0.0
    _parameters: OrbitParameters | None = field(default=None, init=False, repr=False)
    _host: HostBody | None = field(default=None, init=False, repr=False, compare=False)
    _constants: OrbitalConstants | None = field(default=None, init=False, repr=False)

    def initialize(
        self,
        parameters: OrbitParameters,
        host: HostBody,
        periapsis_time: float | None = None,
    ) -> None:
        """
        Attach the body to its orbit and host and derive orbital constants.

        Calling this again re-derives the constants, e.g. after the host's
        mass changed. Nothing is modified if derivation fails.

        Raises:
            ConfigurationError: If the orbit or host mass is invalid.
        """
        constants = derive_orbital_constants(parameters, host.mass)
        self._parameters = parameters
        self._host = host
        self._constants = constants
        if periapsis_time is not None:
            self.periapsis_time = periapsis_time

    @property
    def is_initialized(self) -> bool:
        return self._constants is not None

    def _require_initialized(self) -> None:
        if self._constants is None:
            raise ConfigurationError(
                f"orbiting body {self.name!r} has not been initialized with an orbit and host"
            )

    @property
    def parameters(self) -> OrbitParameters:
        self._require_initialized()
        return self._parameters

    @property
    def host(self) -> HostBody:
        self._require_initialized()
        return self._host

    @property
    def constants(self) -> OrbitalConstants:
        self._require_initialized()
        return self._constants

    @property
    def eccentricity(self) -> float:
        return self.constants.eccentricity

    @property
    def semi_major_axis(self) -> float:
        return self.constants.semi_major_axis

    @property
    def semi_minor_axis(self) -> float:
        return self.constants.semi_minor_axis

    @property
    def mean_angular_motion(self) -> float:
        return self.constants.mean_angular_motion

    def position_at(self, time: float) -> tuple[float, float, float]:
        """Position relative to the host at simulated time `time`."""
        self._require_initialized()
        return compute_orbital_position(time, self)


@dataclass(frozen=True)
class StarSystem:
    """A host and the ordered bodies orbiting it."""
    host: HostBody
    bodies: tuple[OrbitingBody, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'bodies', tuple(self.bodies))
        for body in self.bodies:
            if not body.is_initialized:
                raise ConfigurationError(
                    f"orbiting body {body.name!r} must be initialized before joining a system"
                )
            if body.host is not self.host:
                raise ConfigurationError(
                    f"orbiting body {body.name!r} is initialized against a different host"
                )

    def __len__(self) -> int:
        return len(self.bodies)

    def positions_at(self, time: float) -> list[tuple[float, float, float]]:
        """Positions of all bodies at `time`, in body order."""
        return compute_system_positions(self, time)

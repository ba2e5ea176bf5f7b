# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Star system description serialization.

Pure conversions between StarSystem objects and plain dicts holding the
host parameters and the ordered orbit list. File formats are handled by
adapters; no json here.
"""
from orrery.domain.bodies import HostBody, OrbitingBody, StarSystem
from orrery.domain.errors import ConfigurationError
from orrery.domain.orbital_mechanics import OrbitParameters

_ORBIT_KEYS = ('apoapsis', 'periapsis', 'longitude', 'argument', 'inclination')


def format_position(pos: list[float] | tuple[float, float, float]) -> str:
    """
    Format a position as a semicolon-delimited string.

    (x, y, z) → "{x:.3f};{y:.3f};{z:.3f}"
    """
    x, y, z = pos[0], pos[1], pos[2]
    return f"{x:.3f};{y:.3f};{z:.3f}"


def orbit_to_dict(parameters: OrbitParameters) -> dict:
    return {key: getattr(parameters, key) for key in _ORBIT_KEYS}


def orbit_from_dict(data: dict) -> OrbitParameters:
    try:
        apoapsis = float(data['apoapsis'])
        periapsis = float(data['periapsis'])
    except KeyError as e:
        raise ConfigurationError(f"orbit description is missing {e.args[0]!r}") from e
    return OrbitParameters(
        apoapsis=apoapsis,
        periapsis=periapsis,
        longitude=float(data.get('longitude', 0.0)),
        argument=float(data.get('argument', 0.0)),
        inclination=float(data.get('inclination', 0.0)),
    )


def system_to_dict(system: StarSystem) -> dict:
    """
    Build the description dict of a star system.

    Returns:
        {"host": {...}, "bodies": [{..., "orbit": {...}}, ...]}
    """
    return {
        'host': {
            'radius': system.host.radius,
            'density': system.host.density,
        },
        'bodies': [
            {
                'name': body.name,
                'radius': body.radius,
                'density': body.density,
                'periapsis_time': body.periapsis_time,
                'orbit': orbit_to_dict(body.parameters),
            }
            for body in system.bodies
        ],
    }


def system_from_dict(data: dict) -> StarSystem:
    """
    Rebuild a StarSystem from its description dict.

    Every body is initialized against the rebuilt host, so orbital
    constants are derived here exactly once.

    Raises:
        ConfigurationError: On missing keys or invalid values.
    """
    try:
        host_data = data['host']
        host_radius = float(host_data['radius'])
    except KeyError as e:
        raise ConfigurationError(f"star system description is missing {e.args[0]!r}") from e
    host = HostBody(radius=host_radius, density=float(host_data.get('density', 1.0)))

    bodies: list[OrbitingBody] = []
    for idx, body_data in enumerate(data.get('bodies', [])):
        if 'orbit' not in body_data:
            raise ConfigurationError(f"body {idx} is missing its 'orbit' description")
        body = OrbitingBody(
            name=body_data.get('name') or f"Body-{idx + 1}",
            radius=float(body_data.get('radius', 10.0)),
            density=float(body_data.get('density', 1.0)),
        )
        body.initialize(
            orbit_from_dict(body_data['orbit']),
            host,
            periapsis_time=float(body_data.get('periapsis_time', 0.0)),
        )
        bodies.append(body)

    return StarSystem(host=host, bodies=tuple(bodies))

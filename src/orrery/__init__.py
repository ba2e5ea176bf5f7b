"""
Orrery

Deterministic Keplerian star systems: Newton-Raphson solution of Kepler's
Equation, time-to-position mapping with a fixed rotation order, and
seeded procedural generation of orbits in growing radial bands.
"""

from orrery.domain.errors import (
    ConfigurationError,
    DomainError,
)
from orrery.domain.orbital_mechanics import (
    OrbitParameters,
    OrbitalConstants,
    derive_orbital_constants,
)
from orrery.domain.kepler import (
    KeplerSolution,
    kepler_residual,
    solve_kepler,
    solve_kepler_detailed,
)
from orrery.domain.orbit_position import (
    compute_orbital_position,
    compute_system_positions,
    orbital_plane_position,
    orient_orbit,
    rotation_about_axis,
)
from orrery.domain.bodies import (
    HostBody,
    OrbitingBody,
    StarSystem,
)
from orrery.domain.generator import (
    GenerationConfig,
    RadialBand,
    generate_orbit_parameters,
    generate_random_star_system,
    generate_star_system,
    radial_bands,
    random_generation_config,
)
from orrery.domain.clock import (
    SimulationClock,
    sample_times,
)
from orrery.domain.serialization import (
    format_position,
    system_from_dict,
    system_to_dict,
)

__version__ = "1.0.0"

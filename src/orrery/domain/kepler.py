# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Kepler's Equation solver.

Solves M = E - e·sin(E) for the eccentric anomaly E with
Newton-Raphson iteration. Elliptical orbits only (0 <= e < 1).

Non-convergence within the iteration budget is not an error: the last
iterate is returned so a per-tick position query never blocks or
raises. Use solve_kepler_detailed to inspect convergence and residual.
"""
import logging
import math
from dataclasses import dataclass

from orrery.domain.errors import ConfigurationError, DomainError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 20
DEFAULT_REL_TOL = 1e-7
HIGH_ECCENTRICITY_THRESHOLD = 0.8
TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class KeplerSolution:
    """Result of one Kepler's Equation solve."""
    eccentric_anomaly: float
    iterations: int
    converged: bool
    residual: float  # |e·sin(E) + M - E|


def kepler_residual(eccentric_anomaly: float, mean_anomaly: float, eccentricity: float) -> float:
    """Absolute residual |e·sin(E) + M - E| of Kepler's Equation."""
    return abs(eccentricity * math.sin(eccentric_anomaly) + mean_anomaly - eccentric_anomaly)


def initial_guess(mean_anomaly: float, eccentricity: float) -> float:
    """Starting iterate: π for high eccentricity, else the mean anomaly."""
    if eccentricity > HIGH_ECCENTRICITY_THRESHOLD:
        return math.pi
    return mean_anomaly


def reduce_mean_anomaly(mean_anomaly: float) -> tuple[float, int]:
    """Split M into (M_r, k) with M = M_r + 2πk and M_r in [0, 2π]."""
    revolutions = math.floor(mean_anomaly / TWO_PI)
    return mean_anomaly - TWO_PI * revolutions, revolutions


def solve_kepler_detailed(
    mean_anomaly: float,
    eccentricity: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rel_tol: float = DEFAULT_REL_TOL,
) -> KeplerSolution:
    """
    Solve Kepler's Equation and report how the iteration went.

    M is first reduced to one revolution, M_r = M - 2πk, so the π seed
    of high-eccentricity orbits is always within half a turn of the
    root. Each step on the reduced anomaly:
        E_new = E - (e·sin(E) + M_r - E) / (e·cos(E) - 1)

    Convergence is |E_new - E| / |E_new| <= rel_tol. Once |E_new| drops
    below rel_tol the relative test is meaningless (root at E = 0) and
    |E_new - E| <= rel_tol is used instead. The returned anomaly is
    E + 2πk and the residual is taken against the unreduced M.

    A circular orbit (e = 0) returns M itself without iterating.

    Args:
        mean_anomaly: Mean anomaly M (radians, any range).
        eccentricity: Orbital eccentricity, 0 <= e < 1.
        max_iterations: Newton step budget.
        rel_tol: Relative change tolerance.

    Returns:
        KeplerSolution. When the budget is exhausted, converged is False
        and eccentric_anomaly holds the last iterate.

    Raises:
        DomainError: If eccentricity is outside [0, 1).
        ConfigurationError: If max_iterations or rel_tol is not positive.
    """
    if not 0.0 <= eccentricity < 1.0:
        raise DomainError(
            f"eccentricity must be in [0, 1) for an elliptical orbit, got {eccentricity}"
        )
    if max_iterations < 1:
        raise ConfigurationError(f"max_iterations must be positive, got {max_iterations}")
    if rel_tol <= 0:
        raise ConfigurationError(f"rel_tol must be positive, got {rel_tol}")

    if eccentricity == 0.0:
        return KeplerSolution(
            eccentric_anomaly=mean_anomaly, iterations=0, converged=True, residual=0.0,
        )

    reduced, revolutions = reduce_mean_anomaly(mean_anomaly)
    e_anomaly = initial_guess(reduced, eccentricity)

    for iteration in range(1, max_iterations + 1):
        numerator = eccentricity * math.sin(e_anomaly) + reduced - e_anomaly
        # e·cos(E) - 1 < 0 for every e < 1
        denominator = eccentricity * math.cos(e_anomaly) - 1.0
        e_new = e_anomaly - numerator / denominator

        step = abs(e_new - e_anomaly)
        change = step if abs(e_new) < rel_tol else step / abs(e_new)

        if change <= rel_tol:
            result = e_new + TWO_PI * revolutions
            return KeplerSolution(
                eccentric_anomaly=result,
                iterations=iteration,
                converged=True,
                residual=kepler_residual(result, mean_anomaly, eccentricity),
            )

        e_anomaly = e_new

    result = e_anomaly + TWO_PI * revolutions
    residual = kepler_residual(result, mean_anomaly, eccentricity)
    logger.debug(
        "Kepler solve did not converge in %d iterations (M=%.6g, e=%.6g, residual=%.3e)",
        max_iterations, mean_anomaly, eccentricity, residual,
    )
    return KeplerSolution(
        eccentric_anomaly=result,
        iterations=max_iterations,
        converged=False,
        residual=residual,
    )


def solve_kepler(
    mean_anomaly: float,
    eccentricity: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rel_tol: float = DEFAULT_REL_TOL,
) -> float:
    """Eccentric anomaly E (radians) for mean anomaly M and eccentricity e.

    Best effort: see solve_kepler_detailed for the convergence policy.
    """
    return solve_kepler_detailed(
        mean_anomaly, eccentricity,
        max_iterations=max_iterations, rel_tol=rel_tol,
    ).eccentric_anomaly

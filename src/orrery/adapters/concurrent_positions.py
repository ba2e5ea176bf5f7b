# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Concurrent position mapping over the bodies of a star system.

Each body's position is a pure function of the global time and that
body's own state, so bodies can be evaluated in any order. Uses
ThreadPoolExecutor from stdlib; results keep body order.
"""
import logging
import os
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from orrery.domain.bodies import StarSystem
from orrery.domain.orbit_position import compute_orbital_position


_log = logging.getLogger(__name__)


class ConcurrentPositionMapper:
    """
    Evaluates body positions for one tick across a thread pool.

    Args:
        max_workers: Thread pool size.
            Default: min(32, os.cpu_count() + 4) — same as Python default.
    """

    def __init__(self, max_workers: int | None = None):
        self._max_workers = max_workers or min(32, (os.cpu_count() or 1) + 4)

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def positions_at(
        self,
        system: StarSystem,
        time: float,
    ) -> list[tuple[float, float, float]]:
        """
        Positions of every body at `time`, in body order.

        `time` must already be the fully updated tick time; it is read
        by every worker and written by none.
        """
        if not system.bodies:
            return []
        workers = min(self._max_workers, len(system.bodies))
        _log.debug("Mapping %d bodies over %d workers at t=%.6g",
                   len(system.bodies), workers, time)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(
                lambda body: compute_orbital_position(time, body),
                system.bodies,
            ))

    def positions_over(
        self,
        system: StarSystem,
        times: Iterable[float],
    ) -> Iterator[list[tuple[float, float, float]]]:
        """
        Positions of every body for each time in `times`, in order.

        One thread pool serves the whole sequence; it is shut down when
        the iterator is exhausted or closed.
        """
        if not system.bodies:
            for _ in times:
                yield []
            return
        workers = min(self._max_workers, len(system.bodies))
        _log.debug("Mapping %d bodies over %d workers for a time series",
                   len(system.bodies), workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for time in times:
                yield list(executor.map(
                    lambda body, t=time: compute_orbital_position(t, body),
                    system.bodies,
                ))

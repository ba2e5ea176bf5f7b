# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV trajectory exporter.

Exports sampled body positions as CSV, one row per body per sample.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import math
import logging

logger = logging.getLogger(__name__)

from orrery.ports.export import TrajectoryExporter
from orrery.domain.bodies import StarSystem
from orrery.adapters.concurrent_positions import ConcurrentPositionMapper


_HEADER = ['body', 't', 'x', 'y', 'z', 'distance']


class CsvTrajectoryExporter(TrajectoryExporter):
    """
    Exports body positions to CSV.

    Args:
        mapper: Optional ConcurrentPositionMapper; when given, the bodies
            of each sample are evaluated in parallel on one shared pool.
    """

    def __init__(self, mapper: ConcurrentPositionMapper | None = None):
        self._mapper = mapper

    def export(
        self,
        system: StarSystem,
        path: str,
        times: list[float],
    ) -> int:
        if not system.bodies:
            logger.warning("Star system has no orbiting bodies, writing header only")
        if not times:
            logger.warning("No sample times given, writing header only")

        rows = 0
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            if self._mapper is not None:
                series = self._mapper.positions_over(system, times)
            else:
                series = (system.positions_at(t) for t in times)

            for positions, t in zip(series, times):
                for body, (x, y, z) in zip(system.bodies, positions):
                    writer.writerow([
                        body.name,
                        f'{t:.6f}',
                        f'{x:.6f}',
                        f'{y:.6f}',
                        f'{z:.6f}',
                        f'{math.sqrt(x * x + y * y + z * z):.6f}',
                    ])
                    rows += 1

        return rows

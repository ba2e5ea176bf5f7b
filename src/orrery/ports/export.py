# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for trajectory export.

Adapters implement this to write sampled body positions in various
formats.
"""
from typing import Protocol, runtime_checkable

from orrery.domain.bodies import StarSystem


@runtime_checkable
class TrajectoryExporter(Protocol):
    """Port for exporting sampled positions to file."""

    def export(
        self,
        system: StarSystem,
        path: str,
        times: list[float],
    ) -> int:
        """
        Export the position of every body at every sample time.

        Args:
            system: Star system whose bodies are sampled.
            path: Output file path.
            times: Simulated times to sample, in output order.

        Returns:
            Number of rows written (bodies × samples).
        """
        ...

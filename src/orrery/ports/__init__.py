# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for star system persistence.

Adapters implement these to handle different file formats.
"""
from typing import Protocol, runtime_checkable

from orrery.domain.bodies import StarSystem


@runtime_checkable
class StarSystemReader(Protocol):
    """Port for loading a star system description."""

    def read_system(self, path: str) -> StarSystem:
        """Read a description file and rebuild the initialized system."""
        ...


@runtime_checkable
class StarSystemWriter(Protocol):
    """Port for persisting a star system description."""

    def write_system(self, system: StarSystem, path: str) -> None:
        """Write the host parameters and ordered orbit list to a file."""
        ...

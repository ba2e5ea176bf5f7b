# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON star system file I/O adapter.

Reads and writes star system descriptions in JSON format.
"""
import json

from orrery.domain.bodies import StarSystem
from orrery.domain.serialization import system_from_dict, system_to_dict
from orrery.ports import StarSystemReader, StarSystemWriter


class JsonStarSystemReader(StarSystemReader):
    """Reads star system descriptions from JSON files."""

    def read_system(self, path: str) -> StarSystem:
        with open(path, encoding='utf-8') as f:
            return system_from_dict(json.load(f))


class JsonStarSystemWriter(StarSystemWriter):
    """Writes star system descriptions to JSON files."""

    def write_system(self, system: StarSystem, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(system_to_dict(system), f, indent=2, ensure_ascii=False)

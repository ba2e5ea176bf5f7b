# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for star system I/O, trajectory export and parallel evaluation.

External dependencies (json, csv, concurrent.futures, file I/O) are
confined to this layer.
"""
from orrery.adapters.json_io import JsonStarSystemReader, JsonStarSystemWriter
from orrery.adapters.csv_exporter import CsvTrajectoryExporter
from orrery.adapters.concurrent_positions import ConcurrentPositionMapper

__all__ = [
    "JsonStarSystemReader",
    "JsonStarSystemWriter",
    "CsvTrajectoryExporter",
    "ConcurrentPositionMapper",
]

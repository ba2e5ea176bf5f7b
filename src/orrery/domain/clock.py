# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Global simulated time.

One writer advances the clock once per tick; position queries for that
tick read `elapsed` only after the advance.
"""


class SimulationClock:
    """Monotonic accumulator of simulated time."""

    def __init__(self, elapsed: float = 0.0):
        if elapsed < 0:
            raise ValueError(f"elapsed time must be non-negative, got {elapsed}")
        self._elapsed = float(elapsed)
        self._ticks = 0

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def ticks(self) -> int:
        return self._ticks

    def advance(self, delta: float = 1.0) -> float:
        """Add `delta` (>= 0) to the clock and return the new elapsed time."""
        if delta < 0:
            raise ValueError(f"clock cannot run backwards, got delta={delta}")
        self._elapsed += delta
        self._ticks += 1
        return self._elapsed

    def reset(self) -> None:
        self._elapsed = 0.0
        self._ticks = 0


def sample_times(duration: float, step: float, start: float = 0.0) -> list[float]:
    """
    Evenly spaced sample times from `start` to `start + duration` inclusive.

    Raises:
        ValueError: If step is not positive or duration is negative.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if duration < 0:
        raise ValueError(f"duration must be non-negative, got {duration}")
    n_steps = int(duration / step + 1e-9)
    return [start + i * step for i in range(n_steps + 1)]

# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error taxonomy for the orbital engine.

Both errors subclass ValueError so callers that already guard
against bad input with ``except ValueError`` keep working.
"""


class ConfigurationError(ValueError):
    """Invalid static input detected at construction or generation time."""


class DomainError(ValueError):
    """Input outside the mathematical domain of a numerical method."""

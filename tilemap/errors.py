"""Exception types raised by map generation."""

from __future__ import annotations


class MapConfigError(ValueError):
    """Invalid generation parameters (dimensions or wall probability)."""


class MapInvariantError(RuntimeError):
    """A generated map violates a structural invariant.

    Never expected for valid input; indicates a defect in the generator.
    """

    def __init__(self, message: str, violations=None):
        super().__init__(message)
        self.violations = list(violations or [])


__all__ = ["MapConfigError", "MapInvariantError"]

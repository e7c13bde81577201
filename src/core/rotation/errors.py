"""Exception types for the rotation engine.

Argument problems raise the built-in `TypeError` / `ValueError`; these cover the
engine's own failure modes.
"""

from __future__ import annotations


class RotationError(Exception):
    """Base class for rotation engine errors."""


class RotationInvariantError(RotationError):
    """Raised when a rotated sequence violates one or more invariants."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")


class RotationConfigError(RotationError, ValueError):
    """Raised when the kernel spec YAML is malformed."""

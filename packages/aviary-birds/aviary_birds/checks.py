"""Validation helpers for the concrete bird types."""

from __future__ import annotations

import math

from .types import FlappyBird, SwiftBird


def check_flappy_bird_parameters(bird: FlappyBird) -> None:
    """Amplitude and frequency must be finite and non-negative."""

    for label, value in (("amplitude", bird.amplitude), ("frequency", bird.frequency)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{label} must be numeric")
        if not math.isfinite(float(value)):
            raise ValueError(f"{label} must be finite")
        if value < 0:
            raise ValueError(f"{label} must be non-negative, got {value}")


def check_swift_version(bird: SwiftBird) -> None:
    """Swift versions are positive numbers."""

    version = bird.version
    if isinstance(version, bool) or not isinstance(version, (int, float)):
        raise TypeError("version must be numeric")
    if not math.isfinite(float(version)) or version <= 0:
        raise ValueError(f"version must be a positive number, got {version}")


__all__ = ["check_flappy_bird_parameters", "check_swift_version"]

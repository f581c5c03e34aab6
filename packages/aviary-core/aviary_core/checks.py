"""Checks for the Bird and Flyable capability contracts."""

from __future__ import annotations

import math

from .capabilities import Bird, Flyable


def check_bird_name(bird: Bird) -> None:
    """Ensure the bird exposes a non-empty text name."""

    name = getattr(bird, "name", None)
    if not isinstance(name, str):
        raise TypeError(f"bird name must be a string, got {type(name).__name__}")
    if not name.strip():
        raise ValueError("bird name must not be empty")


def check_can_fly_consistent(bird: Bird) -> None:
    """Ensure ``can_fly`` is a bool and only Flyable birds claim flight."""

    can_fly = bird.can_fly
    if not isinstance(can_fly, bool):
        raise TypeError(f"can_fly must be a bool, got {type(can_fly).__name__}")
    if can_fly and not isinstance(bird, Flyable):
        raise ValueError(f"{bird.name!r} claims it can fly but is not Flyable")
    if bool(bird) is not can_fly:
        raise ValueError(f"boolean view of {bird.name!r} disagrees with can_fly")


def check_airspeed_velocity(flyer: Flyable) -> None:
    """Ensure the reported airspeed is a finite, non-negative number."""

    speed = flyer.airspeed_velocity
    if isinstance(speed, bool) or not isinstance(speed, (int, float)):
        raise TypeError("airspeed_velocity must be numeric")
    if not math.isfinite(float(speed)):
        raise ValueError("airspeed_velocity must be finite")
    if speed < 0:
        raise ValueError(f"airspeed_velocity must be non-negative, got {speed}")


__all__ = [
    "check_airspeed_velocity",
    "check_bird_name",
    "check_can_fly_consistent",
]

"""The two demonstration flocks."""

from __future__ import annotations

from aviary_core import Bird, Flyable

from .types import FlappyBird, Penguin, SwiftBird, UnladenSwallow


def bunch_of_birds() -> list[Bird]:
    """Every kind of bird, including the one nobody can clock."""

    return [
        UnladenSwallow.AFRICAN,
        UnladenSwallow.EUROPEAN,
        UnladenSwallow.UNKNOWN,
        Penguin(name="King Penguin"),
        SwiftBird(version=2.0),
        FlappyBird(name="Felipe", amplitude=3.0, frequency=20.0),
    ]


def flying_birds() -> list[Flyable]:
    return [
        UnladenSwallow.AFRICAN,
        UnladenSwallow.EUROPEAN,
        SwiftBird(version=2.0),
    ]


__all__ = ["bunch_of_birds", "flying_birds"]

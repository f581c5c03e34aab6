"""Concrete birds built from the Bird and Flyable capabilities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from aviary_core import Bird, Flyable, UnsupportedVariantError


@dataclass(frozen=True, slots=True)
class FlappyBird(Bird, Flyable):
    """A bird whose speed comes from how hard it flaps."""

    name: str
    amplitude: float
    frequency: float

    @property
    def airspeed_velocity(self) -> float:
        return 3 * self.frequency * self.amplitude


@dataclass(frozen=True, slots=True)
class Penguin(Bird):
    """Flightless, and says so."""

    name: str

    @property
    def can_fly(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class SwiftBird(Bird, Flyable):
    version: float

    @property
    def name(self) -> str:
        return f"Swift {self.version}"

    @property
    def airspeed_velocity(self) -> float:
        return 2000.0


class UnladenSwallow(Bird, Flyable, Enum):
    """The airspeed velocity of an unladen swallow, by origin."""

    AFRICAN = "african"
    EUROPEAN = "european"
    UNKNOWN = "unknown"

    @property
    def name(self) -> str:
        return _SWALLOW_NAMES[self]

    @property
    def airspeed_velocity(self) -> float:
        speed = _SWALLOW_SPEEDS.get(self)
        if speed is None:
            raise UnsupportedVariantError(
                type_name=type(self).__name__,
                variant=self._name_,
                attribute="airspeed_velocity",
                message="You are thrown from the bridge of death!",
            )
        return speed

    @classmethod
    def from_variant(cls, variant: str) -> "UnladenSwallow":
        """Look a swallow up by its value (``african``) or member name (``AFRICAN``)."""

        try:
            return cls(variant.lower())
        except (AttributeError, ValueError) as exc:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(
                f"unknown swallow variant {variant!r} (choices: {choices})"
            ) from exc


_SWALLOW_NAMES: dict[UnladenSwallow, str] = {
    UnladenSwallow.AFRICAN: "African",
    UnladenSwallow.EUROPEAN: "European",
    UnladenSwallow.UNKNOWN: "What do you mean? African or European?",
}

_SWALLOW_SPEEDS: dict[UnladenSwallow, float] = {
    UnladenSwallow.AFRICAN: 10.0,
    UnladenSwallow.EUROPEAN: 9.9,
}


__all__ = ["FlappyBird", "Penguin", "SwiftBird", "UnladenSwallow"]

from __future__ import annotations

from dataclasses import dataclass

import pytest

from aviary_core import (
    Bird,
    CapabilityError,
    Flyable,
    capabilities_of,
    default_can_fly,
    type_key,
)


@dataclass(frozen=True)
class Sparrow(Bird, Flyable):
    name: str

    @property
    def airspeed_velocity(self) -> float:
        return 11.0


@dataclass(frozen=True)
class Emu(Bird):
    name: str

    @property
    def can_fly(self) -> bool:
        return False


def test_flyable_bird_gets_default_can_fly() -> None:
    sparrow = Sparrow(name="House Sparrow")

    assert sparrow.can_fly is True
    assert bool(sparrow) is True


def test_flightless_bird_reports_its_own_can_fly() -> None:
    emu = Emu(name="Emu")

    assert emu.can_fly is False
    assert not emu


def test_flyable_bird_may_override_default() -> None:
    @dataclass(frozen=True)
    class CagedSparrow(Bird, Flyable):
        name: str

        @property
        def can_fly(self) -> bool:
            return False

        @property
        def airspeed_velocity(self) -> float:
            return 0.0

    caged = CagedSparrow(name="Tweety")
    assert caged.can_fly is False
    assert not caged


def test_bird_without_flyable_must_define_can_fly() -> None:
    with pytest.raises(CapabilityError, match="must define can_fly"):

        class Dodo(Bird):
            name = "Dodo"


def test_flyable_must_define_airspeed_velocity() -> None:
    with pytest.raises(CapabilityError, match="airspeed_velocity"):

        class Kite(Flyable):
            pass


def test_abstract_bases_opt_out_of_conformance() -> None:
    class Seabird(Bird, abstract=True):
        pass

    with pytest.raises(CapabilityError):

        class Gull(Seabird):
            name = "Gull"

    class Puffin(Seabird):
        name = "Puffin"

        @property
        def can_fly(self) -> bool:
            return True

    assert Puffin().can_fly is True


def test_default_can_fly_rejects_non_flyable() -> None:
    assert default_can_fly(Sparrow(name="x")) is True
    with pytest.raises(CapabilityError):
        default_can_fly(Emu(name="Emu"))  # type: ignore[arg-type]


def test_capabilities_of_lists_concrete_type_first() -> None:
    assert capabilities_of(Sparrow(name="x")) == (Sparrow, Bird, Flyable)
    assert capabilities_of(Emu(name="Emu")) == (Emu, Bird)
    assert capabilities_of(object()) == (object,)


def test_type_key_is_fully_qualified() -> None:
    assert type_key(Bird) == "aviary_core.capabilities.Bird"
    assert type_key(Flyable) == "aviary_core.capabilities.Flyable"

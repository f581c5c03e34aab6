"""Capability mixins for birds and flyers.

``Bird`` and ``Flyable`` are independent capabilities. A class takes on a
capability by listing it as a base; neither base carries state, so they
combine freely with dataclasses and enums.

A ``Bird`` that is also ``Flyable`` gets ``can_fly = True`` for free. A
``Bird`` that cannot fly has no such default and must define ``can_fly``
itself; this is checked when the class is declared::

    @dataclass(frozen=True)
    class Kiwi(Bird):
        name: str

        @property
        def can_fly(self) -> bool:
            return False
"""

from __future__ import annotations

from typing import Any

from .exceptions import CapabilityError


def _fqn(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _defines(cls: type, attribute: str, default: object) -> bool:
    """Return True when the nearest definition of ``attribute`` is not ``default``."""

    for klass in cls.__mro__:
        if attribute in vars(klass):
            return vars(klass)[attribute] is not default
    return False


class Flyable:
    """Capability of anything that reports an airspeed velocity."""

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if abstract:
            return
        if not _defines(cls, "airspeed_velocity", Flyable.__dict__["airspeed_velocity"]):
            raise CapabilityError(
                f"{_fqn(cls)} is Flyable but does not define airspeed_velocity"
            )

    @property
    def airspeed_velocity(self) -> float:
        """Non-negative flight speed."""
        raise NotImplementedError


def default_can_fly(flyer: Flyable) -> bool:
    """Flight capability granted to every bird that is also Flyable."""

    if not isinstance(flyer, Flyable):
        raise CapabilityError(f"{type(flyer).__name__} is not Flyable")
    return True


class Bird:
    """Capability of a named creature that may or may not fly.

    Implementers expose ``name`` and ``can_fly``. Any bird can be used as a
    boolean, which evaluates to its ``can_fly``.
    """

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if abstract or issubclass(cls, Flyable):
            return
        if not _defines(cls, "can_fly", Bird.__dict__["can_fly"]):
            raise CapabilityError(
                f"{_fqn(cls)} is a Bird without Flyable and must define can_fly"
            )

    @property
    def can_fly(self) -> bool:
        if isinstance(self, Flyable):
            return default_can_fly(self)
        raise CapabilityError(f"{type(self).__name__} must define can_fly")

    def __bool__(self) -> bool:
        return self.can_fly


CAPABILITIES: tuple[type, ...] = (Bird, Flyable)


def capabilities_of(obj: object) -> tuple[type, ...]:
    """Return the classes of ``obj`` worth looking up checks for.

    The concrete type comes first, followed by every capability it conforms
    to, so specific checks run before generic ones.
    """

    kind = type(obj)
    found: list[type] = []
    if kind not in CAPABILITIES:
        found.append(kind)
    found.extend(capability for capability in CAPABILITIES if isinstance(obj, capability))
    return tuple(found)


def type_key(cls: type) -> str:
    """Registry key for a class."""

    return _fqn(cls)


__all__ = [
    "Bird",
    "CAPABILITIES",
    "Flyable",
    "capabilities_of",
    "default_can_fly",
    "type_key",
]

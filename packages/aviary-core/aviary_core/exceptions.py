"""Typed errors raised by the aviary packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


class AviaryError(Exception):
    """Base class for every error raised by the aviary packages."""


@dataclass(slots=True)
class InvalidArgumentError(AviaryError, ValueError):
    """An argument is outside the domain an operation accepts."""

    argument: str
    value: object
    message: str

    def __post_init__(self) -> None:
        self.args = (self.__str__(),)

    def __str__(self) -> str:
        return f"{self.argument}={self.value!r}: {self.message}"


@dataclass(slots=True)
class UnsupportedVariantError(AviaryError, LookupError):
    """A finite-choice value has no answer for the requested attribute."""

    type_name: str
    variant: str
    attribute: str
    message: str = "variant is not supported"

    def __post_init__(self) -> None:
        self.args = (self.__str__(),)

    def __str__(self) -> str:
        return f"{self.type_name}.{self.variant}.{self.attribute}: {self.message}"


class CapabilityError(AviaryError, TypeError):
    """A class declares a capability without satisfying its contract."""


@dataclass(slots=True)
class UnknownKindError(AviaryError, KeyError):
    """A flock entry names a kind that was never registered."""

    kind: str
    available_kinds: Sequence[str] = ()

    def __post_init__(self) -> None:
        self.args = (self.__str__(),)

    def __str__(self) -> str:
        base = f"unknown bird kind: {self.kind!r}"
        if self.available_kinds:
            joined = ", ".join(sorted(set(self.available_kinds)))
            base = f"{base} (available: {joined})"
        return base


@dataclass(slots=True)
class MissingCheckError(AviaryError, LookupError):
    """No checks are registered under a type key."""

    key: str
    available_keys: Sequence[str] = ()

    def __post_init__(self) -> None:
        self.args = (self.__str__(),)

    def __str__(self) -> str:
        base = f"no checks registered for {self.key}"
        if self.available_keys:
            joined = ", ".join(sorted(set(self.available_keys)))
            base = f"{base} (available: {joined})"
        return base


@dataclass(slots=True)
class FlockConfigError(AviaryError, ValueError):
    """A flock configuration file is malformed."""

    message: str
    path: str | None = None
    field: str | None = None

    def __post_init__(self) -> None:
        self.args = (self.__str__(),)

    def __str__(self) -> str:
        base = self.message
        if self.field:
            base = f"{self.field}: {base}"
        if self.path:
            base = f"{self.path}: {base}"
        return base


__all__ = [
    "AviaryError",
    "CapabilityError",
    "FlockConfigError",
    "InvalidArgumentError",
    "MissingCheckError",
    "UnknownKindError",
    "UnsupportedVariantError",
]

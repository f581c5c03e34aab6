"""Registries for flock kinds and per-type checks."""

from __future__ import annotations

import importlib
import logging
from collections import defaultdict
from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable, Dict, Iterator, List, Mapping, Tuple

from .exceptions import InvalidArgumentError, MissingCheckError, UnknownKindError
from .metadata import Check

logger = logging.getLogger(__name__)

TypeKey = str
BirdFactory = Callable[..., Any]


class _RegistryBase:
    def __init__(self) -> None:
        self._lock = RLock()

    def _validate_key(self, key: str) -> None:
        if not isinstance(key, str) or not key:
            raise ValueError("registry key must be a non-empty string")


class CheckRegistry(_RegistryBase):
    """Registry of Check references keyed by type FQN."""

    def __init__(self) -> None:
        super().__init__()
        self._storage: Dict[TypeKey, List[Check]] = defaultdict(list)

    def register(self, key: TypeKey, check: Check) -> None:
        self._validate_key(key)
        if not isinstance(check, Check):
            raise TypeError("check must be a Check instance")
        with self._lock:
            checks = self._storage[key]
            if check not in checks:
                checks.append(check)

    def resolve(self, key: TypeKey) -> Tuple[Check, ...]:
        with self._lock:
            return tuple(self._storage.get(key, ()))

    def ensure(self, key: TypeKey) -> Tuple[Check, ...]:
        checks = self.resolve(key)
        if not checks:
            raise MissingCheckError(key=key, available_keys=tuple(self.iter_keys()))
        return checks

    def iter_keys(self) -> Iterator[TypeKey]:
        with self._lock:
            return iter(tuple(self._storage.keys()))

    def items(self) -> Tuple[Tuple[TypeKey, Tuple[Check, ...]], ...]:
        with self._lock:
            return tuple((key, tuple(values)) for key, values in self._storage.items())

    def clear(self) -> None:
        with self._lock:
            self._storage.clear()


def resolve_callable(check: Check) -> Callable[[Any], None]:
    """Import the function a Check points at."""

    module_name, _, attr = check.target.rpartition(".")
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        raise LookupError(f"check module not found: {module_name}") from exc
    func = getattr(module, attr, None)
    if func is None or not callable(func):
        raise LookupError(f"check function not found: {check.target}")
    return func


@dataclass(slots=True, frozen=True)
class KindEntry:
    """A flock kind and the factory that builds it."""

    kind: str
    factory: BirdFactory
    description: str | None = None


class KindRegistry(_RegistryBase):
    """Maps flock kind names (``penguin``, ``swift_bird``...) to factories."""

    def __init__(self) -> None:
        super().__init__()
        self._entries: Dict[str, KindEntry] = {}

    def register(
        self,
        kind: str,
        factory: BirdFactory,
        *,
        description: str | None = None,
        overwrite: bool = False,
    ) -> KindEntry:
        self._validate_key(kind)
        if not callable(factory):
            raise TypeError("factory must be callable")
        entry = KindEntry(kind=kind, factory=factory, description=description)
        with self._lock:
            prior = self._entries.get(kind)
            if prior is not None and prior.factory is not factory and not overwrite:
                raise ValueError(
                    f"kind {kind!r} already registered; set overwrite=True to replace"
                )
            self._entries[kind] = entry
        logger.debug("registered bird kind %s -> %r", kind, factory)
        return entry

    def get(self, kind: str) -> KindEntry:
        with self._lock:
            entry = self._entries.get(kind)
            if entry is None:
                raise UnknownKindError(kind=kind, available_kinds=tuple(self._entries))
            return entry

    def build(self, kind: str, params: Mapping[str, Any] | None = None) -> Any:
        """Construct a bird of ``kind`` from keyword parameters."""

        entry = self.get(kind)
        try:
            return entry.factory(**dict(params or {}))
        except TypeError as exc:
            raise InvalidArgumentError("params", dict(params or {}), str(exc)) from exc

    def kinds(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._entries))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


check_registry = CheckRegistry()
kind_registry = KindRegistry()


def register_check(key: TypeKey, check: Check) -> None:
    check_registry.register(key, check)


def resolve_checks(key: TypeKey) -> Tuple[Check, ...]:
    return check_registry.resolve(key)


def ensure_checks(key: TypeKey) -> Tuple[Check, ...]:
    return check_registry.ensure(key)


def register_kind(
    kind: str,
    factory: BirdFactory,
    *,
    description: str | None = None,
    overwrite: bool = False,
) -> KindEntry:
    return kind_registry.register(
        kind, factory, description=description, overwrite=overwrite
    )


def build_bird(kind: str, params: Mapping[str, Any] | None = None) -> Any:
    return kind_registry.build(kind, params)


def list_kinds() -> Tuple[str, ...]:
    return kind_registry.kinds()


def list_check_keys() -> Tuple[TypeKey, ...]:
    return tuple(check_registry.iter_keys())


def clear_registries() -> None:
    check_registry.clear()
    kind_registry.clear()


__all__ = [
    "BirdFactory",
    "CheckRegistry",
    "KindEntry",
    "KindRegistry",
    "TypeKey",
    "build_bird",
    "check_registry",
    "clear_registries",
    "ensure_checks",
    "kind_registry",
    "list_check_keys",
    "list_kinds",
    "register_check",
    "register_kind",
    "resolve_callable",
    "resolve_checks",
]

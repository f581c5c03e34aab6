"""Default kind and check registrations for the concrete birds."""

from __future__ import annotations

import logging
from functools import lru_cache

from aviary_core import (
    Bird,
    Check,
    Flyable,
    check_airspeed_velocity,
    check_bird_name,
    check_can_fly_consistent,
    list_check_keys,
    list_kinds,
    register_check,
    register_kind,
    type_key,
)

from .checks import check_flappy_bird_parameters, check_swift_version
from .types import FlappyBird, Penguin, SwiftBird, UnladenSwallow

logger = logging.getLogger(__name__)

_BIRD_KEY = type_key(Bird)
_FLYABLE_KEY = type_key(Flyable)
_FLAPPY_KEY = type_key(FlappyBird)
_SWIFT_KEY = type_key(SwiftBird)

_KINDS = (
    ("flappy_bird", FlappyBird, "name, amplitude, frequency"),
    ("penguin", Penguin, "name"),
    ("swift_bird", SwiftBird, "version"),
    ("unladen_swallow", UnladenSwallow.from_variant, "variant: african|european|unknown"),
)

_CHECKS = (
    (_BIRD_KEY, check_bird_name),
    (_BIRD_KEY, check_can_fly_consistent),
    (_FLYABLE_KEY, check_airspeed_velocity),
    (_FLAPPY_KEY, check_flappy_bird_parameters),
    (_SWIFT_KEY, check_swift_version),
)


@lru_cache(maxsize=1)
def register_defaults() -> None:
    """Register the default flock kinds and checks."""

    for kind, factory, description in _KINDS:
        register_kind(kind, factory, description=description, overwrite=True)
    for key, func in _CHECKS:
        register_check(key, Check.of(func))
    logger.debug("registered %d kinds and %d checks", len(_KINDS), len(_CHECKS))


def registered_keys() -> dict[str, tuple[str, ...]]:
    """Return the kinds and check keys currently held by the live registries."""

    return {
        "kinds": list_kinds(),
        "checks": list_check_keys(),
    }


__all__ = ["register_defaults", "registered_keys"]

"""aviary-core: bird capabilities, sequence helpers and registries."""

from .capabilities import (
    Bird,
    CAPABILITIES,
    Flyable,
    capabilities_of,
    default_can_fly,
    type_key,
)
from .checks import check_airspeed_velocity, check_bird_name, check_can_fly_consistent
from .config import DEFAULT_STRIDE, FlockConfig
from .exceptions import (
    AviaryError,
    CapabilityError,
    FlockConfigError,
    InvalidArgumentError,
    MissingCheckError,
    UnknownKindError,
    UnsupportedVariantError,
)
from .metadata import Check
from .registry import (
    CheckRegistry,
    KindEntry,
    KindRegistry,
    build_bird,
    check_registry,
    clear_registries,
    ensure_checks,
    kind_registry,
    list_check_keys,
    list_kinds,
    register_check,
    register_kind,
    resolve_callable,
    resolve_checks,
)
from .sequences import max_by, skip, top_speed, total_by

__all__ = [
    "AviaryError",
    "Bird",
    "CAPABILITIES",
    "CapabilityError",
    "Check",
    "CheckRegistry",
    "DEFAULT_STRIDE",
    "FlockConfig",
    "FlockConfigError",
    "Flyable",
    "InvalidArgumentError",
    "KindEntry",
    "KindRegistry",
    "MissingCheckError",
    "UnknownKindError",
    "UnsupportedVariantError",
    "build_bird",
    "capabilities_of",
    "check_airspeed_velocity",
    "check_bird_name",
    "check_can_fly_consistent",
    "check_registry",
    "clear_registries",
    "default_can_fly",
    "ensure_checks",
    "kind_registry",
    "list_check_keys",
    "list_kinds",
    "max_by",
    "register_check",
    "register_kind",
    "resolve_callable",
    "resolve_checks",
    "skip",
    "top_speed",
    "total_by",
    "type_key",
]

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import pytest


def _ensure_package_on_path() -> None:
    repo_root = Path(__file__).resolve().parents[3]
    package_dir = repo_root / "packages" / "aviary-core"
    if str(package_dir) not in sys.path:
        sys.path.insert(0, str(package_dir))


_ensure_package_on_path()

from aviary_core import Bird, Flyable  # noqa: E402


@dataclass(frozen=True)
class Sparrow(Bird, Flyable):
    name: str
    speed: float = 11.0

    @property
    def airspeed_velocity(self) -> float:
        return self.speed


@dataclass(frozen=True)
class Emu(Bird):
    name: str

    @property
    def can_fly(self) -> bool:
        return False


@pytest.fixture(autouse=True)
def _clear_registries() -> Iterator[None]:
    from aviary_core import clear_registries

    clear_registries()
    yield
    clear_registries()


@pytest.fixture()
def test_kinds_registered() -> tuple[str, ...]:
    from aviary_core import register_kind

    register_kind("sparrow", Sparrow)
    register_kind("emu", Emu)
    return ("emu", "sparrow")

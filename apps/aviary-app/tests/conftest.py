from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

REPO_ROOT = Path(__file__).resolve().parents[3]


def _ensure_package_paths() -> None:
    for package in (
        REPO_ROOT / "packages" / "aviary-core",
        REPO_ROOT / "packages" / "aviary-birds",
        REPO_ROOT / "apps" / "aviary-app",
    ):
        path_str = str(package)
        if path_str not in sys.path:
            sys.path.insert(0, path_str)


_ensure_package_paths()


@pytest.fixture(autouse=True)
def _reset_registries() -> Iterator[None]:
    from aviary_birds.registry_setup import register_defaults
    from aviary_core import clear_registries

    clear_registries()
    register_defaults.cache_clear()
    register_defaults()
    yield
    clear_registries()
    register_defaults.cache_clear()
    register_defaults()

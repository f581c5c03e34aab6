from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest


def _ensure_package_paths() -> None:
    repo_root = Path(__file__).resolve().parents[3]
    packages_dir = repo_root / "packages"
    for package in (
        packages_dir / "aviary-core",
        packages_dir / "aviary-birds",
        packages_dir / "aviary-auditor",
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
    try:
        yield
    finally:
        clear_registries()
        register_defaults.cache_clear()
        register_defaults()

"""Flock configuration loading with validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml

from .capabilities import Bird, Flyable
from .exceptions import AviaryError, FlockConfigError
from .registry import build_bird

logger = logging.getLogger(__name__)

DEFAULT_STRIDE = 3


@dataclass(slots=True)
class FlockConfig:
    """Birds, flyers and sampling stride for one demonstration run."""

    birds: tuple[Bird, ...]
    flyers: tuple[Flyable, ...]
    stride: int = DEFAULT_STRIDE
    subject: Bird | None = None
    source: Path | None = field(default=None, compare=False)

    @classmethod
    def load(cls, config_path: str | Path) -> "FlockConfig":
        """Read and validate a YAML flock file."""

        path = Path(config_path)
        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except FileNotFoundError as exc:
            raise FlockConfigError("file not found", path=str(path)) from exc
        except yaml.YAMLError as exc:
            raise FlockConfigError(f"invalid YAML: {exc}", path=str(path)) from exc

        config = cls.from_mapping(raw, path=path)
        logger.info(
            "loaded flock %s: %d birds, %d flyers, stride=%d",
            path,
            len(config.birds),
            len(config.flyers),
            config.stride,
        )
        return config

    @classmethod
    def from_mapping(
        cls, raw: Any, *, path: Path | None = None
    ) -> "FlockConfig":
        """Validate an already-parsed configuration document."""

        where = str(path) if path is not None else None
        if not isinstance(raw, Mapping) or not isinstance(raw.get("flock"), Mapping):
            raise FlockConfigError("missing 'flock' section", path=where)
        flock = raw["flock"]

        stride = flock.get("stride", DEFAULT_STRIDE)
        if isinstance(stride, bool) or not isinstance(stride, int) or stride < 0:
            raise FlockConfigError(
                f"stride must be a non-negative integer, got {stride!r}",
                path=where,
                field="flock.stride",
            )

        birds = _build_entries(flock.get("birds", []), "flock.birds", where)
        for index, bird in enumerate(birds):
            if not isinstance(bird, Bird):
                raise FlockConfigError(
                    f"{type(bird).__name__} is not a Bird",
                    path=where,
                    field=f"flock.birds[{index}]",
                )

        flyers = _build_entries(flock.get("flyers", []), "flock.flyers", where)
        for index, flyer in enumerate(flyers):
            if not isinstance(flyer, Flyable):
                raise FlockConfigError(
                    f"{type(flyer).__name__} is not Flyable",
                    path=where,
                    field=f"flock.flyers[{index}]",
                )

        subject: Bird | None = None
        if "subject" in flock:
            (subject,) = _build_entries([flock["subject"]], "flock.subject", where)
            if not isinstance(subject, Bird):
                raise FlockConfigError(
                    f"{type(subject).__name__} is not a Bird",
                    path=where,
                    field="flock.subject",
                )
        elif birds:
            subject = birds[0]

        return cls(
            birds=tuple(birds),
            flyers=tuple(flyers),
            stride=stride,
            subject=subject,
            source=path,
        )


def _build_entries(entries: Any, field_name: str, where: str | None) -> list[Any]:
    if not isinstance(entries, Sequence) or isinstance(entries, (str, bytes)):
        raise FlockConfigError("must be a list", path=where, field=field_name)

    built: list[Any] = []
    for index, entry in enumerate(entries):
        location = f"{field_name}[{index}]"
        if not isinstance(entry, Mapping) or "kind" not in entry:
            raise FlockConfigError(
                "entry must be a mapping with a 'kind'", path=where, field=location
            )
        params = {key: value for key, value in entry.items() if key != "kind"}
        try:
            built.append(build_bird(str(entry["kind"]), params))
        except (AviaryError, ValueError) as exc:
            raise FlockConfigError(str(exc), path=where, field=location) from exc
    return built


__all__ = ["DEFAULT_STRIDE", "FlockConfig"]

"""Demonstration run over a configured flock."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from aviary_core import Bird, FlockConfig, skip, top_speed

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "configs" / "flock.yaml"

CAN_FLY_MESSAGE = "I can fly!"
GROUNDED_MESSAGE = "Guess I’ll just sit here :["


@dataclass(frozen=True)
class DemoResult:
    """What one demonstration run observed."""

    sampled: Sequence[Bird]
    subject: Bird | None
    message: str
    top_speed: float


def load_default_config() -> FlockConfig:
    return FlockConfig.load(DEFAULT_CONFIG_PATH)


def run_demo(config: FlockConfig, *, stride: int | None = None) -> DemoResult:
    """Sample the flock, ask the subject whether it flies, and clock the flyers."""

    effective_stride = config.stride if stride is None else stride
    sampled = skip(config.birds, effective_stride)
    logger.debug(
        "sampled %d of %d birds with stride %d",
        len(sampled),
        len(config.birds),
        effective_stride,
    )

    subject = config.subject
    message = CAN_FLY_MESSAGE if subject else GROUNDED_MESSAGE

    speed = top_speed(config.flyers)
    logger.info("top speed of %d flyers: %s", len(config.flyers), speed)
    return DemoResult(
        sampled=tuple(sampled),
        subject=subject,
        message=message,
        top_speed=speed,
    )


def render_demo(result: DemoResult) -> list[str]:
    lines = ["Sampled: " + ", ".join(bird.name for bird in result.sampled)]
    lines.append(result.message)
    lines.append(f"Top speed: {result.top_speed}")
    return lines


__all__ = [
    "CAN_FLY_MESSAGE",
    "DEFAULT_CONFIG_PATH",
    "DemoResult",
    "GROUNDED_MESSAGE",
    "load_default_config",
    "render_demo",
    "run_demo",
]

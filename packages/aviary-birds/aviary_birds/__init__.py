"""Concrete birds, their checks, and the demonstration flocks."""

from .checks import check_flappy_bird_parameters, check_swift_version
from .examples import bunch_of_birds, flying_birds
from .registry_setup import register_defaults, registered_keys
from .types import FlappyBird, Penguin, SwiftBird, UnladenSwallow

register_defaults()

__all__ = [
    "FlappyBird",
    "Penguin",
    "SwiftBird",
    "UnladenSwallow",
    "bunch_of_birds",
    "check_flappy_bird_parameters",
    "check_swift_version",
    "flying_birds",
    "register_defaults",
    "registered_keys",
]

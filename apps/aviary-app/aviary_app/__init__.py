"""Demonstration application for the aviary packages."""

from aviary_birds import register_defaults

register_defaults()

# Public API lives in aviary_app.runner; the CLI is aviary_app.__main__.

"""aviary-demo CLI entry point."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

import click

from aviary_core import AviaryError, FlockConfig

from .runner import DEFAULT_CONFIG_PATH, render_demo, run_demo


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="Flock YAML file.",
)
@click.option("--stride", type=int, default=None, help="Override flock.stride.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(config_path: str, stride: int | None, verbose: bool) -> None:
    """Sample a flock, report whether its subject flies, and clock its flyers."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = FlockConfig.load(config_path)
        result = run_demo(config, stride=stride)
    except AviaryError as exc:
        raise click.ClickException(f"✗ {exc}") from exc

    for line in render_demo(result):
        click.echo(line)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, standalone_mode=False)
    except click.ClickException as exc:
        exc.show(file=sys.stderr)
        return exc.exit_code
    except SystemExit as exc:  # pragma: no cover - SystemExit raised inside click
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":
    sys.exit(main())

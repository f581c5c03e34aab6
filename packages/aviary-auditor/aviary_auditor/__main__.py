"""aviary-audit CLI entry point."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

import click

from aviary_birds import bunch_of_birds
from aviary_core import FlockConfig, FlockConfigError

from .auditor import audit
from .report import render_json, render_table, render_text

_RENDERERS = {
    "text": render_text,
    "json": render_json,
    "table": render_table,
}


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "config",
    required=False,
    type=click.Path(dir_okay=False),
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(_RENDERERS), case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--flyers",
    is_flag=True,
    default=False,
    help="Audit the flyers list of CONFIG instead of its birds.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    config: str | None,
    output_format: str,
    flyers: bool,
    verbose: bool,
) -> None:
    """Audit the birds of CONFIG (default: the built-in demonstration flock)."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if config is None:
        birds: Sequence[object] = bunch_of_birds()
    else:
        try:
            flock = FlockConfig.load(config)
        except FlockConfigError as exc:
            raise click.ClickException(str(exc)) from exc
        birds = flock.flyers if flyers else flock.birds

    report = audit(birds)
    click.echo(_RENDERERS[output_format.lower()](report))
    ctx.exit(report.summary.exit_code)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, standalone_mode=False)
    except click.ClickException as exc:
        exc.show(file=sys.stderr)
        return exc.exit_code
    except SystemExit as exc:  # pragma: no cover - SystemExit raised inside click
        return int(exc.code or 0)
    if result is None:
        return 0
    return int(result)


if __name__ == "__main__":
    sys.exit(main())

import logging
from pathlib import Path
from typing import Optional

import typer

from app.core.config import settings
from app.core.exceptions import EntityPayloadError
from app.core.log_config import configure_logging
from app.services.entity_codec import EntityCodec


logger = logging.getLogger(__name__)

cli = typer.Typer(help="Customer entity tools", no_args_is_help=True)


@cli.callback()
def startup(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Overrides LOG_LEVEL from the environment."
    ),
) -> None:
    """Initializes logging before any command runs."""
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")
    logger.info(f"{settings.APP_NAME} starting")


@cli.command("describe")
def describe(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="File holding one JSON customer record per line.",
    ),
) -> None:
    """Prints the diagnostic rendering of every record in PATH.

    Blank lines are skipped. The first invalid record stops the run with
    exit code 1.
    """
    lines = path.read_text(encoding="utf-8").splitlines()
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            entity = EntityCodec.from_json(line)
        except EntityPayloadError as e:
            typer.echo(f"line {line_no}: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(entity.describe())


if __name__ == "__main__":
    cli()

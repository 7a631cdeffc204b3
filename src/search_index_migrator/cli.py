"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from search_index_migrator.configuration import ConfigurationError, resolve_configuration
from search_index_migrator.run_execution import (
    GenerationError,
    GenerationRequest,
    MigrationUsageError,
    generate_migration,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("migration_name")
def cli(migration_name: str) -> None:
    """Generate a versioned drop-then-create search index migration named MIGRATION_NAME.

    Writes one bash and one PowerShell script under the module's script directories.
    """
    working_directory = Path.cwd()
    try:
        settings = resolve_configuration(working_directory)
        outcome = generate_migration(
            GenerationRequest(migration_name=migration_name, working_directory=working_directory),
            settings=settings,
        )
    except MigrationUsageError as exc:
        raise click.BadParameter(str(exc), param_hint="MIGRATION_NAME") from exc
    except (ConfigurationError, GenerationError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.shell_script_path))
    click.echo(str(outcome.powershell_script_path))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT, stream=sys.stderr)
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(f"FATAL: {exc}", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

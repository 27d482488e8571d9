"""CLI entry point: version-sync.

Usage:
    version-sync            # dry run, report available updates
    version-sync --write    # also rewrite versions.properties

Configuration comes from the environment (see versionsync.core.config).
"""

from __future__ import annotations

import asyncio
import sys

import click

from versionsync.core.config import Settings
from versionsync.core.logging import setup_logging
from versionsync.exceptions import ConfigFileNotFound, ConfigFileUnreadable
from versionsync.registry.dependencies import DEPENDENCIES
from versionsync.updater.orchestrator import run_update
from versionsync.updater.report import print_report, write_github_output


@click.command()
@click.option("--write", is_flag=True, help="Persist discovered updates to the versions file")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(write: bool, verbose: bool) -> None:
    """Check upstream registries for newer dependency versions."""
    setup_logging(verbose)
    settings = Settings.from_env()

    click.echo("========================================")
    click.echo("Dependency Version Checker")
    click.echo("========================================\n")
    click.echo(f"Checking {len(DEPENDENCIES)} dependencies against {settings.versions_file} ...")

    try:
        summary = asyncio.run(run_update(settings, write=write))
    except (ConfigFileNotFound, ConfigFileUnreadable) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except OSError as e:
        click.echo(f"Error: {settings.versions_file}: {e}", err=True)
        sys.exit(2)

    print_report(summary, settings.versions_file)

    if settings.github_output is not None:
        write_github_output(settings.github_output, summary.results)

    sys.exit(summary.exit_code)


if __name__ == "__main__":
    main()

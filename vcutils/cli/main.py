"""
CLI entry point for VCUtils.

Provides command-line access to the HTTP client for issuing one-off
requests and inspecting resolved client configuration.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from vcutils._version import __version__
from vcutils.config.settings import get_default_config_path, load_config
from vcutils.exceptions import InvalidConfigurationError, VCUtilsError
from vcutils.logging_config import setup_logging
from vcutils.cli.context import CLIContext, pass_context


@click.group()
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help=f'Path to configuration file (default: {get_default_config_path()})',
)
@click.option(
    '--log-level',
    '-l',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    default=None,
    help='Set logging level (default: from configuration)',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose output',
)
@click.version_option(version=__version__, prog_name='vcutils')
@pass_context
def cli(ctx: CLIContext, config: Optional[Path], log_level: Optional[str], verbose: bool):
    """
    VCUtils - HTTP client helpers for web applications.

    Issue requests through the normalizing HTTP client and inspect how
    clients are configured.
    """
    ctx.verbose = verbose
    ctx.config_path = str(config) if config else None

    try:
        ctx.config = load_config(ctx.config_path)
    except InvalidConfigurationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)

    ctx.log_level = log_level.upper() if log_level else ctx.config.logging.level
    log_file = Path(ctx.config.logging.file) if ctx.config.logging.file else None
    setup_logging(
        level=ctx.log_level,
        log_file=log_file,
        json_format=ctx.config.logging.format == "json",
    )

    if verbose:
        logger = logging.getLogger("vcutils")
        logger.info(f"Loaded configuration from: {ctx.source}")
        logger.info(f"Log level: {ctx.log_level}")


@cli.group()
def config():
    """Inspect configuration."""
    pass


@config.command('show')
@click.option(
    '--target',
    '-t',
    default=None,
    help='Client name to resolve per-target overrides for',
)
@pass_context
def show_config(ctx: CLIContext, target: Optional[str]):
    """Show the merged HTTP client settings for a target."""
    try:
        settings = ctx.settings_for(target)
    except VCUtilsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Configuration: {ctx.source}")
    click.echo(f"Target:        {target or '(defaults)'}")
    click.echo()
    click.echo(json.dumps(settings.describe(), indent=2))


from vcutils.cli.request import request_command  # noqa: E402

cli.add_command(request_command, name='request')


def main():
    """Console script entry point."""
    cli()


if __name__ == '__main__':
    main()

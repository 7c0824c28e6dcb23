# src/mochawatch/cli/config_cmds.py

from pathlib import Path

import click
import structlog
from rich.pretty import pretty_repr

from mochawatch.cli.utils import (
    apply_config_log_level,
    config_path_option,
    logging_options,
    setup_logging_from_context,
)
from mochawatch.config import load_config
from mochawatch.exceptions import ConfigurationError
from mochawatch.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting and validating configuration."""
    pass


@config_cli.command(name="show")
@config_path_option
@logging_options
@click.pass_context
def show_config(ctx: click.Context, config_path: Path, **logging_kwargs):
    """Load, validate, and display the configuration."""
    setup_logging_from_context(ctx, **logging_kwargs)
    log.info("Executing 'config show' command", config_path=str(config_path))

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate configuration", error=str(e))
        click.echo(f"Error: Configuration problem in '{config_path}':\n{e}", err=True)
        ctx.exit(1)

    apply_config_log_level(ctx, config)
    click.echo(pretty_repr(config, expand_all=True))
    click.echo(f"runner: {config.worker.resolved_runner_path}")

# 🔼⚙️

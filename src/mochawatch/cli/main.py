# src/mochawatch/cli/main.py

"""
Command line entry point for mochawatch.
"""

from importlib.metadata import PackageNotFoundError, version

import click

from mochawatch.cli.config_cmds import config_cli
from mochawatch.cli.run_cmds import run_cli
from mochawatch.cli.utils import logging_options, setup_logging_from_context

try:
    __version__ = version("mochawatch")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="mochawatch")
@logging_options
@click.pass_context
def cli(ctx: click.Context, **logging_kwargs):
    """
    Mochawatch: re-run mocha against changed spec files.

    Log level precedence: CLI option > MOCHAWATCH_LOG_LEVEL > [global].log_level > WARNING.
    """
    setup_logging_from_context(ctx, **logging_kwargs)


cli.add_command(config_cli)
cli.add_command(run_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️

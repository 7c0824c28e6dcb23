# src/mochawatch/cli/run_cmds.py
#

import asyncio
from pathlib import Path

import click
import structlog

from mochawatch.cli.utils import (
    apply_config_log_level,
    config_path_option,
    logging_options,
    setup_logging_from_context,
)
from mochawatch.config import load_config
from mochawatch.exceptions import ConfigurationError
from mochawatch.state import STATE_EMOJI_MAP, WorkerState
from mochawatch.telemetry import StructLogger
from mochawatch.testing import MochaWorker

log: StructLogger = structlog.get_logger("cli.run")


def _relative_to_runner_cwd(file: str, runner_cwd: Path | None) -> str:
    """
    Rebases a path given on the command line (relative to the shell's
    directory) onto the directory mocha runs in.
    """
    if runner_cwd is None:
        return file
    absolute = Path(file).resolve()
    try:
        return str(absolute.relative_to(runner_cwd.resolve()))
    except ValueError:
        return str(absolute)


@click.command(name="run")
@click.argument("files", nargs=-1, type=click.Path(path_type=str))
@config_path_option
@logging_options
@click.pass_context
def run_cli(ctx: click.Context, files: tuple[str, ...], config_path: Path, **logging_kwargs):
    """
    Run mocha once against FILES (default: every configured spec file).

    FILES are relative to the current directory.
    """
    setup_logging_from_context(ctx, **logging_kwargs)

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate configuration", error=str(e))
        click.echo(f"Error: Configuration problem in '{config_path}':\n{e}", err=True)
        ctx.exit(1)

    apply_config_log_level(ctx, config)

    options = config.worker
    worker = MochaWorker(options, options.initial_args)
    if files:
        run_files = [_relative_to_runner_cwd(f, options.cwd) for f in files]
    else:
        run_files = list(options.spec)
    log.info(
        "Starting mocha",
        emoji=STATE_EMOJI_MAP[WorkerState.RUNNING],
        runner=str(worker.runner_path),
        files=run_files,
    )

    try:
        result = asyncio.run(worker.run_tests(run_files))
    except OSError as e:
        log.error("Failed to launch mocha", runner=str(worker.runner_path), error=str(e))
        click.echo(f"Error: Could not start '{worker.runner_path}': {e}", err=True)
        ctx.exit(2)

    if result is None:
        click.echo("No spec files to run.", err=True)
        return

    log.info(
        "Mocha finished",
        emoji=STATE_EMOJI_MAP[worker.state],
        exit_code=result.exit_code,
        test_duration_ms=round(result.test_duration, 1),
        success=result.success,
    )
    # Processes killed by a signal report -N; use the shell convention instead.
    ctx.exit(result.exit_code if result.exit_code >= 0 else 128 - result.exit_code)

# 🔼⚙️

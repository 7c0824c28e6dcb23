# src/mochawatch/cli/utils.py

import logging
from pathlib import Path

import click

from mochawatch.config import MochaWatchConfig
from mochawatch.telemetry.logger import setup_logging as core_setup_logging

DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)


def logging_options(f):
    """Decorator adding --log-level, --log-file and --json-logs to a command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="MOCHAWATCH_LOG_LEVEL",
        help="Set the logging level (overrides [global].log_level).",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="MOCHAWATCH_LOG_FILE",
        help="Also write logs to this file, as JSON lines.",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="MOCHAWATCH_JSON_LOGS",
        help="Render console logs as JSON.",
    )(f)
    return f


def config_path_option(f):
    """Decorator adding the shared -c/--config-path option."""
    return click.option(
        "-c",
        "--config-path",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
        default=Path("mochawatch.toml"),
        show_default=True,
        envvar="MOCHAWATCH_CONF",
        help="Path to the mochawatch configuration file (env var MOCHAWATCH_CONF).",
        show_envvar=True,
    )(f)


def setup_logging_from_context(ctx: click.Context, **local_options) -> None:
    """
    Configures logging from the group's options, letting a subcommand's own
    --log-level/--log-file/--json-logs win. The chosen values are stored back
    on the context so a later config-driven call can tell what the CLI set.
    """
    obj = ctx.ensure_object(dict)
    for key, ctx_key in (("log_level", "LOG_LEVEL"), ("log_file", "LOG_FILE"), ("json_logs", "JSON_LOGS")):
        if local_options.get(key) is not None:
            obj[ctx_key] = local_options[key]

    _configure(obj, _to_numeric_level(obj.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL))


def apply_config_log_level(ctx: click.Context, config: MochaWatchConfig) -> None:
    """Reconfigures logging with [global].log_level unless the CLI or env chose a level."""
    obj = ctx.ensure_object(dict)
    if obj.get("LOG_LEVEL"):
        return
    _configure(obj, config.global_config.numeric_log_level)


def _to_numeric_level(level_name: str) -> int:
    numeric_level = logging.getLevelName(level_name.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _configure(obj: dict, level: int) -> None:
    core_setup_logging(
        level=level,
        json_logs=bool(obj.get("JSON_LOGS")),
        log_file=obj.get("LOG_FILE"),
    )

# ⚙️🛠️

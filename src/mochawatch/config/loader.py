#
# config/loader.py
#
"""
Loads mochawatch configuration from a TOML file.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

import structlog

from mochawatch.config.models import GlobalConfig, MochaWatchConfig, WorkerOptions
from mochawatch.exceptions import ConfigurationError
from mochawatch.telemetry import StructLogger

log: StructLogger = structlog.get_logger("config.loader")

ENV_LOG_LEVEL = "MOCHAWATCH_LOG_LEVEL"

_WORKER_KEYS = {"spec", "args", "runner_path", "cwd"}
_GLOBAL_KEYS = {"log_level"}


def _resolve_relative(value: str | None, base_dir: Path) -> Path | None:
    if value is None:
        return None
    path = Path(value).expanduser()
    return path if path.is_absolute() else (base_dir / path).resolve()


def _check_table(name: str, table: Any, allowed: set[str], config_path: Path) -> dict[str, Any]:
    if not isinstance(table, dict):
        raise ConfigurationError(f"[{name}] must be a table", str(config_path))
    unknown = set(table) - allowed
    if unknown:
        raise ConfigurationError(
            f"Unknown key(s) in [{name}]: {', '.join(sorted(unknown))}", str(config_path)
        )
    return table


def load_config(config_path: Path) -> MochaWatchConfig:
    """
    Reads, validates and structures the configuration at `config_path`.

    Relative `runner_path` and `cwd` values are resolved against the directory
    holding the config file. The MOCHAWATCH_LOG_LEVEL environment variable
    overrides `[global].log_level`.

    Raises:
        ConfigurationError: The file is missing, is not valid TOML, or holds
            invalid values.
    """
    config_path = Path(config_path)
    load_log = log.bind(config_path=str(config_path))
    load_log.debug("Loading configuration")

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except FileNotFoundError as e:
        raise ConfigurationError("Configuration file not found", str(config_path)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML: {e}", str(config_path)) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file: {e}", str(config_path)) from e

    unknown = set(raw) - {"global", "worker"}
    if unknown:
        raise ConfigurationError(f"Unknown section(s): {', '.join(sorted(unknown))}", str(config_path))

    global_table = dict(_check_table("global", raw.get("global", {}), _GLOBAL_KEYS, config_path))
    worker_table = dict(_check_table("worker", raw.get("worker", {}), _WORKER_KEYS, config_path))

    env_level = os.environ.get(ENV_LOG_LEVEL)
    if env_level:
        load_log.debug("Log level overridden from environment", log_level=env_level)
        global_table["log_level"] = env_level

    base_dir = config_path.parent.resolve()
    try:
        for key in ("runner_path", "cwd"):
            if key in worker_table:
                worker_table[key] = _resolve_relative(worker_table[key], base_dir)
        worker_table.setdefault("cwd", base_dir)

        config = MochaWatchConfig(
            worker=WorkerOptions(**worker_table),
            global_config=GlobalConfig(**global_table),
        )
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigurationError(str(e), str(config_path)) from e

    load_log.info(
        "Configuration loaded",
        spec_count=len(config.worker.spec),
        runner=str(config.worker.resolved_runner_path),
    )
    return config

# 🔼⚙️

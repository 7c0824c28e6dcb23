#
# config/models.py
#
"""
Attrs-based data models for mochawatch configuration structure.
"""

import logging
from pathlib import Path
from typing import Any

from attrs import define, field


def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_str_items(inst: Any, attr: Any, value: tuple[str, ...]) -> None:
    """Validator ensures every entry is a non-empty string."""
    for item in value:
        if not isinstance(item, str) or not item:
            raise ValueError(f"Field '{attr.name}' must contain non-empty strings, got {item!r}")


def _to_str_tuple(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        raise ValueError(f"Expected a list of strings, got the string {value!r}")
    return tuple(value)


def _to_optional_path(value: Any) -> Path | None:
    return Path(value) if value is not None else None


@define(frozen=True, slots=True)
class WorkerOptions:
    """
    Options handed to the mocha worker. Immutable once constructed.

    `spec` lists the spec files known to the configuration; `args` holds the
    remaining mocha flags (reporter, timeouts, ...).
    """
    spec: tuple[str, ...] = field(factory=tuple, converter=_to_str_tuple, validator=_validate_str_items)
    args: tuple[str, ...] = field(factory=tuple, converter=_to_str_tuple, validator=_validate_str_items)
    runner_path: Path | None = field(default=None, converter=_to_optional_path)
    cwd: Path | None = field(default=None, converter=_to_optional_path)

    @property
    def initial_args(self) -> list[str]:
        """The first invocation: flags followed by every known spec file."""
        return [*self.args, *self.spec]

    @property
    def resolved_runner_path(self) -> Path:
        # Imported here to keep config free of the testing package at import time.
        from mochawatch.testing.spawner import resolve_runner_binary

        if self.runner_path is not None:
            return self.runner_path
        return resolve_runner_binary(self.cwd)


@define(frozen=True, slots=True)
class GlobalConfig:
    """Global default settings for mochawatch."""
    log_level: str = field(default="INFO", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


@define(frozen=True, slots=True)
class MochaWatchConfig:
    """Root configuration object for the mochawatch application."""
    worker: WorkerOptions = field(factory=WorkerOptions)
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})


# 🔼⚙️

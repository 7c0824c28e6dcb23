import asyncio
import logging
from pathlib import Path

import pytest
import structlog

from mochawatch.config import WorkerOptions
from mochawatch.testing import MochaWorker


class FakeProcess:
    """Stands in for asyncio.subprocess.Process; closes when the test says so."""

    def __init__(self):
        self._closed = asyncio.get_running_loop().create_future()

    def close(self, code: int = 0) -> None:
        self._closed.set_result(code)

    async def wait(self) -> int:
        return await self._closed


class RecordingSpawner:
    """Records every launch. Processes close at once when `exit_code` is set."""

    def __init__(self, exit_code: int | None = None):
        self.exit_code = exit_code
        self.calls: list[tuple[str, list[str], Path | None]] = []
        self.processes: list[FakeProcess] = []

    async def __call__(self, executable, args, *, cwd=None):
        self.calls.append((executable, list(args), cwd))
        process = FakeProcess()
        if self.exit_code is not None:
            process.close(self.exit_code)
        self.processes.append(process)
        return process


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drops handlers bound to streams a test (or CliRunner) has closed."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler).__module__.startswith("_pytest"):
            continue
        handler.close()
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def spawner() -> RecordingSpawner:
    return RecordingSpawner()


@pytest.fixture
def worker_options() -> WorkerOptions:
    """Options with two known spec files and a dot reporter."""
    return WorkerOptions(
        spec=["a.spec.js", "b.spec.js"],
        args=["--reporter", "dot"],
        runner_path=Path("/opt/project/node_modules/mocha/bin/mocha"),
    )


@pytest.fixture
def worker(worker_options: WorkerOptions, spawner: RecordingSpawner) -> MochaWorker:
    return MochaWorker(
        worker_options,
        ["--reporter", "dot", "a.spec.js", "b.spec.js"],
        spawner=spawner,
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Writes a minimal mochawatch.toml and returns its path."""
    path = tmp_path / "mochawatch.toml"
    path.write_text(
        '[global]\nlog_level = "DEBUG"\n\n'
        '[worker]\nspec = ["test/a.spec.js", "test/b.spec.js"]\nargs = ["--reporter", "dot"]\n'
    )
    return path

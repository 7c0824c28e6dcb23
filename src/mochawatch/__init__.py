#
# src/mochawatch/__init__.py
#
"""
mochawatch: re-runs a mocha test suite against the most recently changed files.
"""
from mochawatch.exceptions import AlreadyRunningError, ConfigurationError, MochaWatchError
from mochawatch.state import WorkerState
from mochawatch.testing import MochaWorker, TestRunResult

__all__ = [
    "AlreadyRunningError",
    "ConfigurationError",
    "MochaWatchError",
    "MochaWorker",
    "TestRunResult",
    "WorkerState",
]

# 🔼⚙️

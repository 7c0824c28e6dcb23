#
# src/mochawatch/testing/__init__.py
#
"""
Test execution sub-package for mochawatch.
"""
from .args import merge_spec_args
from .protocols import ProcessHandle, ProcessSpawner, TestRunResult
from .spawner import resolve_runner_binary, spawn_inherited
from .worker import MochaWorker

__all__ = [
    "MochaWorker",
    "ProcessHandle",
    "ProcessSpawner",
    "TestRunResult",
    "merge_spec_args",
    "resolve_runner_binary",
    "spawn_inherited",
]

# 🔼⚙️

# src/mochawatch/state.py
#
"""
Lifecycle states of a test-run worker.
"""

from enum import Enum, auto


class WorkerState(Enum):
    """Operational state of a MochaWorker. At most one run is active at a time."""

    IDLE = auto()  # No child process; a new run may start.
    RUNNING = auto()  # A mocha process has been spawned and has not closed yet.


# Display emojis for console output
STATE_EMOJI_MAP = {
    WorkerState.IDLE: "⏸️",
    WorkerState.RUNNING: "🧪",
}

# 🔼⚙️

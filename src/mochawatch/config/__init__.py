#
# config/__init__.py
#
"""
Configuration handling sub-package for mochawatch.

Exports the loading function and core configuration models.
"""

from .loader import load_config
from .models import GlobalConfig, MochaWatchConfig, WorkerOptions

__all__ = [
    "GlobalConfig",
    "MochaWatchConfig",
    "WorkerOptions",
    "load_config",
]

# 🔼⚙️

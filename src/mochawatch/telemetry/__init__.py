# src/mochawatch/telemetry/__init__.py

"""
Logging setup for mochawatch.
"""

from mochawatch.telemetry.logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]

# 🔼⚙️

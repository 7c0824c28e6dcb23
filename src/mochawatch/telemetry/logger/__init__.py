# src/mochawatch/telemetry/logger/__init__.py

from mochawatch.telemetry.logger.base import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]

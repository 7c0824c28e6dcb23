# src/mochawatch/telemetry/logger/processors.py

"""
structlog processors shared by every mochawatch renderer.
"""

from structlog.typing import EventDict, WrappedLogger

LEVEL_EMOJIS = {
    "debug": "🐛",
    "info": "ℹ️",
    "warning": "⚠️",
    "error": "❌",
    "critical": "💥",
}


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event with an emoji for its level, or an explicit `emoji` key."""
    emoji = event_dict.pop("emoji", None)
    if emoji is None:
        level = event_dict.get("level") or method_name
        emoji = LEVEL_EMOJIS.get(str(level).lower(), "➡️")
    event = event_dict.get("event")
    if isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Drops None-valued keys so console lines stay short."""
    for key in [k for k, v in event_dict.items() if v is None]:
        del event_dict[key]
    return event_dict

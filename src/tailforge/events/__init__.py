"""Event system: bus and event types for the build lifecycle."""

from tailforge.events.bus import EventBus
from tailforge.events.types import (
    BuildCancelled,
    BuildCompleted,
    BuildFailed,
    BuildStarted,
    FileScanned,
    FileSkipped,
    StylesheetEmitted,
)

__all__ = [
    "EventBus",
    "BuildCancelled",
    "BuildCompleted",
    "BuildFailed",
    "BuildStarted",
    "FileScanned",
    "FileSkipped",
    "StylesheetEmitted",
]

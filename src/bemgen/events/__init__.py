"""Event system: bus and event types for the generation lifecycle."""

from bemgen.events.bus import EventBus
from bemgen.events.types import (
    BlockStarted,
    BlockWritten,
    GenerationEvent,
    RunCompleted,
    RunFailed,
    RunStarted,
)

__all__ = [
    "EventBus",
    "BlockStarted",
    "BlockWritten",
    "GenerationEvent",
    "RunCompleted",
    "RunFailed",
    "RunStarted",
]

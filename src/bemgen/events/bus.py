"""Dispatch of generation events from a Generator run to its observers.

``bemgen build`` subscribes a progress printer to ``BlockWritten``; tests and
embedding code attach an ``on_all`` recorder to see the whole run.
"""

from __future__ import annotations

from typing import Callable

from bemgen.events.types import GenerationEvent

Listener = Callable[[GenerationEvent], None]


class EventBus:
    """Routes each event of a run to its observers, synchronously.

    Observers registered with ``on_all`` see an event before the observers of
    its concrete type. Within each group, registration order is kept. An
    observer that raises aborts the block being generated, so the error
    reaches the caller of ``Generator.run``.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, listener: Listener) -> Listener:
        """Observe only *event_type* events, e.g. ``BlockWritten`` for progress output.

        Returns *listener* so the call can be used as a decorator.
        """
        self._by_type.setdefault(event_type, []).append(listener)
        return listener

    def on_all(self, listener: Listener) -> Listener:
        self._catch_all.append(listener)
        return listener

    def emit(self, event: GenerationEvent) -> None:
        targets = [*self._catch_all, *self._by_type.get(type(event), [])]
        for listener in targets:
            listener(event)

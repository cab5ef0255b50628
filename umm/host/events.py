"""Lifecycle event subscription.

Each signal has at most one handler. Handler exceptions reach whoever
emitted the signal.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

__all__ = ["GAMEMODE_ACTIVATED", "EventBus", "Handler"]

# Emitted with the game id each time a game's session starts
GAMEMODE_ACTIVATED = "gamemode-activated"

Handler: TypeAlias = Callable[[str], object]


class EventBus:
    """Named signals with a single handler each."""

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def on(self, event: str, handler: Handler) -> None:
        """Subscribe handler to event.

        Raises:
            ValueError: event already has a handler
        """
        if event in self._handlers:
            raise ValueError(f"Handler already registered for event: {event!r}")
        self._handlers[event] = handler

    def off(self, event: str) -> bool:
        """Remove the handler for event. Returns False if there was none."""
        return self._handlers.pop(event, None) is not None

    def has_handler(self, event: str) -> bool:
        return event in self._handlers

    def emit(self, event: str, payload: str) -> bool:
        """Deliver payload to event's handler.

        Returns:
            True if a handler ran, False if nobody is subscribed
        """
        handler = self._handlers.get(event)
        if handler is None:
            return False
        handler(payload)
        return True

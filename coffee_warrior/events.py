"""Discrete notifications raised by the simulation for feedback collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


class EventKind(Enum):
    RUN_STARTED = "run_started"
    JUMP = "jump"
    COLLECT = "collect"
    COLLISION = "collision"
    GAME_OVER = "game_over"
    ERROR = "error"


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    tick: int
    data: dict[str, Any] = field(default_factory=dict)


Listener = Callable[[GameEvent], None]


class EventSignals:
    """Synchronous fan-out of game events, in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, kind: EventKind, tick: int, **data: Any) -> GameEvent:
        event = GameEvent(kind, tick, data)
        for listener in list(self._listeners):
            listener(event)
        return event

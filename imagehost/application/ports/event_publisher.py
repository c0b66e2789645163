"""Event Publisher port - interface for publishing transformation events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class TransformationEvent:
    """Event emitted around each transformation in a chain."""
    name: str  # e.g. "image.transformation.canvas"
    transformation: str
    stage: str  # "applied", "failed", "cancelled"
    width: int | None = None
    height: int | None = None
    message: str | None = None


@runtime_checkable
class EventPublisher(Protocol):
    """Port for publishing transformation events."""

    def publish(self, event: TransformationEvent) -> None:
        """Publish an event."""
        ...

    def subscribe(self, callback: Callable[[TransformationEvent], None]) -> None:
        """Subscribe to events."""
        ...


class SimpleEventPublisher:
    """Simple synchronous event publisher."""

    def __init__(self):
        self._subscribers: list[Callable[[TransformationEvent], None]] = []

    def publish(self, event: TransformationEvent) -> None:
        for callback in self._subscribers:
            callback(event)

    def subscribe(self, callback: Callable[[TransformationEvent], None]) -> None:
        self._subscribers.append(callback)

"""Domain-driven design building blocks: entities, aggregates and events."""

from __future__ import annotations

import threading
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar


class Event:
    """Base class for domain events; subclasses set ``event_name``."""

    event_name: ClassVar[str] = ""


EventHandler = Callable[[Event], None]


@dataclass
class Entity:
    id: str


@dataclass
class AggregateBase(Entity):
    events: list[Event] = field(default_factory=list, kw_only=True, repr=False, compare=False)

    def add_event(self, event: Event) -> None:
        self.events.append(event)


class EventDispatcher:
    """Routes published events to the handlers subscribed to their name."""

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[EventHandler]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event: Event | type[Event], handler: EventHandler) -> None:
        with self._lock:
            self._handlers[event.event_name].append(handler)

    def publish(self, *events: Event) -> None:
        """Call handlers in subscription order; the first exception stops publishing."""
        for event in events:
            for handler in list(self._handlers.get(event.event_name, ())):
                handler(event)
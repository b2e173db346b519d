"""
Event system for dungeon generation.

The generator emits an event at every visible step (a split, a placed room,
a carved corridor) so that a host can redraw, record, or animate the layout
as it is built. Handlers subscribe per event type.
"""

from enum import Enum, auto
from typing import Callable, Any, Dict, List, Optional
from dataclasses import dataclass, field


class GenerationEvent(Enum):
    """Event types emitted while a layout is generated."""

    # Run lifecycle
    PHASE_STARTED = auto()  # kwargs: phase
    GENERATION_FINISHED = auto()  # kwargs: rooms_placed, corridors
    GENERATION_CANCELLED = auto()  # kwargs: phase, rooms_placed

    # Partitioning
    NODE_SPLIT = auto()  # kwargs: area, child1, child2

    # Placement
    ROOM_PLACED = auto()  # kwargs: leaf_index, room, center
    ROOM_FAILED = auto()  # kwargs: leaf_index, area

    # Connection
    CORRIDOR_CARVED = auto()  # kwargs: start, end, width


@dataclass
class EventData:
    """Container for event data passed to handlers."""

    event: GenerationEvent
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        if self.kwargs:
            kwargs_str = ", ".join(f"{k}={v}" for k, v in self.kwargs.items())
            return f"EventData({self.event.name}, {kwargs_str})"
        return f"EventData({self.event.name})"


# Event handler signature: takes event data, returns nothing
EventHandler = Callable[[EventData], None]


class EventBus:
    """
    Event bus for publishing and subscribing to generation events.

    Subscribers register handlers for specific event types, and the
    generator emits events that trigger those handlers.
    """

    def __init__(self) -> None:
        """Initialize an empty event bus."""
        self._handlers: Dict[GenerationEvent, List[EventHandler]] = {}
        self._debug: bool = False

    def set_debug(self, debug: bool) -> None:
        """Enable or disable debug logging of events."""
        self._debug = debug

    def subscribe(self, event: GenerationEvent, handler: EventHandler) -> None:
        """
        Subscribe a handler to an event type.

        Args:
            event: The event type to listen for
            handler: Callable that takes EventData and returns None
        """
        if event not in self._handlers:
            self._handlers[event] = []
        self._handlers[event].append(handler)

    def unsubscribe(self, event: GenerationEvent, handler: EventHandler) -> None:
        """
        Unsubscribe a handler from an event type.

        Raises:
            ValueError: If handler was not subscribed to this event
        """
        if event not in self._handlers:
            raise ValueError(f"No handlers registered for event {event}")
        if handler not in self._handlers[event]:
            raise ValueError(f"Handler not subscribed to event {event}")
        self._handlers[event].remove(handler)

    def emit(self, event: GenerationEvent, **kwargs: Any) -> None:
        """
        Emit an event, triggering all subscribed handlers.

        Args:
            event: The event type to emit
            **kwargs: Event-specific data passed to handlers
        """
        event_data = EventData(event=event, kwargs=kwargs)

        if self._debug:
            print(f"[EventBus] Emitting: {event_data}")

        for handler in list(self._handlers.get(event, [])):
            try:
                handler(event_data)
            except Exception as e:
                # A failing viewer must not abort generation
                print(f"[EventBus] Handler error for {event.name}: {e}")
                if self._debug:
                    raise

    def clear(self) -> None:
        """Remove all event handlers."""
        self._handlers.clear()

    def handler_count(self, event: Optional[GenerationEvent] = None) -> int:
        """
        Get the number of handlers registered.

        Args:
            event: If provided, count handlers for this event only.
                   If None, count total handlers across all events.
        """
        if event is not None:
            return len(self._handlers.get(event, []))
        return sum(len(handlers) for handlers in self._handlers.values())

"""Tests for the event system."""

import pytest

from bsp_dungeon.event_system import EventBus, EventData, GenerationEvent
from bsp_dungeon.geometry import Point, Rect


class TestEventBus:
    """Test EventBus functionality."""

    def test_create_empty_bus(self):
        bus = EventBus()
        assert bus.handler_count() == 0

    def test_subscribe_handler(self):
        bus = EventBus()

        def handler(event_data: EventData) -> None:
            pass

        bus.subscribe(GenerationEvent.NODE_SPLIT, handler)
        assert bus.handler_count(GenerationEvent.NODE_SPLIT) == 1
        assert bus.handler_count() == 1

    def test_emit_calls_handler(self):
        """Emitting an event should call subscribed handlers with its kwargs."""
        bus = EventBus()
        called = []

        def handler(event_data: EventData) -> None:
            called.append(event_data)

        bus.subscribe(GenerationEvent.ROOM_PLACED, handler)
        bus.emit(GenerationEvent.ROOM_PLACED, leaf_index=2, room=Rect(1, 1, 3, 3), center=Point(2, 2))

        assert len(called) == 1
        assert called[0].event == GenerationEvent.ROOM_PLACED
        assert called[0].kwargs["leaf_index"] == 2
        assert called[0].kwargs["center"] == Point(2, 2)

    def test_emit_only_calls_matching_event_handlers(self):
        bus = EventBus()
        placed = []
        failed = []

        bus.subscribe(GenerationEvent.ROOM_PLACED, lambda data: placed.append(data))
        bus.subscribe(GenerationEvent.ROOM_FAILED, lambda data: failed.append(data))
        bus.emit(GenerationEvent.ROOM_FAILED, leaf_index=0, area=Rect(0, 0, 4, 4))

        assert placed == []
        assert len(failed) == 1

    def test_unsubscribe_handler(self):
        bus = EventBus()
        called = []

        def handler(event_data: EventData) -> None:
            called.append(event_data.event)

        bus.subscribe(GenerationEvent.CORRIDOR_CARVED, handler)
        bus.emit(GenerationEvent.CORRIDOR_CARVED)
        bus.unsubscribe(GenerationEvent.CORRIDOR_CARVED, handler)
        bus.emit(GenerationEvent.CORRIDOR_CARVED)
        assert len(called) == 1

    def test_unsubscribe_nonexistent_handler_raises(self):
        bus = EventBus()

        def handler(event_data: EventData) -> None:
            pass

        with pytest.raises(ValueError):
            bus.unsubscribe(GenerationEvent.PHASE_STARTED, handler)

        bus.subscribe(GenerationEvent.PHASE_STARTED, lambda data: None)
        with pytest.raises(ValueError):
            bus.unsubscribe(GenerationEvent.PHASE_STARTED, handler)

    def test_handler_may_unsubscribe_itself_during_emit(self):
        bus = EventBus()
        called = []

        def once(event_data: EventData) -> None:
            called.append(event_data.event)
            bus.unsubscribe(GenerationEvent.NODE_SPLIT, once)

        bus.subscribe(GenerationEvent.NODE_SPLIT, once)
        bus.emit(GenerationEvent.NODE_SPLIT)
        bus.emit(GenerationEvent.NODE_SPLIT)
        assert len(called) == 1

    def test_clear_removes_all_handlers(self):
        bus = EventBus()
        bus.subscribe(GenerationEvent.PHASE_STARTED, lambda data: None)
        bus.subscribe(GenerationEvent.GENERATION_FINISHED, lambda data: None)
        assert bus.handler_count() == 2

        bus.clear()
        assert bus.handler_count() == 0

    def test_handler_error_does_not_crash_bus(self):
        """If a handler raises an error, other handlers should still be called."""
        bus = EventBus()
        called = []

        def bad_handler(event_data: EventData) -> None:
            raise RuntimeError("Handler failed")

        bus.subscribe(GenerationEvent.ROOM_PLACED, bad_handler)
        bus.subscribe(GenerationEvent.ROOM_PLACED, lambda data: called.append(True))

        bus.emit(GenerationEvent.ROOM_PLACED)
        assert called == [True]

    def test_handler_error_propagates_in_debug_mode(self):
        bus = EventBus()
        bus.set_debug(True)

        def bad_handler(event_data: EventData) -> None:
            raise RuntimeError("Handler failed")

        bus.subscribe(GenerationEvent.ROOM_PLACED, bad_handler)
        with pytest.raises(RuntimeError):
            bus.emit(GenerationEvent.ROOM_PLACED)

    def test_emit_event_with_no_handlers(self):
        bus = EventBus()
        bus.emit(GenerationEvent.GENERATION_CANCELLED)


class TestEventData:
    """Test EventData class."""

    def test_event_data_repr_with_kwargs(self):
        data = EventData(event=GenerationEvent.CORRIDOR_CARVED, kwargs={"width": 2})
        repr_str = repr(data)
        assert "CORRIDOR_CARVED" in repr_str
        assert "width=2" in repr_str

    def test_event_data_repr_without_kwargs(self):
        data = EventData(event=GenerationEvent.PHASE_STARTED)
        assert repr(data) == "EventData(PHASE_STARTED)"

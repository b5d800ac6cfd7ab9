"""Pointer event source.

A small signal hub modelled on GObject's ``connect``/``disconnect``: the
canvas emits pointer events into it and interested parties subscribe with a
callback, receiving an integer handler id to disconnect with later.
"""

from enum import Enum
from itertools import count
from typing import Callable, Dict, Tuple

PointerCallback = Callable[[float, float], None]


class PointerEventType(Enum):
    """Pointer events in surface-local coordinates."""
    PRESSED = "pressed"
    MOTION = "motion"
    RELEASED = "released"
    LEAVE = "leave"


class PointerSource:
    """Delivers pointer events to connected handlers in connection order."""

    def __init__(self):
        self._handlers: Dict[int, Tuple[PointerEventType, PointerCallback]] = {}
        self._ids = count(1)

    def connect(self, event_type: PointerEventType, callback: PointerCallback) -> int:
        """Subscribe ``callback`` and return its handler id."""
        handler_id = next(self._ids)
        self._handlers[handler_id] = (event_type, callback)
        return handler_id

    def disconnect(self, handler_id: int):
        """Unsubscribe a handler. Raises KeyError for unknown ids."""
        del self._handlers[handler_id]

    def is_connected(self, handler_id: int) -> bool:
        return handler_id in self._handlers

    def handler_count(self, event_type: PointerEventType) -> int:
        return sum(1 for kind, _ in self._handlers.values() if kind is event_type)

    def emit(self, event_type: PointerEventType, x: float, y: float):
        """Call every handler connected to ``event_type``.

        Handlers connected or disconnected by a callback take effect from the
        next emission.
        """
        targets = [cb for kind, cb in self._handlers.values() if kind is event_type]
        for callback in targets:
            callback(x, y)

    # ==================== Convenience ====================

    def press(self, x: float, y: float):
        self.emit(PointerEventType.PRESSED, x, y)

    def move(self, x: float, y: float):
        self.emit(PointerEventType.MOTION, x, y)

    def release(self, x: float, y: float):
        self.emit(PointerEventType.RELEASED, x, y)

    def leave(self, x: float = 0.0, y: float = 0.0):
        self.emit(PointerEventType.LEAVE, x, y)

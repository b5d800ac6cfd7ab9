"""Pointer drag controller.

The controller is a two-state machine::

    IDLE --press(hit)--> DRAGGING --release--> IDLE

Motion and release listeners are connected on entering DRAGGING and
disconnected on leaving it, so exactly one pair is live during a drag.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from dragstage.errors import UnknownIdError
from dragstage.hittest import find_first_hit
from dragstage.node import AbsoluteBox, Point
from dragstage.pointer import PointerEventType, PointerSource
from dragstage.scene import SceneGraph

logger = logging.getLogger(__name__)


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class DragHandle:
    """The grabbed node and its box at press time.

    The box is not refreshed while dragging.
    """
    node_id: str
    box: AbsoluteBox


class DragController:
    """Picks up the first node under the pointer and moves it with the pointer."""

    def __init__(self, scene: SceneGraph, pointer: PointerSource,
                 redraw: Optional[Callable[[], None]] = None,
                 cancel_on_leave: bool = False):
        self.scene = scene
        self.pointer = pointer
        self.redraw = redraw
        self.cancel_on_leave = cancel_on_leave

        self._state = DragState.IDLE
        self._handle: Optional[DragHandle] = None
        self._press_id: Optional[int] = None
        self._drag_ids: List[int] = []

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def handle(self) -> Optional[DragHandle]:
        return self._handle

    @property
    def is_dragging(self) -> bool:
        return self._state is DragState.DRAGGING

    # ==================== Lifecycle ====================

    def start(self):
        """Begin listening for presses."""
        if self._press_id is None:
            self._press_id = self.pointer.connect(PointerEventType.PRESSED, self.press)

    def stop(self):
        """Stop listening entirely, abandoning any drag in progress."""
        self._end_drag()
        if self._press_id is not None:
            self.pointer.disconnect(self._press_id)
            self._press_id = None

    # ==================== Transitions ====================

    def press(self, x: float, y: float):
        """Grab the first node under ``(x, y)``, if any."""
        if self._state is DragState.DRAGGING:
            logger.debug("Press at (%s, %s) ignored: drag already active", x, y)
            return

        hit = find_first_hit(Point(x, y), self.scene.flatten_absolute_boxes())
        if hit is None:
            logger.debug("Press at (%s, %s) hit nothing", x, y)
            return

        self._handle = DragHandle(hit.id, hit)
        self._state = DragState.DRAGGING
        self._drag_ids = [
            self.pointer.connect(PointerEventType.MOTION, self.move),
            self.pointer.connect(PointerEventType.RELEASED, self.release),
        ]
        if self.cancel_on_leave:
            self._drag_ids.append(
                self.pointer.connect(PointerEventType.LEAVE, self.release))
        logger.debug("Grabbed %s at (%s, %s)", hit.id, x, y)

    def move(self, x: float, y: float):
        """Move the grabbed node so its absolute position is ``(x, y)``."""
        if self._handle is None:
            return

        try:
            node = self.scene.get(self._handle.node_id)
        except UnknownIdError:
            logger.warning("Dragged node %s was removed; ending drag",
                           self._handle.node_id)
            self._end_drag()
            return

        node.translate_absolute(x, y)
        if self.redraw:
            self.redraw()

    def release(self, x: float = 0.0, y: float = 0.0):
        """Drop the grabbed node."""
        if self._state is DragState.IDLE:
            return
        logger.debug("Released %s at (%s, %s)", self._handle.node_id, x, y)
        self._end_drag()

    def _end_drag(self):
        for handler_id in self._drag_ids:
            self.pointer.disconnect(handler_id)
        self._drag_ids = []
        self._handle = None
        self._state = DragState.IDLE

"""Canvas widget that draws the stage and feeds pointer events to it."""

import logging
from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from dragstage.config import StageSettings
from dragstage.drag import DragController
from dragstage.keyboard import Keyboard
from dragstage.pointer import PointerSource
from dragstage.scene import SceneGraph
from dragstage.surface import CairoSurface

logger = logging.getLogger(__name__)


class StageCanvas(Gtk.DrawingArea):
    """Drawing area hosting a scene graph and its drag controller."""

    def __init__(self, scene: SceneGraph, settings: Optional[StageSettings] = None,
                 keyboard: Optional[Keyboard] = None):
        super().__init__()

        self.scene = scene
        self.settings = settings or StageSettings()
        self.keyboard = keyboard
        self.pointer = PointerSource()
        self.controller = DragController(
            scene,
            self.pointer,
            redraw=self.queue_draw,
            cancel_on_leave=self.settings.cancel_on_leave,
        )

        # Drag gesture start point, offsets are relative to it
        self._drag_start_x = 0.0
        self._drag_start_y = 0.0

        self.set_draw_func(self._on_draw)
        self.set_content_width(self.settings.width)
        self.set_content_height(self.settings.height)
        self.set_hexpand(True)
        self.set_vexpand(True)

        self._setup_event_controllers()
        self.controller.start()

    def _setup_event_controllers(self):
        """Setup mouse event controllers."""
        drag_ctrl = Gtk.GestureDrag()
        drag_ctrl.set_button(1)  # Left mouse button
        drag_ctrl.connect("drag-begin", self._on_drag_begin)
        drag_ctrl.connect("drag-update", self._on_drag_update)
        drag_ctrl.connect("drag-end", self._on_drag_end)
        self.add_controller(drag_ctrl)

        motion_ctrl = Gtk.EventControllerMotion()
        motion_ctrl.connect("leave", self._on_leave)
        self.add_controller(motion_ctrl)

    def _on_draw(self, area, cr, width, height):
        """Main drawing function."""
        surface = CairoSurface(cr, width, height)
        self.scene.render(surface)
        if self.keyboard is not None:
            self.keyboard.draw(surface)

    def _on_drag_begin(self, gesture, start_x, start_y):
        self._drag_start_x = start_x
        self._drag_start_y = start_y
        self.pointer.press(start_x, start_y)

    def _on_drag_update(self, gesture, offset_x, offset_y):
        self.pointer.move(self._drag_start_x + offset_x, self._drag_start_y + offset_y)

    def _on_drag_end(self, gesture, offset_x, offset_y):
        self.pointer.release(self._drag_start_x + offset_x, self._drag_start_y + offset_y)
        self.queue_draw()

    def _on_leave(self, controller):
        """Handle mouse leaving canvas."""
        self.pointer.leave()

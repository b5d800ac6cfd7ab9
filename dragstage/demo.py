"""The demo stage shown by the application."""

from typing import Optional

from dragstage.config import StageSettings
from dragstage.keyboard import Keyboard
from dragstage.scene import SceneGraph


def build_demo_scene(settings: Optional[StageSettings] = None) -> SceneGraph:
    """A positioning node at (20, 100) holding three draggable boxes."""
    settings = settings or StageSettings()
    scene = SceneGraph(background=settings.background,
                       default_color=settings.default_color)

    panel = scene.add_node(20, 100)

    scene.add_rect(panel, 200, 200, "blue")

    small = scene.add_rect(panel, 50, 50, "white")
    small.set_local_position(20, 20)

    medium = scene.add_rect(panel, 75, 75, "green")
    medium.set_local_position(50, 50)

    return scene


def build_demo_keyboard(settings: Optional[StageSettings] = None) -> Optional[Keyboard]:
    """The piano keyboard drawn along the top of the stage, if enabled."""
    settings = settings or StageSettings()
    if not settings.show_keyboard:
        return None
    keyboard = Keyboard(20, 20, settings.keyboard_octaves)
    for index in (0, 8, 11):
        if index < len(keyboard.keys):
            keyboard.press_key(index)
    return keyboard

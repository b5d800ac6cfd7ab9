import pytest

from dragstage.pointer import PointerSource
from dragstage.scene import SceneGraph


class RecordingSurface:
    """RenderSurface that records every drawing call."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill", x, y, w, h, color))

    def stroke_rect(self, x, y, w, h, color):
        self.calls.append(("stroke", x, y, w, h, color))

    @property
    def fills(self):
        return [call for call in self.calls if call[0] == "fill"]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scene():
    return SceneGraph()


@pytest.fixture
def pointer():
    return PointerSource()


@pytest.fixture
def stage(scene):
    """Root at (20, 100) with rect A (200x200) then rect B (50x50 at 20, 20)."""
    root = scene.add_node(20, 100)
    a = scene.add_rect(root, 200, 200, "blue")
    b = scene.add_rect(root, 50, 50, "white")
    b.set_local_position(20, 20)
    return scene, root, a, b

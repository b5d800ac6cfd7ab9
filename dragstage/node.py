"""Positionable scene nodes.

Nodes store a local offset relative to their parent. Tree links are kept as
ids (``parent_id`` / ``child_ids``) and resolved through the owning
:class:`~dragstage.scene.SceneGraph` registry, so nodes never hold direct
references to each other.
"""

import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from dragstage.errors import PrecursorError

if TYPE_CHECKING:
    from dragstage.scene import SceneGraph
    from dragstage.surface import RenderSurface


DEFAULT_RECT_COLOR = "#FF0000"


def new_node_id() -> str:
    """Generate a fresh unique node id."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Point:
    """A point in surface coordinates."""
    x: float
    y: float


@dataclass(frozen=True)
class LocalBox:
    """A rectangle relative to the parent node."""
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class AbsoluteBox:
    """A rectangle in surface coordinates, tagged with its node id."""
    id: str
    x: float
    y: float
    far_x: float
    far_y: float

    @property
    def width(self) -> float:
        return self.far_x - self.x

    @property
    def height(self) -> float:
        return self.far_y - self.y

    def contains(self, px: float, py: float) -> bool:
        """Check if a point is inside this box (edges included)."""
        return (self.x <= px <= self.far_x and
                self.y <= py <= self.far_y)


class Node:
    """A positionable entity in the scene tree."""

    def __init__(self, x: float = 0.0, y: float = 0.0, node_id: Optional[str] = None):
        self._id = node_id if node_id is not None else new_node_id()
        self.x = x
        self.y = y
        self.parent_id: Optional[str] = None
        self.child_ids: List[str] = []
        self.graph: Optional["SceneGraph"] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, x={self.x}, y={self.y})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def position(self) -> Point:
        """Local offset."""
        return Point(self.x, self.y)

    @property
    def parent(self) -> Optional["Node"]:
        if self.parent_id is None or self.graph is None:
            return None
        return self.graph.find(self.parent_id)

    @property
    def children(self) -> List["Node"]:
        if self.graph is None:
            return []
        found = (self.graph.find(child_id) for child_id in self.child_ids)
        return [child for child in found if child is not None]

    @property
    def is_hit_target(self) -> bool:
        return False

    # ==================== Positioning ====================

    def absolute_position(self) -> Point:
        """Sum local offsets up the parent chain."""
        x, y = self.x, self.y
        parent = self.parent
        while parent is not None:
            x += parent.x
            y += parent.y
            parent = parent.parent
        return Point(x, y)

    def surface_offsets(self, surface: "RenderSurface") -> Point:
        """Distance from the node's absolute position to the surface's far edges."""
        pos = self.absolute_position()
        return Point(surface.width - pos.x, surface.height - pos.y)

    def set_local_position(self, dx: float, dy: float):
        """Place the node at ``(dx, dy)`` from its parent's absolute position."""
        if self.parent is None:
            raise PrecursorError(self._id)
        self.x = dx
        self.y = dy

    def translate_absolute(self, x: float, y: float):
        """Move the node so that its absolute position becomes ``(x, y)``."""
        parent = self.parent
        if parent is None:
            self.x, self.y = x, y
            return
        origin = parent.absolute_position()
        self.x = x - origin.x
        self.y = y - origin.y

    # ==================== Geometry ====================

    def local_bounding_box(self) -> LocalBox:
        return LocalBox(self.x, self.y, 0.0, 0.0)

    def absolute_bounding_box(self) -> AbsoluteBox:
        pos = self.absolute_position()
        return AbsoluteBox(self._id, pos.x, pos.y, pos.x, pos.y)

    def draw(self, surface: "RenderSurface"):
        """Plain nodes have no fillable area."""


class RectNode(Node):
    """A filled rectangle anchored at the node's absolute position."""

    def __init__(self, width: Optional[float] = 0.0, height: Optional[float] = 0.0,
                 color: str = DEFAULT_RECT_COLOR, x: float = 0.0, y: float = 0.0,
                 node_id: Optional[str] = None, outline: Optional[str] = None):
        super().__init__(x, y, node_id)
        self.width = width
        self.height = height
        self.color = color
        self.outline = outline

    def __repr__(self) -> str:
        return (f"RectNode(id={self.id!r}, x={self.x}, y={self.y}, "
                f"width={self.width}, height={self.height}, color={self.color!r})")

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: Optional[float]):
        self._width = max(0.0, value or 0.0)

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: Optional[float]):
        self._height = max(0.0, value or 0.0)

    @property
    def is_hit_target(self) -> bool:
        return True

    def local_bounding_box(self) -> LocalBox:
        return LocalBox(self.x, self.y, self.width, self.height)

    def absolute_bounding_box(self) -> AbsoluteBox:
        pos = self.absolute_position()
        return AbsoluteBox(self.id, pos.x, pos.y,
                           pos.x + self.width, pos.y + self.height)

    def draw(self, surface: "RenderSurface"):
        """Fill the rectangle, then stroke the outline if one is set."""
        pos = self.absolute_position()
        surface.fill_rect(pos.x, pos.y, self.width, self.height, self.color)
        if self.outline:
            surface.stroke_rect(pos.x, pos.y, self.width, self.height, self.outline)

"""Scene graph: node registry, tree queries and rendering order."""

import logging
from typing import Dict, Iterator, List, Optional, Set

from dragstage.errors import DuplicateIdError, UnknownIdError
from dragstage.node import AbsoluteBox, DEFAULT_RECT_COLOR, Node, RectNode
from dragstage.surface import RenderSurface

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "#454545"


class SceneGraph:
    """Owns the root nodes and the id -> node registry.

    Traversal is pre-order (node before its children, children in insertion
    order). The same order is used for drawing and for hit precedence.
    """

    def __init__(self, background: str = DEFAULT_BACKGROUND,
                 default_color: str = DEFAULT_RECT_COLOR):
        self.background = background
        self.default_color = default_color
        self.roots: List[str] = []
        self.registry: Dict[str, Node] = {}
        self._retired: Set[str] = set()

    def __len__(self) -> int:
        return len(self.registry)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.registry

    # ==================== Lookup ====================

    def find(self, node_id: str) -> Optional[Node]:
        """Return the node with this id, or None."""
        return self.registry.get(node_id)

    def get(self, node_id: str) -> Node:
        """Return the node with this id or raise UnknownIdError."""
        node = self.registry.get(node_id)
        if node is None:
            raise UnknownIdError(node_id)
        return node

    @property
    def root_nodes(self) -> List[Node]:
        return [self.registry[node_id] for node_id in self.roots]

    # ==================== Structure ====================

    def attach(self, node: Node, parent: Optional[Node] = None) -> Node:
        """Append ``node`` to ``parent``'s children, or to the roots."""
        # A node belongs to at most one graph at a time
        if (node.graph is not None or node.id in self.registry
                or node.id in self._retired):
            raise DuplicateIdError(node.id)

        if parent is not None:
            if self.registry.get(parent.id) is not parent:
                raise UnknownIdError(parent.id)
            parent.child_ids.append(node.id)
            node.parent_id = parent.id
        else:
            self.roots.append(node.id)
            node.parent_id = None

        node.graph = self
        self.registry[node.id] = node
        logger.debug("Attached %r under %s", node,
                     parent.id if parent is not None else "<root>")
        return node

    def detach(self, node_id: str):
        """Remove a node and all of its descendants. Absent ids are ignored."""
        node = self.registry.get(node_id)
        if node is None:
            return

        parent = node.parent
        if parent is not None:
            parent.child_ids.remove(node_id)
        elif node_id in self.roots:
            self.roots.remove(node_id)

        removed = [n.id for n in self._walk_from(node)]
        for removed_id in removed:
            gone = self.registry.pop(removed_id)
            gone.graph = None
            gone.parent_id = None
            gone.child_ids = []
            self._retired.add(removed_id)
        logger.debug("Detached %s (%d node(s))", node_id, len(removed))

    def add_node(self, x: float = 0.0, y: float = 0.0,
                 parent: Optional[Node] = None) -> Node:
        """Create and attach a plain positioning node."""
        return self.attach(Node(x, y), parent)

    def add_rect(self, parent: Optional[Node], width: float, height: float,
                 color: Optional[str] = None) -> RectNode:
        """Create and attach a rectangle at its parent's origin.

        Without a color the graph's ``default_color`` is used.
        """
        return self.attach(RectNode(width, height, color or self.default_color), parent)

    # ==================== Queries ====================

    def _walk_from(self, node: Node) -> Iterator[Node]:
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            children = [self.registry[child_id] for child_id in current.child_ids]
            stack.extend(reversed(children))

    def walk(self) -> Iterator[Node]:
        """Yield every node in pre-order, roots in attach order."""
        for root in self.root_nodes:
            yield from self._walk_from(root)

    def flatten_absolute_boxes(self) -> List[AbsoluteBox]:
        """Absolute boxes of every hit-testable node, in traversal order."""
        return [node.absolute_bounding_box() for node in self.walk()
                if node.is_hit_target]

    def render(self, surface: RenderSurface):
        """Clear the surface and draw every node in traversal order."""
        surface.clear(self.background)
        for node in self.walk():
            node.draw(surface)

"""DragStage: a scene graph of draggable rectangles on a cairo canvas."""

__version__ = "1.0.0"
__app_id__ = "io.github.dragstage.DragStage"

from dragstage.errors import DuplicateIdError, PrecursorError, SceneError, UnknownIdError
from dragstage.node import AbsoluteBox, LocalBox, Node, Point, RectNode, new_node_id
from dragstage.scene import SceneGraph
from dragstage.hittest import find_all_hits, find_first_hit
from dragstage.pointer import PointerEventType, PointerSource
from dragstage.drag import DragController, DragHandle, DragState

__all__ = [
    'SceneError', 'DuplicateIdError', 'PrecursorError', 'UnknownIdError',
    'Node', 'RectNode', 'Point', 'LocalBox', 'AbsoluteBox', 'new_node_id',
    'SceneGraph',
    'find_first_hit', 'find_all_hits',
    'PointerEventType', 'PointerSource',
    'DragController', 'DragHandle', 'DragState',
]

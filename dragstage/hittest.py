"""Point-in-box hit testing over a flattened box list."""

from typing import Iterable, List, Optional

from dragstage.node import AbsoluteBox, Point


def box_contains(box: AbsoluteBox, x: float, y: float) -> bool:
    """Module-level form of ``AbsoluteBox.contains`` for use as a predicate."""
    return box.contains(x, y)


def find_first_hit(point: Point, boxes: Iterable[AbsoluteBox]) -> Optional[AbsoluteBox]:
    """Return the first box containing ``point``, or None.

    Boxes must be given in scene traversal order; the earliest match wins
    regardless of size.
    """
    for box in boxes:
        if box_contains(box, point.x, point.y):
            return box
    return None


def find_all_hits(point: Point, boxes: Iterable[AbsoluteBox]) -> List[AbsoluteBox]:
    """Every box containing ``point``, in input order."""
    return [box for box in boxes if box_contains(box, point.x, point.y)]

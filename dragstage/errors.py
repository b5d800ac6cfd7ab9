"""Exceptions raised by the DragStage scene model."""

from typing import Any


class SceneError(Exception):
    """Base class for scene graph errors."""

    def __init__(self, message: str, node_id: Any = None):
        super().__init__(message)
        self.node_id = node_id


class DuplicateIdError(SceneError):
    """A node with the same id is (or was) already attached."""

    def __init__(self, node_id: Any):
        super().__init__(f"Node id {node_id!r} is already in use", node_id)


class PrecursorError(SceneError):
    """A positioning operation needs a parent but the node has none."""

    def __init__(self, node_id: Any, operation: str = "set_local_position"):
        super().__init__(
            f"{operation} requires a parent, node {node_id!r} has none", node_id
        )
        self.operation = operation


class UnknownIdError(SceneError, KeyError):
    """No node with the given id is registered."""

    def __init__(self, node_id: Any):
        super().__init__(f"Unknown node id {node_id!r}", node_id)

    def __str__(self) -> str:
        # KeyError quotes its message otherwise
        return self.args[0]

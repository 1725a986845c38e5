"""Structural checks run before rendering."""

from __future__ import annotations

from orgplan.errors import InvalidIntervalError
from orgplan.models.node import Node


def validate_tree(root: Node) -> None:
    """Check every node of ``root``'s tree.

    Raises:
        InvalidIntervalError: On the first node (pre-order) whose interval ends before it starts.
    """

    for node in root.iter_tree():
        if node.interval is not None:
            start, end = node.interval
            if end < start:
                raise InvalidIntervalError(node.title, start, end)

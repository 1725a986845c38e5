"""orgplan: build outline trees and write them as stars-prefixed plain-text outlines."""

from __future__ import annotations

from orgplan.errors import InvalidIntervalError, OrgPlanError, SinkWriteError
from orgplan.models import CheckList, ChecklistText, ListItem, Node, NodeBuilder, PlainText, Priority
from orgplan.render import iter_fragments, render, render_document, render_to_string
from orgplan.validation import validate_tree

__all__ = [
    "CheckList",
    "ChecklistText",
    "InvalidIntervalError",
    "ListItem",
    "Node",
    "NodeBuilder",
    "OrgPlanError",
    "PlainText",
    "Priority",
    "SinkWriteError",
    "iter_fragments",
    "render",
    "render_document",
    "render_to_string",
    "validate_tree",
]

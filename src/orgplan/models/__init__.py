"""Outline document models."""

from __future__ import annotations

from orgplan.models.node import Node, NodeBuilder
from orgplan.models.priority import Priority
from orgplan.models.text import CheckList, ChecklistText, ListItem, PlainText, Text

__all__ = [
    "CheckList",
    "ChecklistText",
    "ListItem",
    "Node",
    "NodeBuilder",
    "PlainText",
    "Priority",
    "Text",
]

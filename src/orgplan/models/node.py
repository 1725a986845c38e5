"""Outline nodes and the fluent builder that assembles them."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Iterable, Iterator, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from orgplan.models.priority import Priority
from orgplan.models.text import CheckList, Text, as_text

if TYPE_CHECKING:
    from orgplan.sinks import TextSink


def to_utc(ts: datetime) -> datetime:
    """Normalize a timestamp to UTC; naive values are taken as UTC."""

    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


class Node(BaseModel):
    """A headline with its metadata, content and child headlines.

    Nodes are frozen once built. Use :class:`NodeBuilder` to assemble them.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    todo: str | None = None
    priority: Priority | None = None
    scheduled: datetime | None = None
    interval: tuple[datetime, datetime] | None = None

    # (key, value) pairs, keys unique, rendered in insertion order
    properties: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()
    content: tuple[Text, ...] = ()

    @field_validator("properties", mode="before")
    @classmethod
    def _freeze_properties(cls, value: object) -> object:
        if isinstance(value, (Mapping, list, tuple)):
            # Repeated keys: last value wins, first position kept
            return tuple(dict(value).items())
        return value

    @field_validator("scheduled")
    @classmethod
    def _normalize_scheduled(cls, value: datetime | None) -> datetime | None:
        return to_utc(value) if value is not None else None

    @field_validator("interval")
    @classmethod
    def _normalize_interval(
        cls, value: tuple[datetime, datetime] | None
    ) -> tuple[datetime, datetime] | None:
        if value is None:
            return None
        start, end = value
        return to_utc(start), to_utc(end)

    def get_property(self, key: str, default: str | None = None) -> str | None:
        for k, v in self.properties:
            if k == key:
                return v
        return default

    def iter_tree(self) -> Iterator[Node]:
        """Yield this node and its descendants in pre-order."""

        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def render(self, sink: TextSink, level: int = 1) -> None:
        """Write this subtree to ``sink`` with ``level`` stars on the top headline."""

        from orgplan.render import render

        render(self, sink, level)


class NodeBuilder:
    """Fluent constructor for :class:`Node`.

    Every setter returns the builder so calls can be chained::

        NodeBuilder("Title").set_todo("TODO").set_priority(Priority.A).build()
    """

    def __init__(self, title: object) -> None:
        self._title = str(title)
        self._todo: str | None = None
        self._priority: Priority | None = None
        self._scheduled: datetime | None = None
        self._interval: tuple[datetime, datetime] | None = None
        self._properties: dict[str, str] = {}
        self._children: list[Node] = []
        self._content: list[Text] = []

    def set_todo(self, todo: object) -> NodeBuilder:
        self._todo = str(todo)
        return self

    def set_priority(self, priority: Priority) -> NodeBuilder:
        self._priority = priority
        return self

    def set_schedule(self, ts: datetime) -> NodeBuilder:
        self._scheduled = ts
        return self

    def set_interval(self, start: datetime, end: datetime) -> NodeBuilder:
        """Set the active time range. Ordering is checked by ``validate_tree``."""

        self._interval = (start, end)
        return self

    def add_property(self, key: object, value: object) -> NodeBuilder:
        self._properties[str(key)] = str(value)
        return self

    def add_children(self, children: Iterable[Node]) -> NodeBuilder:
        """Replace the children with ``children``."""

        self._children = list(children)
        return self

    def add_content(self, *segments: Text | CheckList | str) -> NodeBuilder:
        """Append content segments; strings and checklists are wrapped."""

        self._content.extend(as_text(s) for s in segments)
        return self

    def set_content(self, segments: Iterable[Text | CheckList | str]) -> NodeBuilder:
        """Replace the content with ``segments``."""

        self._content = [as_text(s) for s in segments]
        return self

    def build(self) -> Node:
        return Node(
            title=self._title,
            todo=self._todo,
            priority=self._priority,
            scheduled=self._scheduled,
            interval=self._interval,
            properties=tuple(self._properties.items()),
            children=tuple(self._children),
            content=tuple(self._content),
        )

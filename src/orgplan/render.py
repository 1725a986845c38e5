"""Outline serializer.

Emission order for a node at level ``L``:

1. headline: ``L`` stars, a space, the TODO keyword and priority cookie when set, the title;
2. ``SCHEDULED: <YYYY-MM-DD Ddd>`` when scheduled;
3. ``<YYYY-MM-DD Ddd HH:MM>-<YYYY-MM-DD Ddd HH:MM>`` when an interval is set;
4. the properties drawer when there are properties, entries in insertion order;
5. every content segment rendered at level 0, each followed by a newline;
6. every child at level ``L + 1``.

Traversal runs on an explicit work-list, so deep trees and deeply nested checklists do not
hit the interpreter's recursion limit.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Iterator, Union

from orgplan.logging import get_logger
from orgplan.models.node import Node
from orgplan.models.text import ChecklistText, ListItem, PlainText, Text
from orgplan.sinks import TextSink, write_fragments

logger = get_logger(__name__)

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# A pending unit of work: a literal fragment or an element to expand at a level.
_Work = Union[str, tuple[Union[Node, ListItem, PlainText, ChecklistText], int]]


def format_date(ts: datetime) -> str:
    """``2024-03-05 Tue``"""

    return f"{ts.year}-{ts.month:02d}-{ts.day:02d} {_WEEKDAYS[ts.weekday()]}"


def format_datetime(ts: datetime) -> str:
    """``2024-03-05 Tue 14:00``"""

    return f"{format_date(ts)} {ts.hour:02d}:{ts.minute:02d}"


def headline(node: Node, level: int) -> str:
    parts = ["*" * level, " "]
    if node.todo is not None:
        parts.append(f"{node.todo} ")
    if node.priority is not None:
        parts.append(f"{node.priority.render()} ")
    parts.append(node.title)
    parts.append("\n")
    return "".join(parts)


def _expand_node(node: Node, level: int) -> list[_Work]:
    work: list[_Work] = [headline(node, level)]
    if node.scheduled is not None:
        work.append(f"SCHEDULED: <{format_date(node.scheduled)}>\n")
    if node.interval is not None:
        start, end = node.interval
        work.append(f"<{format_datetime(start)}>-<{format_datetime(end)}>\n")
    if node.properties:
        work.append("   :PROPERTIES:\n")
        for key, value in node.properties:
            work.append(f"   :{key}: {value}\n")
        work.append("   :END:\n")
    for segment in node.content:
        work.append((segment, 0))
        work.append("\n")
    for child in node.children:
        work.append((child, level + 1))
    return work


def _expand_item(item: ListItem, level: int) -> list[_Work]:
    work: list[_Work] = ["\n" + "  " * level + "- [ ] "]
    work.extend((segment, level) for segment in item.content)
    return work


def _iter_work(start: _Work) -> Iterator[str]:
    stack: list[_Work] = [start]
    while stack:
        work = stack.pop()
        if isinstance(work, str):
            if work:
                yield work
            continue

        element, level = work
        if isinstance(element, Node):
            expanded = _expand_node(element, level)
        elif isinstance(element, ListItem):
            expanded = _expand_item(element, level)
        elif isinstance(element, PlainText):
            expanded = [element.text]
        elif isinstance(element, ChecklistText):
            # The item, not the segment, bumps the indent level
            expanded = [(item, level + 1) for item in element.checklist.items]
        else:
            raise TypeError(f"cannot render {type(element).__name__}")
        stack.extend(reversed(expanded))


def iter_fragments(node: Node, level: int = 1) -> Iterator[str]:
    """Lazily yield the text of ``node``'s subtree, headline at ``level`` stars."""

    return _iter_work((node, level))


def iter_text_fragments(text: Text, level: int = 0) -> Iterator[str]:
    """Lazily yield the text of one content segment."""

    return _iter_work((text, level))


def render(node: Node, sink: TextSink, level: int = 1) -> None:
    """Write ``node``'s subtree into ``sink``.

    Raises:
        SinkWriteError: If the sink fails.
    """

    written = write_fragments(iter_fragments(node, level), sink)
    logger.debug("rendered %r at level %d (%d chars)", node.title, level, written)


def render_text(text: Text, sink: TextSink, level: int = 0) -> None:
    """Write one content segment into ``sink``."""

    write_fragments(iter_text_fragments(text, level), sink)


def render_to_string(node: Node, level: int = 1) -> str:
    return "".join(iter_fragments(node, level))


def render_document(roots: Iterable[Node], sink: TextSink) -> None:
    """Render several top-level trees one after another."""

    count = 0
    for root in roots:
        render(root, sink, 1)
        count += 1
    logger.info("rendered %d top-level trees", count)

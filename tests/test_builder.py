"""Tests for NodeBuilder."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from orgplan.models import CheckList, ChecklistText, ListItem, Node, NodeBuilder, PlainText, Priority


def test_new_builder_has_only_a_title() -> None:
    """It should build a bare node from a title alone."""

    node = NodeBuilder("Title").build()

    assert node.title == "Title"
    assert node.todo is None
    assert node.priority is None
    assert node.scheduled is None
    assert node.interval is None
    assert node.properties == ()
    assert node.children == ()
    assert node.content == ()


def test_title_and_todo_are_stringified() -> None:
    """It should accept any value with a string form."""

    node = NodeBuilder(42).set_todo(7).build()
    assert node.title == "42"
    assert node.todo == "7"


def test_setters_overwrite_previous_values() -> None:
    """It should keep only the last todo, priority and schedule."""

    first = datetime(2024, 3, 4, tzinfo=timezone.utc)
    second = datetime(2024, 3, 5, tzinfo=timezone.utc)
    node = (
        NodeBuilder("T")
        .set_todo("TODO")
        .set_todo("DONE")
        .set_priority(Priority.A)
        .set_priority(Priority.D)
        .set_schedule(first)
        .set_schedule(second)
        .build()
    )

    assert node.todo == "DONE"
    assert node.priority is Priority.D
    assert node.scheduled == second


def test_add_children_replaces_instead_of_appending() -> None:
    """It should retain only the list passed to the last add_children call."""

    a, b, c = (NodeBuilder(t).build() for t in "abc")
    node = NodeBuilder("parent").add_children([a, b]).add_children([c]).build()

    assert [child.title for child in node.children] == ["c"]


def test_add_property_last_write_wins_and_keeps_position() -> None:
    """It should overwrite a repeated key in place."""

    node = (
        NodeBuilder("T")
        .add_property("A", "1")
        .add_property("B", "2")
        .add_property("A", "3")
        .build()
    )

    assert node.properties == (("A", "3"), ("B", "2"))
    assert node.get_property("A") == "3"
    assert node.get_property("C") is None


def test_add_content_wraps_strings_and_checklists() -> None:
    """It should append segments, wrapping plain values."""

    checklist = CheckList.from_strings(["x"])
    node = NodeBuilder("T").add_content("one").add_content(checklist, PlainText(text="two")).build()

    assert node.content == (
        PlainText(text="one"),
        ChecklistText(checklist=checklist),
        PlainText(text="two"),
    )


def test_set_content_replaces_segments() -> None:
    """It should drop previously added content."""

    node = NodeBuilder("T").add_content("old").set_content(["new"]).build()
    assert node.content == (PlainText(text="new"),)


def test_add_content_rejects_unknown_types() -> None:
    """It should refuse values that are not content."""

    with pytest.raises(TypeError):
        NodeBuilder("T").add_content(3.5)  # type: ignore[arg-type]


def test_built_node_is_frozen() -> None:
    """It should refuse field assignment after build."""

    node = NodeBuilder("T").build()
    with pytest.raises(ValidationError):
        node.content = (PlainText(text="late"),)  # type: ignore[misc]


def test_timestamps_are_normalized_to_utc() -> None:
    """It should convert aware timestamps to UTC and treat naive ones as UTC."""

    plus_two = timezone(timedelta(hours=2))
    node = (
        NodeBuilder("T")
        .set_schedule(datetime(2024, 3, 5, 1, 0, tzinfo=plus_two))
        .set_interval(datetime(2024, 3, 5, 16, 0, tzinfo=plus_two), datetime(2024, 3, 5, 15, 0))
        .build()
    )

    assert node.scheduled == datetime(2024, 3, 4, 23, 0, tzinfo=timezone.utc)
    assert node.interval == (
        datetime(2024, 3, 5, 14, 0, tzinfo=timezone.utc),
        datetime(2024, 3, 5, 15, 0, tzinfo=timezone.utc),
    )


def test_schedule_and_interval_can_coexist() -> None:
    """It should keep both planning fields when both are set."""

    ts = datetime(2024, 3, 5, 14, tzinfo=timezone.utc)
    node = NodeBuilder("T").set_schedule(ts).set_interval(ts, ts + timedelta(hours=1)).build()

    assert node.scheduled is not None
    assert node.interval is not None


def test_list_item_from_text() -> None:
    """It should build a single-segment item."""

    assert ListItem.from_text("a").content == (PlainText(text="a"),)


def test_iter_tree_is_preorder() -> None:
    """It should visit parents before children, children in order."""

    tree = (
        NodeBuilder("root")
        .add_children(
            [
                NodeBuilder("a").add_children([NodeBuilder("a1").build()]).build(),
                NodeBuilder("b").build(),
            ]
        )
        .build()
    )

    assert [n.title for n in tree.iter_tree()] == ["root", "a", "a1", "b"]


def test_built_properties_cannot_be_mutated() -> None:
    """It should keep the properties of a built node out of reach of item assignment."""

    node = NodeBuilder("T").add_property("A", "1").build()

    with pytest.raises(TypeError):
        node.properties["B"] = "2"  # type: ignore[index]
    assert node.properties == (("A", "1"),)


def test_built_node_is_hashable() -> None:
    """It should hash equal trees alike."""

    def make() -> object:
        return (
            NodeBuilder("T")
            .add_property("A", "1")
            .add_content("note", CheckList.from_strings(["x"]))
            .add_children([NodeBuilder("child").build()])
            .build()
        )

    assert hash(make()) == hash(make())


def test_properties_from_mapping_keep_order() -> None:
    """It should accept a mapping on direct construction and keep its order."""

    node = Node(title="T", properties={"B": "2", "A": "1"})
    assert node.properties == (("B", "2"), ("A", "1"))

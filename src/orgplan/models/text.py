"""Content segments attached to outline nodes.

A segment is either plain text or a checklist. Checklist items hold further segments, so
checklists can nest to any depth.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from orgplan.sinks import TextSink


class PlainText(BaseModel):
    """A literal string, written verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["plain"] = "plain"
    text: str

    def render(self, sink: TextSink, level: int = 0) -> None:
        from orgplan.render import render_text

        render_text(self, sink, level)


class ListItem(BaseModel):
    """One checklist entry; its segments render on the item's line."""

    model_config = ConfigDict(frozen=True)

    content: tuple[Text, ...] = ()

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_segments(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return tuple(as_text(v) for v in value)
        return value

    @classmethod
    def from_text(cls, text: Text | str) -> "ListItem":
        """Build an item holding a single segment."""

        return cls(content=(as_text(text),))


class CheckList(BaseModel):
    """An ordered list of unchecked items."""

    model_config = ConfigDict(frozen=True)

    items: tuple[ListItem, ...] = ()

    @classmethod
    def from_strings(cls, labels: Iterable[str]) -> "CheckList":
        """Build a checklist with one plain item per label."""

        return cls(items=tuple(ListItem.from_text(label) for label in labels))


class ChecklistText(BaseModel):
    """A checklist embedded in content."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["checklist"] = "checklist"
    checklist: CheckList

    def render(self, sink: TextSink, level: int = 0) -> None:
        from orgplan.render import render_text

        render_text(self, sink, level)


Text = Annotated[Union[PlainText, ChecklistText], Field(discriminator="kind")]


def as_text(value: Text | CheckList | str) -> Text:
    """Wrap strings and checklists into content segments.

    Raises:
        TypeError: If ``value`` cannot be used as a segment.
    """

    if isinstance(value, (PlainText, ChecklistText)):
        return value
    if isinstance(value, str):
        return PlainText(text=value)
    if isinstance(value, CheckList):
        return ChecklistText(checklist=value)
    if isinstance(value, dict):
        # Let pydantic pick the variant from ``kind``
        return value  # type: ignore[return-value]
    raise TypeError(f"cannot use {type(value).__name__} as outline content")


ListItem.model_rebuild()
CheckList.model_rebuild()
ChecklistText.model_rebuild()

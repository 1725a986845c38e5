"""Exceptions raised by orgplan."""

from __future__ import annotations


class OrgPlanError(RuntimeError):
    """Base error for outline building and rendering failures."""


class InvalidIntervalError(OrgPlanError, ValueError):
    """An active time range ends before it starts."""

    def __init__(self, title: str, start: object, end: object) -> None:
        super().__init__(f"interval of {title!r} ends before it starts: {start} > {end}")
        self.title = title
        self.start = start
        self.end = end


class SinkWriteError(OrgPlanError):
    """The output sink failed while the outline was being written."""

"""Recurring meetings placed into the month plan."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from orgplan.models import Node, NodeBuilder


class RecurringMeeting(BaseModel):
    """A meeting held on one weekday, with its roster."""

    title: str
    weekday: int = Field(ge=0, le=6, description="0 is Monday")
    start: timedelta = Field(description="Offset from the day's start timestamp")
    end: timedelta
    attendees: str
    location: str = "zoom"
    even_iso_weeks_only: bool = False

    def occurs_on(self, day: datetime) -> bool:
        if day.weekday() != self.weekday:
            return False
        if self.even_iso_weeks_only:
            return day.isocalendar()[1] % 2 == 0
        return True

    def to_node(self, day: datetime) -> Node:
        return (
            NodeBuilder(self.title)
            .add_property("ATTENDEES", self.attendees)
            .add_property("LOCATION", self.location)
            .set_interval(day + self.start, day + self.end)
            .build()
        )

    def occurrences(self, days: list[datetime]) -> list[Node]:
        """One node per matching day, in day order."""

        return [self.to_node(d) for d in days if self.occurs_on(d)]


def _meeting(title: str, weekday: int, start_h: float, end_h: float, attendees: str, **kw: object) -> RecurringMeeting:
    return RecurringMeeting(
        title=title,
        weekday=weekday,
        start=timedelta(hours=start_h),
        end=timedelta(hours=end_h),
        attendees=attendees,
        **kw,
    )


MON, TUE, WED, THU, FRI = range(5)

PLANNING_MEETINGS: tuple[RecurringMeeting, ...] = (
    _meeting("Software Weekly", TUE, 14, 15, "agrossi, odonzel, acalloni"),
    _meeting("Software Update", TUE, 15, 16, "snygard, acalloni, odonzel, ksalk, ankushc, avaranasi"),
    _meeting("Technical Staff", THU, 11, 12.5, "agrossi, lvendram, abenvenu, aghetti, friva"),
    _meeting("Web Services", MON, 16, 17, "snygard; avaranasi"),
    _meeting(
        "GDW",
        FRI,
        17,
        18,
        "snygard; ksalk; deeabbott; stamboli; ijdembi; mvezzoli; ccardon; avaranasi; kaflorent",
    ),
    _meeting("Gel/TD", FRI, 10, 11, "pfilini; odonzel; acalloni; friva"),
    _meeting(
        "SW Reliability",
        WED,
        10,
        11,
        "mvezzoli; dventric; ngalbiat; rbottini; lvendram; agrossi; acalloni; svigano; lbortesi; trossi",
        even_iso_weeks_only=True,
    ),
    _meeting(
        "TD/IT Review",
        WED,
        10,
        11,
        "pmancini; friva; agrossi; mvezzoli; ppezzimenti;dspiniel; aattina; bbonini; pfilini",
        even_iso_weeks_only=True,
    ),
)

GDW_MEETINGS: tuple[RecurringMeeting, ...] = (
    _meeting("GDW Working", FRI, 17, 18, "ksalk; deeabbott; stamboli; ijdembi; mvezzoli; ccardon; avaranasi"),
    _meeting("Param Data Crunch in DFS", FRI, 9, 10, "scottlin; avaranasi"),
)

"""Month plan generator."""

from __future__ import annotations

from orgplan.generator.meetings import GDW_MEETINGS, PLANNING_MEETINGS, RecurringMeeting
from orgplan.generator.month import (
    SECTIONS,
    build_month,
    data_analysis,
    dated_title,
    division_support,
    horizon,
    lab_infrastructure,
    planning,
)

__all__ = [
    "GDW_MEETINGS",
    "PLANNING_MEETINGS",
    "RecurringMeeting",
    "SECTIONS",
    "build_month",
    "data_analysis",
    "dated_title",
    "division_support",
    "horizon",
    "lab_infrastructure",
    "planning",
]

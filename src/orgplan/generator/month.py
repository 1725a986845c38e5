"""Month plan: the trees written by ``orgplan generate``."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

from orgplan.config import DEFAULT_HORIZON_DAYS
from orgplan.generator.meetings import GDW_MEETINGS, MON, PLANNING_MEETINGS
from orgplan.logging import get_logger, section_context
from orgplan.models import CheckList, Node, NodeBuilder, Priority

logger = get_logger(__name__)

DAILY_CHECKLIST = ("insert new activities", "update jira", "read emails")

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def dated_title(dt: datetime, template: str) -> str:
    """Fill ``{year}`` and ``{month}`` (English month name) in ``template``."""

    return template.format(year=dt.year, month=_MONTHS[dt.month - 1])


def horizon(dt: datetime, days: int = DEFAULT_HORIZON_DAYS) -> list[datetime]:
    """``dt`` and the following ``days - 1`` days, same time of day."""

    return [dt + timedelta(days=i) for i in range(days)]


def _track(title: str, todo: str | None = "NEXT") -> Node:
    builder = NodeBuilder(title)
    if todo is not None:
        builder.set_todo(todo)
    return builder.build()


def _project(title: str, category: str, children: list[Node]) -> Node:
    return (
        NodeBuilder(title)
        .set_todo("NEXT")
        .add_children(children)
        .add_property("CATEGORY", category)
        .build()
    )


def planning(dt: datetime, horizon_days: int = DEFAULT_HORIZON_DAYS) -> Node:
    """Daily planning, weekly chores and recurring meetings for the month."""

    days = horizon(dt, horizon_days)
    nodes: list[Node] = [
        NodeBuilder("Daily planning")
        .set_todo("TODO")
        .set_priority(Priority.A)
        .set_schedule(d)
        .add_content("Plan, Do, Check, Act", CheckList.from_strings(DAILY_CHECKLIST))
        .build()
        for d in days
    ]
    nodes.extend(
        NodeBuilder("Send Accountability").set_todo("TODO").set_priority(Priority.B).set_schedule(d).build()
        for d in days
        if d.weekday() == MON
    )
    for meeting in PLANNING_MEETINGS:
        nodes.extend(meeting.occurrences(days))
    nodes.append(NodeBuilder("Insert time leave").set_schedule(dt).set_priority(Priority.C).build())

    month = (
        NodeBuilder(dated_title(dt, "{year} {month} Planning [/]"))
        .add_children(nodes)
        .set_todo("TODO")
        .build()
    )
    plan = NodeBuilder("Planning").add_children([month]).add_property("CATEGORY", "Planning").build()
    return NodeBuilder("Group").add_children([plan]).build()


def data_analysis(dt: datetime, horizon_days: int = DEFAULT_HORIZON_DAYS) -> Node:
    days = horizon(dt, horizon_days)
    arda = _project(
        dated_title(dt, "Arda {month} {year} [%]"),
        "Arda",
        [
            _track(dated_title(dt, "Arda Maintenance {month} [/]"), todo=None),
            _track(dated_title(dt, "Arda Meetings {month} [/]"), todo=None),
        ],
    )

    meetings: list[Node] = []
    for meeting in GDW_MEETINGS:
        meetings.extend(meeting.occurrences(days))
    gdw = _project(
        dated_title(dt, "GDW {month} {year} [%]"),
        "GDW",
        [
            _track(dated_title(dt, "GDW Maintenance {month} [/]")),
            NodeBuilder(dated_title(dt, "GDW Meetings {month} [/]"))
            .set_todo("NEXT")
            .add_children(meetings)
            .build(),
        ],
    )

    rtn = _project(
        dated_title(dt, "RTN ML {month} {year}"),
        "RTN",
        [
            _track(dated_title(dt, "RTN ML Maintenance {month}")),
            _track(dated_title(dt, "RTN ML Meetings {month}")),
        ],
    )
    return NodeBuilder("Data Analysis").add_children([arda, gdw, rtn]).build()


def _maintained_project(dt: datetime, name: str, category: str) -> Node:
    return _project(
        dated_title(dt, f"{name} {{month}} {{year}} [%]"),
        category,
        [
            _track(dated_title(dt, f"{name} Maintenance {{month}} [/]")),
            _track(dated_title(dt, f"{name} Meetings {{month}} [/]")),
        ],
    )


def lab_infrastructure(dt: datetime, horizon_days: int = DEFAULT_HORIZON_DAYS) -> Node:
    return (
        NodeBuilder("Infrastructure")
        .add_children(
            [
                _maintained_project(dt, "Masterbook", "MB2"),
                _maintained_project(dt, "Pycron", "PYCRON"),
            ]
        )
        .build()
    )


def division_support(dt: datetime, horizon_days: int = DEFAULT_HORIZON_DAYS) -> Node:
    return NodeBuilder("TPG").add_children([_maintained_project(dt, "PATM", "PATM")]).build()


SECTIONS: dict[str, Callable[[datetime, int], Node]] = {
    "planning": planning,
    "data-analysis": data_analysis,
    "infrastructure": lab_infrastructure,
    "division-support": division_support,
}


def build_month(
    dt: datetime,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    sections: list[str] | None = None,
) -> list[Node]:
    """Build the requested sections (all of them by default) in ``SECTIONS`` order.

    Raises:
        KeyError: If a section name is unknown.
    """

    wanted = list(SECTIONS) if not sections else sections
    unknown = [s for s in wanted if s not in SECTIONS]
    if unknown:
        raise KeyError(f"unknown sections: {', '.join(unknown)}")

    roots: list[Node] = []
    for name in SECTIONS:
        if name not in wanted:
            continue
        with section_context(name):
            root = SECTIONS[name](dt, horizon_days)
            logger.info("built %d nodes", sum(1 for _ in root.iter_tree()))
        roots.append(root)
    return roots

"""CLI entrypoints for orgplan."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import typer

from orgplan.config import load_settings
from orgplan.errors import OrgPlanError
from orgplan.generator import SECTIONS, build_month
from orgplan.logging import configure_logging, get_logger, log_exception
from orgplan.render import render_document
from orgplan.sinks import open_sink
from orgplan.validation import validate_tree

app = typer.Typer(add_completion=False, help="Generate month plans as plain-text outlines")
logger = get_logger(__name__)


@app.callback()
def main() -> None:
    """orgplan command group."""


@app.command()
def generate(
    start: str = typer.Argument(..., help="Start timestamp, e.g. '2024-03-04 08:00:00' (UTC)."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file; stdout when omitted or '-'.",
    ),
    days: int | None = typer.Option(
        None,
        "--days",
        min=1,
        max=366,
        help="Look-ahead in days (overrides ORGPLAN_HORIZON_DAYS).",
    ),
    section: list[str] | None = typer.Option(
        None,
        "--section",
        "-s",
        help=f"Section to include, repeatable. One of: {', '.join(SECTIONS)}.",
    ),
) -> None:
    """Build the month plan starting at START and write it as an outline."""

    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        dt = datetime.strptime(start, settings.start_format).replace(tzinfo=timezone.utc)
    except ValueError as e:
        raise typer.BadParameter(f"parse failed of {start!r}: {e}", param_hint="START") from e

    unknown = [s for s in section or [] if s not in SECTIONS]
    if unknown:
        raise typer.BadParameter(f"unknown section(s): {', '.join(unknown)}", param_hint="--section")

    horizon_days = days if days is not None else settings.horizon_days
    logger.info("starting date: %s, horizon %d days", dt.isoformat(), horizon_days)

    roots = build_month(dt, horizon_days, section or None)
    try:
        if settings.validate_intervals:
            for root in roots:
                validate_tree(root)
        with open_sink(output) as sink:
            render_document(roots, sink)
    except OrgPlanError:
        log_exception(logger, "outline generation failed", start=start, output=str(output))
        raise typer.Exit(code=1)

    if output is not None and str(output) != "-":
        typer.echo(str(output))


if __name__ == "__main__":
    app()

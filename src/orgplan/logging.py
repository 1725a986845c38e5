"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


_section_var: contextvars.ContextVar[str] = contextvars.ContextVar("orgplan_section", default="-")


class _ContextFilter(logging.Filter):
    """Inject the current document section into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.section = _section_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def section_context(section: str) -> Any:
    """Temporarily bind the document section being built or rendered.

    Args:
        section: Section name, e.g. ``planning``.
    """

    token = _section_var.set(section)
    try:
        yield
    finally:
        _section_var.reset(token)


def current_section() -> str:
    """Return the section bound in the current context."""

    return _section_var.get()


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Records go to stderr so that an outline written to stdout stays clean.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
    )
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s section=%(section)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log an exception with optional structured context."""

    if context:
        logger.exception("%s | context=%s", msg, context)
    else:
        logger.exception("%s", msg)

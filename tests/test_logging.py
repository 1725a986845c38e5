"""Tests for logging helpers."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from orgplan.generator import build_month
from orgplan.logging import current_section, section_context

START = datetime(2024, 3, 4, tzinfo=timezone.utc)


def test_section_context_binds_and_resets() -> None:
    """It should expose the bound section only inside the block."""

    assert current_section() == "-"
    with section_context("planning"):
        assert current_section() == "planning"
    assert current_section() == "-"


def test_generator_logs_per_section(caplog: pytest.LogCaptureFixture) -> None:
    """It should log one node count per built section."""

    with caplog.at_level(logging.INFO, logger="orgplan.generator.month"):
        build_month(START, 3, ["infrastructure"])

    assert [r.getMessage() for r in caplog.records] == ["built 7 nodes"]

"""Tests for ``tech_radar.logging`` configuration and request context."""

from __future__ import annotations

import logging

import pytest

from tech_radar.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_context,
    set_context,
)
from tech_radar.logging.context import add_context_processor


@pytest.fixture(autouse=True)
def _reset():
    clear_context()
    yield
    clear_context()
    configure_logging(level="WARNING", force=True)


def _package_level() -> int:
    return logging.getLogger("tech_radar").level


class TestConfigureLogging:
    def test_debug_level(self):
        configure_logging(level="DEBUG", force=True)
        assert _package_level() == logging.DEBUG

    def test_level_is_case_insensitive(self):
        configure_logging(level="warning", format="json", force=True)
        assert _package_level() == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(level="CHATTY", force=True)
        assert _package_level() == logging.INFO

    def test_second_call_is_noop_without_force(self):
        configure_logging(level="WARNING", force=True)
        configure_logging(level="DEBUG")
        assert _package_level() == logging.WARNING


class TestContext:
    def test_empty_by_default(self):
        assert get_context().to_dict() == {}

    def test_set_replaces(self):
        set_context(request_id="r1", caller="api")
        set_context(caller="cli")
        assert get_context().to_dict() == {"caller": "cli"}

    def test_bind_merges(self):
        set_context(request_id="r1", caller="api")
        bind_context(operation="list_technologies", unknown="ignored")
        assert get_context().to_dict() == {
            "request_id": "r1",
            "caller": "api",
            "operation": "list_technologies",
        }

    def test_processor_adds_context_without_overwriting(self):
        set_context(request_id="r1", path="/api/radar")
        event = add_context_processor(None, "info", {"event": "x", "path": "/other"})
        assert event == {"event": "x", "request_id": "r1", "path": "/other"}

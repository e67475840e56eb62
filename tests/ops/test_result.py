"""Tests for ``tech_radar.ops.result`` envelopes."""

from __future__ import annotations

from tech_radar.ops.result import OperationResult, PagedResult, not_found, start_timer


class TestOperationResult:
    def test_ok(self):
        result = OperationResult.ok({"a": 1}, warnings=["careful"])
        assert result.success
        assert result.to_dict() == {"success": True, "data": {"a": 1}, "warnings": ["careful"]}

    def test_fail(self):
        result = OperationResult.fail("INVALID_INPUT", "bad", details={"field": "tags"})
        assert not result.success
        assert result.data is None
        assert result.to_dict()["error"] == {"code": "INVALID_INPUT", "message": "bad", "details": {"field": "tags"}}

    def test_not_found_helper(self):
        result = not_found("Project", 7)
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == "Project '7' not found"


class TestPagedResult:
    def test_paginate_everything(self):
        result = PagedResult.paginate([1, 2, 3])
        assert (result.data, result.total, result.limit, result.has_more) == ([1, 2, 3], 3, 3, False)

    def test_paginate_window(self):
        result = PagedResult.paginate(list(range(10)), limit=3, offset=3)
        assert result.data == [3, 4, 5]
        assert result.has_more is True

    def test_offset_past_end(self):
        result = PagedResult.paginate([1, 2], offset=5)
        assert result.data == []
        assert result.total == 2
        assert result.has_more is False

    def test_empty(self):
        result = PagedResult.paginate([])
        assert (result.data, result.total, result.limit) == ([], 0, 1)

    def test_to_dict_includes_paging(self):
        d = PagedResult.paginate([1, 2], limit=1).to_dict()
        assert (d["total"], d["limit"], d["offset"], d["has_more"]) == (2, 1, 0, True)


def test_timer_counts_up():
    timer = start_timer()
    assert timer.elapsed_ms >= 0

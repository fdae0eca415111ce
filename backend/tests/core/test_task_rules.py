"""Task Rules — partial-update-by-presence merge and weather trigger.

Tests:
    - Only truthy fields survive the merge
    - Empty strings never clear a field
    - Status normalized to its wire value; unknown status is InputValidationError
    - Weather lookup needed only when a city is present
"""

import pytest

from taskapi.core.domain_types import TaskStatus
from taskapi.core.errors import InputValidationError
from taskapi.core.task_rules import merge_task_fields, needs_weather_lookup


def test_merge_keeps_only_present_fields():
    assert merge_task_fields(title="New") == {"title": "New"}


def test_merge_ignores_empty_strings():
    assert merge_task_fields(title="", description="", city="") == {}


def test_merge_all_fields():
    changes = merge_task_fields(
        title="T", description="D", city="Paris", status=TaskStatus.COMPLETED,
    )
    assert changes == {
        "title": "T", "description": "D", "city": "Paris", "status": "Completed",
    }


def test_merge_accepts_status_wire_string():
    assert merge_task_fields(status="In-Progress") == {"status": "In-Progress"}


def test_merge_rejects_unknown_status():
    with pytest.raises(InputValidationError) as exc:
        merge_task_fields(status="Archived")
    assert exc.value.field == "status"
    assert exc.value.http_status == 400
    assert "In-Progress" in exc.value.message


def test_weather_lookup_only_with_city():
    assert needs_weather_lookup({"city": "Oslo"}) is True
    assert needs_weather_lookup({"title": "x"}) is False
    assert needs_weather_lookup({}) is False

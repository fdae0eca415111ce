"""Task Rules — pure field-merge logic for task creation and partial update.

Invariants:
    - A field is replaced only when the incoming value is present AND truthy
    - Empty string never clears a stored field (presence semantics, not PATCH)
    - owner_id never appears in the merged changes
    - An unknown status raises InputValidationError, never a bare ValueError
    - needs_weather_lookup is True exactly when a truthy city is supplied

Design Decisions:
    - Pure functions over ORM objects: the shell applies the returned dict,
      so the merge rules are testable without a database
"""

from taskapi.core.domain_types import TaskStatus
from taskapi.core.errors import InputValidationError


def merge_task_fields(
    title: str | None = None,
    description: str | None = None,
    city: str | None = None,
    status: TaskStatus | str | None = None,
) -> dict:
    """Return only the fields an update should overwrite."""
    incoming = {
        "title": title,
        "description": description,
        "city": city,
        "status": _status_value(status) if status else None,
    }
    return {name: value for name, value in incoming.items() if value}


def _status_value(status: TaskStatus | str) -> str:
    try:
        return TaskStatus(status).value
    except ValueError:
        allowed = ", ".join(s.value for s in TaskStatus)
        raise InputValidationError(
            f"status must be one of: {allowed}", "status",
        )


def needs_weather_lookup(changes: dict) -> bool:
    """Weather is re-derived only when the update carries a city."""
    return bool(changes.get("city"))

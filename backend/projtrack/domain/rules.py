"""Business rules — the status state machines for schedule weeks and groups."""
from __future__ import annotations
from projtrack.domain.common.result import Result

SCHEDULE_STATUSES = ("pending", "current", "completed")
GROUP_STATUSES = ("pending", "approved", "rejected")

# Forward moves a professor is expected to make. Re-invoking a decision is not
# blocked, so these are informational for callers (see is_expected_group_transition).
GROUP_TRANSITIONS: dict[str, set[str]] = {
    "pending": {"approved", "rejected"},
}


def validate_schedule_status(new_status: object) -> Result[str]:
    if new_status not in SCHEDULE_STATUSES:
        return Result.fail(
            f"Invalid status '{new_status}'. Must be one of {list(SCHEDULE_STATUSES)}."
        )
    return Result.ok(new_status)


def validate_group_status(new_status: object) -> Result[str]:
    if new_status not in GROUP_STATUSES:
        return Result.fail(
            f"Invalid status '{new_status}'. Must be one of {list(GROUP_STATUSES)}."
        )
    return Result.ok(new_status)


def is_expected_group_transition(current_status: str, new_status: str) -> bool:
    """True for pending → approved/rejected, the only moves the UI offers."""
    return new_status in GROUP_TRANSITIONS.get(current_status, set())

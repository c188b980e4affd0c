"""Health check and semester progress derived from the configured start date."""
from __future__ import annotations

from fastapi import APIRouter

from projtrack.core.config import SEMESTER_START, SEMESTER_WEEKS
from projtrack.domain.semester import current_week, week_progress

router = APIRouter(tags=["semester"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/api/semester/progress")
def semester_progress():
    return {
        "startDate": SEMESTER_START.isoformat(),
        "totalWeeks": SEMESTER_WEEKS,
        "currentWeek": current_week(SEMESTER_START, SEMESTER_WEEKS),
        "progress": week_progress(SEMESTER_START, SEMESTER_WEEKS),
    }

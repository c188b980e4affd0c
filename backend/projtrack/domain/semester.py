"""Semester calendar helpers: week windows and progress through the term."""
from __future__ import annotations
import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple

WEEK = timedelta(days=7)


def _start_of(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def week_dates(semester_start: date, week_number: int) -> Tuple[datetime, datetime]:
    """Return (start, end) of a 1-based week. End is six days after start."""
    week_start = _start_of(semester_start) + (week_number - 1) * WEEK
    return week_start, week_start + timedelta(days=6)


def current_week(semester_start: date, total_weeks: int, now: Optional[datetime] = None) -> int:
    """Number of weeks elapsed since the semester start (rounded up), capped at total_weeks."""
    now = now or datetime.now(timezone.utc)
    elapsed = abs(now - _start_of(semester_start))
    weeks = math.ceil(elapsed / WEEK)
    return min(weeks, total_weeks)


def week_progress(semester_start: date, total_weeks: int, now: Optional[datetime] = None) -> int:
    """Percentage of the semester elapsed, 0..100."""
    now = now or datetime.now(timezone.utc)
    elapsed = abs(now - _start_of(semester_start))
    weeks = math.ceil(elapsed / WEEK)
    return min(math.floor(weeks / total_weeks * 100 + 0.5), 100)

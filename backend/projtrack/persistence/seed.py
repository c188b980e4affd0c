"""Populate a fresh store with the semester's reference data.

Call once, before the API starts serving. Calling it again duplicates every
seed row under new identifiers.
"""
from __future__ import annotations
import logging
from datetime import date
from typing import Optional

from projtrack.core.config import SEMESTER_START
from projtrack.domain.schemas import validate_insert
from projtrack.domain.semester import week_dates
from projtrack.persistence.interfaces.storage import Storage
from projtrack.persistence.seed_data import (
    NOTIFICATIONS,
    PROFESSOR_ACCOUNT,
    PROFESSORS,
    PROJECTS,
    WEEK_TEMPLATES,
)

logger = logging.getLogger(__name__)


def _initial_week_status(index: int) -> str:
    if index == 0:
        return "completed"
    if index == 1:
        return "current"
    return "pending"


def seed_schedule(store: Storage, project_id: str, semester_start: date) -> None:
    for index, week in enumerate(WEEK_TEMPLATES):
        start, end = week_dates(semester_start, index + 1)
        store.create_weekly_schedule_item(validate_insert("weekly_schedule", {
            **week,
            "projectId": project_id,
            "weekNumber": index + 1,
            "startDate": start,
            "endDate": end,
            "status": _initial_week_status(index),
        }))


def seed_storage(store: Storage, semester_start: Optional[date] = None) -> None:
    semester_start = semester_start or SEMESTER_START

    store.create_user(validate_insert("user", PROFESSOR_ACCOUNT))

    for professor in PROFESSORS:
        store.create_professor(validate_insert("professor", professor))

    for data in PROJECTS:
        project = store.create_project(validate_insert("project", data))
        seed_schedule(store, project.id, semester_start)

    for notification in NOTIFICATIONS:
        store.create_notification(validate_insert("notification", notification))

    logger.info(
        "Seeded %d professors, %d projects x %d weeks, %d notifications",
        len(PROFESSORS), len(PROJECTS), len(WEEK_TEMPLATES), len(NOTIFICATIONS),
    )

"""Projects + weekly schedule endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from projtrack.api.serializers import serialize_project, serialize_schedule
from projtrack.container import get_store
from projtrack.domain.errors import NotFoundError, ValidationError
from projtrack.domain.rules import validate_schedule_status
from projtrack.domain.schemas import InsertProject, InsertWeeklySchedule, StatusChangeBody
from projtrack.persistence.interfaces.storage import Storage

router = APIRouter(prefix="/api", tags=["projects"])


# ------------------------------------------------------------------
# Projects
# ------------------------------------------------------------------
@router.get("/projects")
def list_projects(store: Storage = Depends(get_store)):
    return [serialize_project(p) for p in store.get_projects()]


@router.post("/projects", status_code=status.HTTP_201_CREATED)
def create_project(body: InsertProject, store: Storage = Depends(get_store)):
    return serialize_project(store.create_project(body))


@router.get("/projects/{project_id}")
def get_project(project_id: str, store: Storage = Depends(get_store)):
    project = store.get_project(project_id)
    if not project:
        raise NotFoundError("Project not found")
    return serialize_project(project)


# ------------------------------------------------------------------
# Weekly schedule
# ------------------------------------------------------------------
@router.get("/projects/{project_id}/schedule")
def get_project_schedule(project_id: str, store: Storage = Depends(get_store)):
    return [serialize_schedule(s) for s in store.get_weekly_schedule(project_id)]


@router.post("/schedule", status_code=status.HTTP_201_CREATED)
def create_schedule_item(body: InsertWeeklySchedule, store: Storage = Depends(get_store)):
    return serialize_schedule(store.create_weekly_schedule_item(body))


@router.get("/schedule/{schedule_id}")
def get_schedule_item(schedule_id: str, store: Storage = Depends(get_store)):
    item = store.get_weekly_schedule_item(schedule_id)
    if not item:
        raise NotFoundError("Schedule item not found")
    return serialize_schedule(item)


@router.patch("/schedule/{schedule_id}/status")
def update_schedule_status(
    schedule_id: str,
    body: StatusChangeBody,
    store: Storage = Depends(get_store),
):
    check = validate_schedule_status(body.status)
    if not check.is_success:
        raise ValidationError("Invalid status", errors=[{"field": "status", "message": check.error}])

    updated = store.update_weekly_schedule_status(schedule_id, check.value)
    if not updated:
        raise NotFoundError("Schedule item not found")
    return serialize_schedule(updated)

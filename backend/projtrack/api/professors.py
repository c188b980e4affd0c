"""Professor directory + notification feed."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from projtrack.api.serializers import serialize_notification, serialize_professor
from projtrack.container import get_store
from projtrack.domain.errors import NotFoundError
from projtrack.domain.schemas import InsertNotification, InsertProfessor
from projtrack.persistence.interfaces.storage import Storage

router = APIRouter(prefix="/api", tags=["professors"])


# ------------------------------------------------------------------
# Professors
# ------------------------------------------------------------------
@router.get("/professors")
def list_professors(store: Storage = Depends(get_store)):
    return [serialize_professor(p) for p in store.get_professors()]


@router.post("/professors", status_code=status.HTTP_201_CREATED)
def create_professor(body: InsertProfessor, store: Storage = Depends(get_store)):
    return serialize_professor(store.create_professor(body))


@router.get("/professors/{professor_id}")
def get_professor(professor_id: str, store: Storage = Depends(get_store)):
    professor = store.get_professor(professor_id)
    if not professor:
        raise NotFoundError("Professor not found")
    return serialize_professor(professor)


# ------------------------------------------------------------------
# Notifications
# ------------------------------------------------------------------
@router.get("/notifications")
def list_notifications(store: Storage = Depends(get_store)):
    return [serialize_notification(n) for n in store.get_notifications()]


@router.post("/notifications", status_code=status.HTTP_201_CREATED)
def create_notification(body: InsertNotification, store: Storage = Depends(get_store)):
    return serialize_notification(store.create_notification(body))


@router.patch("/notifications/{notification_id}/read")
def mark_notification_read(notification_id: str, store: Storage = Depends(get_store)):
    updated = store.mark_notification_as_read(notification_id)
    if not updated:
        raise NotFoundError("Notification not found")
    return serialize_notification(updated)

"""Groups, membership, interests and delivery completions."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from projtrack.api.serializers import (
    serialize_completion,
    serialize_group,
    serialize_interest,
    serialize_member,
)
from projtrack.container import get_store
from projtrack.domain.errors import NotFoundError, ValidationError
from projtrack.domain.rules import validate_group_status
from projtrack.domain.schemas import (
    AddMemberBody,
    InsertDeliveryCompletion,
    InsertGroup,
    InsertGroupMember,
    InsertProjectInterest,
    StatusChangeBody,
)
from projtrack.persistence.interfaces.storage import Storage

router = APIRouter(prefix="/api", tags=["groups"])


# ------------------------------------------------------------------
# Groups
# ------------------------------------------------------------------
@router.get("/groups")
def list_groups(store: Storage = Depends(get_store)):
    return [serialize_group(g) for g in store.get_groups()]


@router.post("/groups", status_code=status.HTTP_201_CREATED)
def create_group(body: InsertGroup, store: Storage = Depends(get_store)):
    return serialize_group(store.create_group(body))


@router.get("/groups/{group_id}")
def get_group(group_id: str, store: Storage = Depends(get_store)):
    group = store.get_group(group_id)
    if not group:
        raise NotFoundError("Group not found")
    return serialize_group(group)


@router.get("/projects/{project_id}/groups")
def list_project_groups(project_id: str, store: Storage = Depends(get_store)):
    return [serialize_group(g) for g in store.get_groups_by_project(project_id)]


@router.patch("/groups/{group_id}/status")
def update_group_status(
    group_id: str,
    body: StatusChangeBody,
    store: Storage = Depends(get_store),
):
    check = validate_group_status(body.status)
    if not check.is_success:
        raise ValidationError("Invalid status", errors=[{"field": "status", "message": check.error}])

    updated = store.update_group_status(group_id, check.value)
    if not updated:
        raise NotFoundError("Group not found")
    return serialize_group(updated)


# ------------------------------------------------------------------
# Members
# ------------------------------------------------------------------
@router.get("/groups/{group_id}/members")
def list_members(group_id: str, store: Storage = Depends(get_store)):
    return [serialize_member(m) for m in store.get_group_members(group_id)]


@router.post("/groups/{group_id}/members", status_code=status.HTTP_201_CREATED)
def add_member(group_id: str, body: AddMemberBody, store: Storage = Depends(get_store)):
    member = store.add_group_member(InsertGroupMember(group_id=group_id, user_id=body.user_id))
    return serialize_member(member)


@router.delete("/groups/{group_id}/members/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_member(group_id: str, user_id: str, store: Storage = Depends(get_store)):
    if not store.remove_group_member(group_id, user_id):
        raise NotFoundError("Group member not found")


# ------------------------------------------------------------------
# Interests
# ------------------------------------------------------------------
@router.get("/projects/{project_id}/interests")
def list_project_interests(project_id: str, store: Storage = Depends(get_store)):
    return [serialize_interest(i) for i in store.get_project_interests(project_id)]


@router.post("/interests", status_code=status.HTTP_201_CREATED)
def create_interest(body: InsertProjectInterest, store: Storage = Depends(get_store)):
    return serialize_interest(store.create_project_interest(body))


# ------------------------------------------------------------------
# Delivery completions
# ------------------------------------------------------------------
@router.get("/groups/{group_id}/completions")
def list_completions(group_id: str, store: Storage = Depends(get_store)):
    return [serialize_completion(c) for c in store.get_delivery_completions(group_id)]


@router.post("/completions", status_code=status.HTTP_201_CREATED)
def create_completion(body: InsertDeliveryCompletion, store: Storage = Depends(get_store)):
    return serialize_completion(store.create_delivery_completion(body))


@router.get("/schedule/{schedule_id}/groups/{group_id}/completed")
def check_completed(schedule_id: str, group_id: str, store: Storage = Depends(get_store)):
    return {"completed": store.is_delivery_completed(schedule_id, group_id)}

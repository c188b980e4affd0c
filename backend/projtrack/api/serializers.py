"""Record → JSON dict converters. camelCase keys, ISO-8601 timestamps."""
from __future__ import annotations
from datetime import datetime
from typing import Optional

from projtrack.domain.models import (
    DeliveryCompletion,
    Group,
    GroupMember,
    Notification,
    Professor,
    Project,
    ProjectInterest,
    User,
    WeeklySchedule,
)


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def serialize_project(p: Project) -> dict:
    return {
        "id": p.id,
        "title": p.title,
        "description": p.description,
        "theme": p.theme,
        "context": p.context,
        "problem": p.problem,
        "architecture": p.architecture,
        "technologies": p.technologies,
        "modules": p.modules,
        "deliverables": p.deliverables,
        "createdAt": _iso(p.created_at),
    }


def serialize_schedule(s: WeeklySchedule) -> dict:
    return {
        "id": s.id,
        "projectId": s.project_id,
        "weekNumber": s.week_number,
        "title": s.title,
        "startDate": _iso(s.start_date),
        "endDate": _iso(s.end_date),
        "tasks": s.tasks,
        "deliverable": s.deliverable,
        "evaluationCriteria": s.evaluation_criteria,
        "status": s.status,
    }


def serialize_professor(p: Professor) -> dict:
    return {
        "id": p.id,
        "name": p.name,
        "specialty": p.specialty,
        "expertise": p.expertise,
        "avatar": p.avatar,
        "email": p.email,
    }


def serialize_notification(n: Notification) -> dict:
    return {
        "id": n.id,
        "title": n.title,
        "message": n.message,
        "type": n.type,
        "priority": n.priority,
        "isRead": n.is_read,
        "createdAt": _iso(n.created_at),
    }


def serialize_user(u: User) -> dict:
    # password is never serialized
    return {
        "id": u.id,
        "username": u.username,
        "name": u.name,
        "type": u.type,
        "githubProfile": u.github_profile,
        "createdAt": _iso(u.created_at),
    }


def serialize_group(g: Group) -> dict:
    return {
        "id": g.id,
        "name": g.name,
        "projectId": g.project_id,
        "leaderId": g.leader_id,
        "status": g.status,
        "createdAt": _iso(g.created_at),
    }


def serialize_member(m: GroupMember) -> dict:
    return {
        "id": m.id,
        "groupId": m.group_id,
        "userId": m.user_id,
        "joinedAt": _iso(m.joined_at),
    }


def serialize_interest(i: ProjectInterest) -> dict:
    return {
        "id": i.id,
        "userId": i.user_id,
        "projectId": i.project_id,
        "message": i.message,
        "createdAt": _iso(i.created_at),
    }


def serialize_completion(c: DeliveryCompletion) -> dict:
    return {
        "id": c.id,
        "scheduleId": c.schedule_id,
        "groupId": c.group_id,
        "completedAt": _iso(c.completed_at),
        "notes": c.notes,
    }

"""In-memory implementation of Storage.

Each collection is a dict keyed by a generated UUID. FastAPI runs sync
handlers on a thread pool, so every operation runs under one re-entrant lock;
check-then-write sequences (username uniqueness, member removal, status
updates) are atomic with respect to each other.

Records handed out are deep copies and structured inputs are copied on the
way in, so callers cannot change stored state except through the operations
below.
"""
from __future__ import annotations
import copy
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional, TypeVar

from projtrack.core.security import hash_password, verify_password
from projtrack.domain.common.result import Result
from projtrack.domain.errors import ConflictError, ValidationError
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
from projtrack.domain.rules import (
    is_expected_group_transition,
    validate_group_status,
    validate_schedule_status,
)
from projtrack.domain.schemas import (
    InsertDeliveryCompletion,
    InsertGroup,
    InsertGroupMember,
    InsertNotification,
    InsertProfessor,
    InsertProject,
    InsertProjectInterest,
    InsertUser,
    InsertWeeklySchedule,
)
from projtrack.persistence.interfaces.storage import Storage

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def _copy(record: Optional[R]) -> Optional[R]:
    return copy.deepcopy(record) if record is not None else None


def _copies(records) -> list:
    return [copy.deepcopy(r) for r in records]


class MemStorage(Storage):

    def __init__(self):
        self._lock = threading.RLock()
        self._projects: Dict[str, Project] = {}
        self._weekly_schedules: Dict[str, WeeklySchedule] = {}
        self._professors: Dict[str, Professor] = {}
        self._notifications: Dict[str, Notification] = {}
        self._users: Dict[str, User] = {}
        self._groups: Dict[str, Group] = {}
        self._group_members: Dict[str, GroupMember] = {}
        self._project_interests: Dict[str, ProjectInterest] = {}
        self._delivery_completions: Dict[str, DeliveryCompletion] = {}

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def get_projects(self) -> List[Project]:
        with self._lock:
            return _copies(self._projects.values())

    def get_project(self, project_id: str) -> Optional[Project]:
        with self._lock:
            return _copy(self._projects.get(project_id))

    def create_project(self, data: InsertProject) -> Project:
        project = Project(
            id=_new_id(),
            title=data.title,
            description=data.description,
            theme=data.theme,
            context=data.context,
            problem=data.problem,
            architecture=copy.deepcopy(data.architecture),
            technologies=copy.deepcopy(data.technologies),
            modules=copy.deepcopy(data.modules),
            deliverables=copy.deepcopy(data.deliverables),
            created_at=_now(),
        )
        with self._lock:
            self._projects[project.id] = project
        logger.debug("Created project %s (theme %d)", project.id, project.theme)
        return _copy(project)

    # ------------------------------------------------------------------
    # Weekly schedule
    # ------------------------------------------------------------------
    def get_weekly_schedule(self, project_id: str) -> List[WeeklySchedule]:
        with self._lock:
            items = [s for s in self._weekly_schedules.values() if s.project_id == project_id]
        return _copies(sorted(items, key=lambda s: s.week_number))

    def get_weekly_schedule_item(self, schedule_id: str) -> Optional[WeeklySchedule]:
        with self._lock:
            return _copy(self._weekly_schedules.get(schedule_id))

    def create_weekly_schedule_item(self, data: InsertWeeklySchedule) -> WeeklySchedule:
        item = WeeklySchedule(
            id=_new_id(),
            project_id=data.project_id or None,
            week_number=data.week_number,
            title=data.title,
            start_date=data.start_date,
            end_date=data.end_date,
            tasks=list(data.tasks),
            deliverable=data.deliverable,
            evaluation_criteria=list(data.evaluation_criteria),
            status=data.status or "pending",
        )
        with self._lock:
            self._weekly_schedules[item.id] = item
        return _copy(item)

    def update_weekly_schedule_status(self, schedule_id: str, status: str) -> Optional[WeeklySchedule]:
        check = validate_schedule_status(status)
        if not check.is_success:
            raise ValidationError("Invalid status", errors=[{"field": "status", "message": check.error}])

        with self._lock:
            item = self._weekly_schedules.get(schedule_id)
            if item is None:
                return None
            previous = item.status
            item.status = status
            logger.debug("Schedule %s status %s -> %s", schedule_id, previous, status)
            return _copy(item)

    # ------------------------------------------------------------------
    # Professors
    # ------------------------------------------------------------------
    def get_professors(self) -> List[Professor]:
        with self._lock:
            return _copies(self._professors.values())

    def get_professor(self, professor_id: str) -> Optional[Professor]:
        with self._lock:
            return _copy(self._professors.get(professor_id))

    def create_professor(self, data: InsertProfessor) -> Professor:
        professor = Professor(
            id=_new_id(),
            name=data.name,
            specialty=data.specialty,
            expertise=list(data.expertise),
            avatar=data.avatar or None,
            email=data.email or None,
        )
        with self._lock:
            self._professors[professor.id] = professor
        return _copy(professor)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    def get_notifications(self) -> List[Notification]:
        with self._lock:
            items = list(enumerate(self._notifications.values()))
        # Insertion position breaks created_at ties so the later one still comes first
        ordered = sorted(items, key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return _copies(n for _, n in ordered)

    def create_notification(self, data: InsertNotification) -> Notification:
        notification = Notification(
            id=_new_id(),
            title=data.title,
            message=data.message,
            type=data.type,
            created_at=_now(),
            priority=data.priority or "medium",
            is_read=bool(data.is_read),
        )
        with self._lock:
            self._notifications[notification.id] = notification
        return _copy(notification)

    def mark_notification_as_read(self, notification_id: str) -> Optional[Notification]:
        with self._lock:
            notification = self._notifications.get(notification_id)
            if notification is None:
                return None
            notification.is_read = True
            return _copy(notification)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_users(self) -> List[User]:
        with self._lock:
            return _copies(self._users.values())

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            return _copy(self._users.get(user_id))

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return _copy(self._find_by_username(username))

    def _find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def create_user(self, data: InsertUser) -> User:
        # bcrypt is slow; hash before taking the lock
        hashed = hash_password(data.password) if data.password else None
        with self._lock:
            if data.username and self._find_by_username(data.username) is not None:
                raise ConflictError(f"Username '{data.username}' is already taken")
            user = User(
                id=_new_id(),
                name=data.name,
                type=data.type,
                created_at=_now(),
                username=data.username or None,
                password=hashed,
                github_profile=data.github_profile or None,
            )
            self._users[user.id] = user
        logger.debug("Created %s user %s", user.type, user.id)
        return _copy(user)

    def authenticate_user(self, username: str, password: str) -> Result[User]:
        with self._lock:
            user = _copy(self._find_by_username(username))
        if user is None or not user.password or not verify_password(password, user.password):
            return Result.fail("Invalid credentials")
        return Result.ok(user)

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------
    def get_groups(self) -> List[Group]:
        with self._lock:
            return _copies(self._groups.values())

    def get_group(self, group_id: str) -> Optional[Group]:
        with self._lock:
            return _copy(self._groups.get(group_id))

    def get_groups_by_project(self, project_id: str) -> List[Group]:
        with self._lock:
            return _copies(g for g in self._groups.values() if g.project_id == project_id)

    def create_group(self, data: InsertGroup) -> Group:
        group = Group(
            id=_new_id(),
            name=data.name,
            created_at=_now(),
            project_id=data.project_id or None,
            leader_id=data.leader_id or None,
            status="pending",
        )
        with self._lock:
            self._groups[group.id] = group
        logger.debug("Created group %s for project %s", group.id, group.project_id)
        return _copy(group)

    def update_group_status(self, group_id: str, status: str) -> Optional[Group]:
        check = validate_group_status(status)
        if not check.is_success:
            raise ValidationError("Invalid status", errors=[{"field": "status", "message": check.error}])

        with self._lock:
            group = self._groups.get(group_id)
            if group is None:
                return None
            if not is_expected_group_transition(group.status, status):
                logger.info("Group %s moved %s -> %s outside the approval flow", group_id, group.status, status)
            group.status = status
            return _copy(group)

    # ------------------------------------------------------------------
    # Group members
    # ------------------------------------------------------------------
    def get_group_members(self, group_id: str) -> List[GroupMember]:
        with self._lock:
            return _copies(m for m in self._group_members.values() if m.group_id == group_id)

    def add_group_member(self, data: InsertGroupMember) -> GroupMember:
        member = GroupMember(
            id=_new_id(),
            group_id=data.group_id,
            user_id=data.user_id,
            joined_at=_now(),
        )
        with self._lock:
            self._group_members[member.id] = member
        return _copy(member)

    def remove_group_member(self, group_id: str, user_id: str) -> bool:
        with self._lock:
            for member_id, member in self._group_members.items():
                if member.group_id == group_id and member.user_id == user_id:
                    del self._group_members[member_id]
                    return True
        return False

    # ------------------------------------------------------------------
    # Project interests
    # ------------------------------------------------------------------
    def get_project_interests(self, project_id: str) -> List[ProjectInterest]:
        with self._lock:
            return _copies(i for i in self._project_interests.values() if i.project_id == project_id)

    def get_user_interests(self, user_id: str) -> List[ProjectInterest]:
        with self._lock:
            return _copies(i for i in self._project_interests.values() if i.user_id == user_id)

    def create_project_interest(self, data: InsertProjectInterest) -> ProjectInterest:
        interest = ProjectInterest(
            id=_new_id(),
            user_id=data.user_id,
            project_id=data.project_id,
            created_at=_now(),
            message=data.message or None,
        )
        with self._lock:
            self._project_interests[interest.id] = interest
        return _copy(interest)

    # ------------------------------------------------------------------
    # Delivery completions
    # ------------------------------------------------------------------
    def get_delivery_completions(self, group_id: str) -> List[DeliveryCompletion]:
        with self._lock:
            return _copies(c for c in self._delivery_completions.values() if c.group_id == group_id)

    def create_delivery_completion(self, data: InsertDeliveryCompletion) -> DeliveryCompletion:
        completion = DeliveryCompletion(
            id=_new_id(),
            schedule_id=data.schedule_id,
            group_id=data.group_id,
            completed_at=_now(),
            notes=data.notes or None,
        )
        with self._lock:
            self._delivery_completions[completion.id] = completion
        return _copy(completion)

    def is_delivery_completed(self, schedule_id: str, group_id: str) -> bool:
        with self._lock:
            return any(
                c.schedule_id == schedule_id and c.group_id == group_id
                for c in self._delivery_completions.values()
            )

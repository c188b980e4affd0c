"""Abstract storage interface for every tracker collection."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from projtrack.domain.common.result import Result
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


class Storage(ABC):
    """Lookups return ``None`` when the record is absent; lists never fail."""

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    @abstractmethod
    def get_projects(self) -> List[Project]:
        ...

    @abstractmethod
    def get_project(self, project_id: str) -> Optional[Project]:
        ...

    @abstractmethod
    def create_project(self, data: InsertProject) -> Project:
        """Assign id + createdAt. Theme is not checked for uniqueness."""
        ...

    # ------------------------------------------------------------------
    # Weekly schedule
    # ------------------------------------------------------------------
    @abstractmethod
    def get_weekly_schedule(self, project_id: str) -> List[WeeklySchedule]:
        """Items of one project, ordered by week_number ASC."""
        ...

    @abstractmethod
    def get_weekly_schedule_item(self, schedule_id: str) -> Optional[WeeklySchedule]:
        ...

    @abstractmethod
    def create_weekly_schedule_item(self, data: InsertWeeklySchedule) -> WeeklySchedule:
        ...

    @abstractmethod
    def update_weekly_schedule_status(self, schedule_id: str, status: str) -> Optional[WeeklySchedule]:
        """Mutate status in place. Raises ValidationError for an unknown status."""
        ...

    # ------------------------------------------------------------------
    # Professors
    # ------------------------------------------------------------------
    @abstractmethod
    def get_professors(self) -> List[Professor]:
        ...

    @abstractmethod
    def get_professor(self, professor_id: str) -> Optional[Professor]:
        ...

    @abstractmethod
    def create_professor(self, data: InsertProfessor) -> Professor:
        ...

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    @abstractmethod
    def get_notifications(self) -> List[Notification]:
        """Newest first by created_at."""
        ...

    @abstractmethod
    def create_notification(self, data: InsertNotification) -> Notification:
        ...

    @abstractmethod
    def mark_notification_as_read(self, notification_id: str) -> Optional[Notification]:
        """Idempotent: an already-read notification is returned unchanged."""
        ...

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    @abstractmethod
    def get_users(self) -> List[User]:
        ...

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    def create_user(self, data: InsertUser) -> User:
        """Raises ConflictError when a supplied username is already taken."""
        ...

    @abstractmethod
    def authenticate_user(self, username: str, password: str) -> Result[User]:
        """Result.ok(user) on an exact username + password match, Result.fail otherwise."""
        ...

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------
    @abstractmethod
    def get_groups(self) -> List[Group]:
        ...

    @abstractmethod
    def get_group(self, group_id: str) -> Optional[Group]:
        ...

    @abstractmethod
    def get_groups_by_project(self, project_id: str) -> List[Group]:
        ...

    @abstractmethod
    def create_group(self, data: InsertGroup) -> Group:
        ...

    @abstractmethod
    def update_group_status(self, group_id: str, status: str) -> Optional[Group]:
        """Raises ValidationError for anything outside pending/approved/rejected."""
        ...

    # ------------------------------------------------------------------
    # Group members
    # ------------------------------------------------------------------
    @abstractmethod
    def get_group_members(self, group_id: str) -> List[GroupMember]:
        ...

    @abstractmethod
    def add_group_member(self, data: InsertGroupMember) -> GroupMember:
        ...

    @abstractmethod
    def remove_group_member(self, group_id: str, user_id: str) -> bool:
        """Delete the first matching membership. Returns True if one was deleted."""
        ...

    # ------------------------------------------------------------------
    # Project interests
    # ------------------------------------------------------------------
    @abstractmethod
    def get_project_interests(self, project_id: str) -> List[ProjectInterest]:
        ...

    @abstractmethod
    def get_user_interests(self, user_id: str) -> List[ProjectInterest]:
        ...

    @abstractmethod
    def create_project_interest(self, data: InsertProjectInterest) -> ProjectInterest:
        ...

    # ------------------------------------------------------------------
    # Delivery completions
    # ------------------------------------------------------------------
    @abstractmethod
    def get_delivery_completions(self, group_id: str) -> List[DeliveryCompletion]:
        ...

    @abstractmethod
    def create_delivery_completion(self, data: InsertDeliveryCompletion) -> DeliveryCompletion:
        ...

    @abstractmethod
    def is_delivery_completed(self, schedule_id: str, group_id: str) -> bool:
        ...

"""Domain records — pure Python, no storage or HTTP dependencies."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Literal, Optional, Union

ScheduleStatus = Literal["pending", "current", "completed"]
GroupStatus = Literal["pending", "approved", "rejected"]
NotificationType = Literal["deadline", "feedback", "announcement"]
NotificationPriority = Literal["low", "medium", "high"]
UserType = Literal["professor", "student"]

# Project JSON fields are either a list of strings or a string-keyed mapping
StringList = List[str]
StringKeyedMap = Dict[str, str]
StructuredField = Union[StringList, StringKeyedMap]


@dataclass
class Project:
    id: str
    title: str
    description: str
    theme: int
    context: str
    problem: str
    architecture: StructuredField
    technologies: StructuredField
    modules: StructuredField
    deliverables: StructuredField
    created_at: datetime


@dataclass
class WeeklySchedule:
    id: str
    project_id: Optional[str]
    week_number: int
    title: str
    start_date: datetime
    end_date: datetime
    tasks: List[str] = field(default_factory=list)
    deliverable: str = ""
    evaluation_criteria: List[str] = field(default_factory=list)
    status: ScheduleStatus = "pending"


@dataclass
class Professor:
    id: str
    name: str
    specialty: str
    expertise: List[str] = field(default_factory=list)
    avatar: Optional[str] = None
    email: Optional[str] = None


@dataclass
class Notification:
    id: str
    title: str
    message: str
    type: NotificationType
    created_at: datetime
    priority: NotificationPriority = "medium"
    is_read: bool = False


@dataclass
class User:
    id: str
    name: str
    type: UserType
    created_at: datetime
    username: Optional[str] = None
    password: Optional[str] = None  # bcrypt hash
    github_profile: Optional[str] = None


@dataclass
class Group:
    id: str
    name: str
    created_at: datetime
    project_id: Optional[str] = None
    leader_id: Optional[str] = None
    status: GroupStatus = "pending"


@dataclass
class GroupMember:
    id: str
    group_id: str
    user_id: str
    joined_at: datetime


@dataclass
class ProjectInterest:
    id: str
    user_id: str
    project_id: str
    created_at: datetime
    message: Optional[str] = None


@dataclass
class DeliveryCompletion:
    id: str
    schedule_id: str
    group_id: str
    completed_at: datetime
    notes: Optional[str] = None

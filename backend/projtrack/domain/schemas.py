"""Insertable projections of every entity, plus the request bodies of the API.

Insert schemas exclude server-assigned fields (``id``, ``createdAt``,
``joinedAt``, ``completedAt``). Field names are camelCase on the wire and
snake_case in Python; both spellings are accepted on input.
"""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from projtrack.domain.errors import ValidationError
from projtrack.domain.models import (
    NotificationPriority,
    NotificationType,
    ScheduleStatus,
    StructuredField,
    UserType,
)


class InsertModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# bcrypt only hashes the first 72 bytes
MAX_PASSWORD_BYTES = 72


def _limit_password_bytes(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


# ------------------------------------------------------------------
# Insert schemas
# ------------------------------------------------------------------
class InsertProject(InsertModel):
    title: str = Field(min_length=1)
    description: str
    theme: int = Field(ge=1)
    context: str
    problem: str
    architecture: StructuredField
    technologies: StructuredField
    modules: StructuredField
    deliverables: StructuredField


class InsertWeeklySchedule(InsertModel):
    project_id: Optional[str] = None
    week_number: int = Field(ge=1)
    title: str = Field(min_length=1)
    start_date: datetime
    end_date: datetime
    tasks: List[str]
    deliverable: str
    evaluation_criteria: List[str]
    status: Optional[ScheduleStatus] = None

    @model_validator(mode="after")
    def _check_date_order(self) -> "InsertWeeklySchedule":
        self.start_date = _as_utc(self.start_date)
        self.end_date = _as_utc(self.end_date)
        if self.start_date > self.end_date:
            raise ValueError("startDate must not be after endDate")
        return self


class InsertProfessor(InsertModel):
    name: str = Field(min_length=1)
    specialty: str
    expertise: List[str]
    avatar: Optional[str] = None
    email: Optional[str] = None


class InsertNotification(InsertModel):
    title: str = Field(min_length=1)
    message: str
    type: NotificationType
    priority: Optional[NotificationPriority] = None
    is_read: Optional[bool] = None


class InsertUser(InsertModel):
    username: Optional[str] = Field(default=None, min_length=1)
    password: Optional[str] = Field(default=None, min_length=1)
    name: str = Field(min_length=1)
    type: UserType
    github_profile: Optional[str] = None

    @field_validator("password")
    @classmethod
    def _check_password_bytes(cls, value: Optional[str]) -> Optional[str]:
        return _limit_password_bytes(value)


class InsertGroup(InsertModel):
    name: str = Field(min_length=1)
    project_id: Optional[str] = None
    leader_id: Optional[str] = None


class InsertGroupMember(InsertModel):
    group_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)


class InsertProjectInterest(InsertModel):
    user_id: str = Field(min_length=1)
    project_id: str = Field(min_length=1)
    message: Optional[str] = None


class InsertDeliveryCompletion(InsertModel):
    schedule_id: str = Field(min_length=1)
    group_id: str = Field(min_length=1)
    notes: Optional[str] = None


INSERT_SCHEMAS: dict[str, Type[InsertModel]] = {
    "project": InsertProject,
    "weekly_schedule": InsertWeeklySchedule,
    "professor": InsertProfessor,
    "notification": InsertNotification,
    "user": InsertUser,
    "group": InsertGroup,
    "group_member": InsertGroupMember,
    "project_interest": InsertProjectInterest,
    "delivery_completion": InsertDeliveryCompletion,
}


# ------------------------------------------------------------------
# Request bodies that are not entity inserts
# ------------------------------------------------------------------
class RegisterStudentRequest(InsertModel):
    username: Optional[str] = Field(default=None, min_length=1)
    password: Optional[str] = Field(default=None, min_length=1)
    name: str = Field(min_length=1)
    github_profile: Optional[str] = None

    @field_validator("password")
    @classmethod
    def _check_password_bytes(cls, value: Optional[str]) -> Optional[str]:
        return _limit_password_bytes(value)

    def to_insert(self) -> InsertUser:
        return InsertUser(
            username=self.username,
            password=self.password,
            name=self.name,
            type="student",
            github_profile=self.github_profile,
        )


class LoginRequest(InsertModel):
    # Optional so a missing credential is reported as a 400 by the handler
    username: Optional[str] = None
    password: Optional[str] = None


class StatusChangeBody(InsertModel):
    status: Optional[Any] = None


class AddMemberBody(InsertModel):
    user_id: str = Field(min_length=1)


# ------------------------------------------------------------------
# Validation entry point
# ------------------------------------------------------------------
def format_errors(errors: list[dict]) -> list[dict]:
    """Flatten pydantic error dicts into ``{field, message}`` pairs."""
    out = []
    for err in errors:
        loc = list(err.get("loc", ()))
        # FastAPI prefixes request-body errors with "body"
        if loc and loc[0] == "body":
            loc = loc[1:]
        field = ".".join(str(p) for p in loc) or "body"
        out.append({"field": field, "message": err.get("msg", "Invalid value")})
    return out


def validate_insert(kind: str, raw: Any) -> InsertModel:
    """Parse ``raw`` against the insert schema of ``kind``; all-or-nothing."""
    schema = INSERT_SCHEMAS.get(kind)
    if schema is None:
        raise ValueError(f"Unknown entity kind '{kind}'")
    try:
        return schema.model_validate(raw)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {kind.replace('_', ' ')}", errors=format_errors(e.errors()))

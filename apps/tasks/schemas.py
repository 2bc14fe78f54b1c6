"""API Schemas for Tasks app - Pydantic/Ninja schemas for request/response validation."""
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from ninja import Schema
from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from apps.core.errors import CONSTRAINT_ERROR_TYPE
from . import constants as c
from .dtos import TaskCreateDTO, TaskFilterDTO, TaskUpdateDTO
from .models import TaskStatus


def _reject(message: str) -> PydanticCustomError:
    return PydanticCustomError(CONSTRAINT_ERROR_TYPE, message)


def validate_title(value: Optional[str], empty_message: str) -> str:
    if not value:
        raise _reject(empty_message)
    if len(value) > c.TITLE_MAX_LENGTH:
        raise _reject(c.TITLE_TOO_LONG)
    return value


def validate_description(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value) > c.DESCRIPTION_MAX_LENGTH:
        raise _reject(c.DESCRIPTION_TOO_LONG)
    return value


def validate_status(value: Optional[str]) -> str:
    if value not in TaskStatus.values:
        raise _reject(c.STATUS_INVALID)
    return value


# =============================================================================
# Request Schemas
# =============================================================================

class TaskBodyIn(Schema):
    """Base for JSON request bodies: anything but an object is rejected."""

    @model_validator(mode='before')
    @classmethod
    def require_object(cls, data):
        # ninja may hand over its DjangoGetter wrapper; look at what it wraps
        raw = getattr(data, '_obj', data)
        if not isinstance(raw, dict):
            raise _reject(c.BODY_NOT_OBJECT)
        return data


class TaskCreateIn(TaskBodyIn):
    """Body for POST /tasks."""
    title: str
    description: Optional[str] = None

    @field_validator('title')
    @classmethod
    def check_title(cls, value):
        return validate_title(value, c.TITLE_REQUIRED)

    @field_validator('description')
    @classmethod
    def check_description(cls, value):
        return validate_description(value)

    def to_dto(self) -> TaskCreateDTO:
        return TaskCreateDTO(title=self.title, description=self.description)


class TaskUpdateIn(TaskBodyIn):
    """
    Body for PUT /tasks/{id}.
    Every field is optional; omitted fields are left untouched.
    description may be sent as null to clear it.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None

    @field_validator('title')
    @classmethod
    def check_title(cls, value):
        return validate_title(value, c.TITLE_EMPTY)

    @field_validator('description')
    @classmethod
    def check_description(cls, value):
        return validate_description(value)

    @field_validator('status')
    @classmethod
    def check_status(cls, value):
        return validate_status(value)

    def to_dto(self) -> TaskUpdateDTO:
        # exclude_unset keeps "sent as null" apart from "not sent"
        return TaskUpdateDTO(**self.model_dump(exclude_unset=True))


class TaskFilterIn(Schema):
    """Query parameters for GET /tasks."""
    status: Optional[str] = None
    limit: int = c.DEFAULT_LIMIT
    offset: int = c.DEFAULT_OFFSET

    @field_validator('status')
    @classmethod
    def check_status(cls, value):
        # no status means no filter
        if value is None:
            return None
        return validate_status(value)

    @field_validator('limit')
    @classmethod
    def check_limit(cls, value):
        if not c.MIN_LIMIT <= value <= c.MAX_LIMIT:
            raise _reject(c.LIMIT_OUT_OF_RANGE)
        return value

    @field_validator('offset')
    @classmethod
    def check_offset(cls, value):
        if value < 0:
            raise _reject(c.OFFSET_NEGATIVE)
        if value > c.MAX_OFFSET:
            raise _reject(c.OFFSET_TOO_LARGE)
        return value

    def to_dto(self) -> TaskFilterDTO:
        return TaskFilterDTO(status=self.status, limit=self.limit, offset=self.offset)


class TaskStatusQueryIn(Schema):
    """Query parameters for GET /tasks/filter/by-status."""
    status: str

    @field_validator('status')
    @classmethod
    def check_status(cls, value):
        return validate_status(value)


# =============================================================================
# Response Schemas
# =============================================================================

class TaskOut(Schema):
    id: UUID
    title: str
    description: Optional[str]
    status: str
    created_at: datetime = Field(serialization_alias='createdAt')
    updated_at: datetime = Field(serialization_alias='updatedAt')


class TaskEnvelopeOut(Schema):
    success: bool
    data: TaskOut


class TaskMessageEnvelopeOut(TaskEnvelopeOut):
    message: str


class TaskListEnvelopeOut(Schema):
    success: bool
    data: List[TaskOut]


class TaskPageEnvelopeOut(Schema):
    success: bool
    data: List[TaskOut]
    total: int
    limit: int
    offset: int


class ErrorOut(Schema):
    """Error response."""
    success: bool
    error: str

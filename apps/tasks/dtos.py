"""
Data Transfer Objects for tasks.

TaskDTO is what the service hands back to callers; the *InputDTOs are the
already-validated shapes coming in from the API schemas.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import List, Optional, Union
from uuid import UUID

from .constants import DEFAULT_LIMIT, DEFAULT_OFFSET


class _Unset:
    """Marks a field that was not supplied at all (as opposed to null)."""
    __slots__ = ()

    def __repr__(self):
        return 'UNSET'

    def __bool__(self):
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class TaskDTO:
    id: UUID
    title: str
    description: Optional[str]
    status: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TaskCreateDTO:
    title: str
    description: Optional[str] = None


@dataclass(frozen=True)
class TaskUpdateDTO:
    """
    Partial update. Each field is tri-state:
    UNSET (leave column alone), None (store null) or a value.
    Only description may legitimately be None.
    """
    title: Union[str, _Unset] = UNSET
    description: Union[Optional[str], _Unset] = UNSET
    status: Union[str, _Unset] = UNSET

    def changes(self) -> dict:
        """Column values to write, omitting UNSET fields."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }


@dataclass(frozen=True)
class TaskFilterDTO:
    status: Optional[str] = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET


@dataclass(frozen=True)
class TaskPageDTO:
    items: List[TaskDTO] = field(default_factory=list)
    total: int = 0
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

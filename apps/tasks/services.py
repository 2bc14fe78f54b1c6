"""
Task Service - business rules for task records.

All reads and writes go through TaskService, which owns the existence
checks; TaskRepository owns the rows themselves.

Known gap: update() and delete() check existence and then mutate in a
second store call. A row removed in between is reported as not found by
the mutating call, but the two calls are not one atomic operation.
"""
import logging
from typing import List, Union
from uuid import UUID

from apps.core.errors import MissingParameterError, NotFoundError, ValidationError
from . import constants as c
from .dtos import TaskCreateDTO, TaskDTO, TaskFilterDTO, TaskPageDTO, TaskUpdateDTO
from .models import Task, TaskStatus
from .repository import TaskRepository

logger = logging.getLogger(__name__)


def _task_to_dto(task: Task) -> TaskDTO:
    return TaskDTO(
        id=task.id,
        title=task.title,
        description=task.description,
        status=str(task.status),
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


def _not_found(task_id) -> NotFoundError:
    return NotFoundError(f"Task with ID {task_id} not found")


def _parse_task_id(task_id: Union[str, UUID]) -> UUID:
    """
    Normalise an incoming id. Anything that cannot be a task id
    simply does not exist.
    """
    if isinstance(task_id, UUID):
        return task_id
    if task_id is None or not str(task_id).strip():
        raise MissingParameterError(c.TASK_ID_REQUIRED)
    try:
        return UUID(str(task_id).strip())
    except ValueError:
        raise _not_found(task_id)


class TaskService:
    """
    Facade over the task store.

    Every method returns TaskDTOs (never ORM instances) and raises
    NotFoundError / ValidationError / StorageError from apps.core.errors.
    """

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def create(self, data: TaskCreateDTO) -> TaskDTO:
        task = self.repository.create(title=data.title, description=data.description)
        logger.info(f"Created task {task.id}")
        return _task_to_dto(task)

    def get_by_id(self, task_id: Union[str, UUID]) -> TaskDTO:
        """Single existence check reused by update and delete."""
        pk = _parse_task_id(task_id)
        task = self.repository.get(pk)
        if task is None:
            logger.info(f"Task {task_id} not found")
            raise _not_found(task_id)
        return _task_to_dto(task)

    def list(self, filters: TaskFilterDTO) -> List[TaskDTO]:
        tasks = self.repository.list(filters.status, filters.limit, filters.offset)
        return [_task_to_dto(task) for task in tasks]

    def count(self, filters: TaskFilterDTO) -> int:
        """Total matching the filter, ignoring limit/offset."""
        return self.repository.count(filters.status)

    def list_page(self, filters: TaskFilterDTO) -> TaskPageDTO:
        return TaskPageDTO(
            items=self.list(filters),
            total=self.count(filters),
            limit=filters.limit,
            offset=filters.offset,
        )

    def update(self, task_id: Union[str, UUID], data: TaskUpdateDTO) -> TaskDTO:
        """
        Apply only the supplied fields. description uses "was it sent"
        semantics, so an explicit null or empty string clears it.
        """
        existing = self.get_by_id(task_id)

        task = self.repository.update(existing.id, data.changes())
        if task is None:
            raise _not_found(task_id)

        logger.info(f"Updated task {task.id}")
        return _task_to_dto(task)

    def delete(self, task_id: Union[str, UUID]) -> TaskDTO:
        """Remove the row permanently and return what it looked like."""
        snapshot = self.get_by_id(task_id)

        if not self.repository.delete(snapshot.id):
            raise _not_found(task_id)

        logger.info(f"Deleted task {snapshot.id}")
        return snapshot

    def get_by_status(self, status: str) -> List[TaskDTO]:
        """All tasks with the given status, newest first, unpaginated."""
        if status not in TaskStatus.values:
            raise ValidationError(c.STATUS_INVALID)
        return [_task_to_dto(task) for task in self.repository.list_by_status(status)]

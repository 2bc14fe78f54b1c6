"""
Data access for the tasks table.

TaskRepository is the only code that touches Task rows. It is created once
and handed to TaskService; `using` selects the database alias.
"""
import logging
from contextlib import contextmanager
from typing import List, Optional
from uuid import UUID

from django.db import DEFAULT_DB_ALIAS, DatabaseError, transaction
from django.utils import timezone

from apps.core.errors import StorageError
from .models import Task, TaskStatus

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str):
    """Re-raise database failures as StorageError."""
    try:
        yield
    except DatabaseError as e:
        raise StorageError(f"Failed to {operation}: {e}") from e


class TaskRepository:

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def tasks(self):
        return Task.objects.using(self.using)

    def _filtered(self, status: Optional[str]):
        queryset = self.tasks.all()
        if status:
            queryset = queryset.filter(status=status)
        return queryset

    def create(self, title: str, description: Optional[str]) -> Task:
        now = timezone.now()
        with storage_errors("create task"):
            return self.tasks.create(
                title=title,
                description=description,
                status=TaskStatus.PENDING,
                created_at=now,
                updated_at=now,
            )

    def get(self, task_id: UUID) -> Optional[Task]:
        with storage_errors("fetch task"):
            return self.tasks.filter(id=task_id).first()

    def list(self, status: Optional[str], limit: int, offset: int) -> List[Task]:
        """Newest first; LIMIT/OFFSET are applied by the database."""
        with storage_errors("list tasks"):
            queryset = self._filtered(status).order_by('-created_at')
            return list(queryset[offset:offset + limit])

    def count(self, status: Optional[str]) -> int:
        with storage_errors("count tasks"):
            return self._filtered(status).count()

    def list_by_status(self, status: str) -> List[Task]:
        with storage_errors("list tasks"):
            return list(self.tasks.filter(status=status).order_by('-created_at'))

    def update(self, task_id: UUID, changes: dict) -> Optional[Task]:
        """
        Write the given columns and refresh updated_at.
        Returns None when the row no longer exists.
        """
        values = dict(changes, updated_at=timezone.now())
        with storage_errors("update task"):
            with transaction.atomic(using=self.using):
                updated = self.tasks.filter(id=task_id).update(**values)
                if not updated:
                    return None
                return self.tasks.get(id=task_id)

    def delete(self, task_id: UUID) -> int:
        """Returns the number of rows removed (0 or 1)."""
        with storage_errors("delete task"):
            deleted, _ = self.tasks.filter(id=task_id).delete()
        return deleted

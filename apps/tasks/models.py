import uuid
from django.db import models
from django.utils import timezone

from .constants import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH


class TaskStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    COMPLETED = 'COMPLETED', 'Completed'


class Task(models.Model):
    """
    A single to-do record.
    Rows are written only through TaskService via TaskRepository.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=TITLE_MAX_LENGTH)
    description = models.TextField(max_length=DESCRIPTION_MAX_LENGTH, null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=TaskStatus.choices,
        default=TaskStatus.PENDING
    )

    # Set explicitly by the repository so both match on insert
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'tasks'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'created_at'], name='tasks_status_created_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=TaskStatus.values),
                name='tasks_status_valid',
            ),
            models.CheckConstraint(
                condition=~models.Q(title=''),
                name='tasks_title_not_empty',
            ),
        ]

    def __str__(self):
        return f"{self.title} ({self.status})"

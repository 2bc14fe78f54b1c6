"""
Tasks API endpoints.

Pure translation between HTTP and TaskService: parse and validate the
request, call the service, wrap the result in the response envelope.
Errors are left to the boundary handlers in apps.core.handlers.
"""
from django.http import HttpRequest
from ninja import Query, Router

from apps.core.responses import paginated_envelope, success_envelope
from . import constants as c
from .repository import TaskRepository
from .schemas import (
    ErrorOut, TaskCreateIn, TaskEnvelopeOut, TaskFilterIn, TaskListEnvelopeOut,
    TaskMessageEnvelopeOut, TaskPageEnvelopeOut, TaskStatusQueryIn, TaskUpdateIn,
)
from .services import TaskService

router = Router(tags=["Tasks"])

task_service = TaskService(TaskRepository())


@router.post("", response={201: TaskMessageEnvelopeOut, 400: ErrorOut}, by_alias=True)
def create_task(request: HttpRequest, payload: TaskCreateIn):
    """Create a task. New tasks always start as PENDING."""
    task = task_service.create(payload.to_dto())
    return 201, success_envelope(task, c.TASK_CREATED)


@router.get("", response={200: TaskPageEnvelopeOut, 400: ErrorOut}, by_alias=True)
def list_tasks(request: HttpRequest, filters: Query[TaskFilterIn]):
    """
    List tasks, newest first.

    Query Parameters:
    - status: PENDING or COMPLETED
    - limit: 1-100 (default 10)
    - offset: 0 up to MAX_OFFSET (default 0)
    """
    page = task_service.list_page(filters.to_dto())
    return paginated_envelope(page.items, page.total, page.limit, page.offset)


# Must stay above "/{task_id}"
@router.get("/filter/by-status", response={200: TaskListEnvelopeOut, 400: ErrorOut}, by_alias=True)
def get_tasks_by_status(request: HttpRequest, query: Query[TaskStatusQueryIn]):
    tasks = task_service.get_by_status(query.status)
    return success_envelope(tasks)


@router.get("/{task_id}", response={200: TaskEnvelopeOut, 400: ErrorOut, 404: ErrorOut}, by_alias=True)
def get_task(request: HttpRequest, task_id: str):
    task = task_service.get_by_id(task_id)
    return success_envelope(task)


@router.put("/{task_id}", response={200: TaskMessageEnvelopeOut, 400: ErrorOut, 404: ErrorOut}, by_alias=True)
def update_task(request: HttpRequest, task_id: str, payload: TaskUpdateIn):
    """Partial update: only the fields present in the body change."""
    task = task_service.update(task_id, payload.to_dto())
    return success_envelope(task, c.TASK_UPDATED)


@router.delete("/{task_id}", response={204: None, 400: ErrorOut, 404: ErrorOut})
def delete_task(request: HttpRequest, task_id: str):
    task_service.delete(task_id)
    return 204, None

"""Bounds and client-facing messages for task input."""

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 5000

DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 100
DEFAULT_OFFSET = 0
# LIMIT/OFFSET are bound as signed 64-bit integers by the database
MAX_OFFSET = 2 ** 63 - 1 - MAX_LIMIT

TITLE_REQUIRED = "Title is required"
TITLE_EMPTY = "Title must not be empty"
TITLE_TOO_LONG = f"Title must be {TITLE_MAX_LENGTH} characters or less"
DESCRIPTION_TOO_LONG = f"Description must be {DESCRIPTION_MAX_LENGTH} characters or less"
STATUS_INVALID = 'Status must be either "PENDING" or "COMPLETED"'
LIMIT_OUT_OF_RANGE = f"Limit must be between {MIN_LIMIT} and {MAX_LIMIT}"
OFFSET_NEGATIVE = "Offset must be 0 or greater"
OFFSET_TOO_LARGE = f"Offset must be {MAX_OFFSET} or less"
BODY_NOT_OBJECT = "Request body must be a JSON object"
TASK_ID_REQUIRED = "Task ID is required"

TASK_CREATED = "Task created successfully"
TASK_UPDATED = "Task updated successfully"

"""
Error taxonomy shared by services and the API boundary.

Services raise these close to the point of detection; the handlers in
apps.core.handlers turn them into response envelopes. Anything that is not
a ServiceError is treated as unexpected.
"""

# pydantic error type used by schema validators that carry a ready-made message
CONSTRAINT_ERROR_TYPE = 'constraint'


class ServiceError(Exception):
    """Base class for expected, client-visible failures."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Malformed or out-of-range input."""
    status_code = 400
    default_message = "Invalid input"


class MissingParameterError(ServiceError):
    """A required path parameter is absent."""
    status_code = 400
    default_message = "Missing required parameter"


class NotFoundError(ServiceError):
    status_code = 404
    default_message = "Resource not found"


class RouteNotFoundError(NotFoundError):
    default_message = "Endpoint not found"


class StorageError(ServiceError):
    """The underlying store failed. Message is hidden in production."""
    status_code = 500
    default_message = "Storage failure"

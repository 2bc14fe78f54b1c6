"""
Centralized exception boundary for the NinjaAPI.

Every error raised below the routers ends up here and leaves as a
{success: false, error: ...} envelope. Expected failures keep their
message; unexpected ones are logged and reported generically in production.
"""
import logging
from typing import Iterable

from django.conf import settings
from django.http import HttpRequest
from ninja import NinjaAPI
from ninja.errors import HttpError
from ninja.errors import ValidationError as SchemaValidationError

from .errors import CONSTRAINT_ERROR_TYPE, ServiceError
from .responses import error_envelope

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"

# Location segments ninja places in front of the offending field name
_LOCATION_PREFIXES = {'body', 'query', 'path', 'payload', 'filters'}


def format_validation_errors(errors: Iterable[dict]) -> str:
    """
    Collapse pydantic/ninja error dicts into one human-readable reason.

    Messages produced by our own schema validators are used verbatim,
    missing fields read "<Field> is required", anything else is
    prefixed with the field name.
    """
    messages = []
    for error in errors:
        parts = [str(p) for p in error.get('loc', ()) if str(p) not in _LOCATION_PREFIXES]
        field = '.'.join(parts)
        error_type = error.get('type')
        msg = error.get('msg', 'Invalid value')

        if error_type == CONSTRAINT_ERROR_TYPE:
            message = msg
        elif error_type == 'missing':
            message = f"{field.capitalize()} is required" if field else "Request body is required"
        else:
            message = f"{field}: {msg}" if field else msg

        if message not in messages:
            messages.append(message)

    return "; ".join(messages) or "Invalid input"


def internal_error_message(exc: Exception) -> str:
    """Hide internals from clients in production."""
    if settings.IS_PRODUCTION:
        return GENERIC_ERROR_MESSAGE
    return str(exc) or exc.__class__.__name__


def register_exception_handlers(api: NinjaAPI) -> None:
    """Attach the error boundary to an API instance."""

    @api.exception_handler(ServiceError)
    def handle_service_error(request: HttpRequest, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error(f"{exc.__class__.__name__} on {request.method} {request.path}", exc_info=exc)
            message = internal_error_message(exc)
        else:
            message = exc.message
        return api.create_response(request, error_envelope(message), status=exc.status_code)

    @api.exception_handler(SchemaValidationError)
    def handle_schema_validation_error(request: HttpRequest, exc: SchemaValidationError):
        message = format_validation_errors(exc.errors)
        logger.info(f"Rejected {request.method} {request.path}: {message}")
        return api.create_response(request, error_envelope(message), status=400)

    @api.exception_handler(HttpError)
    def handle_http_error(request: HttpRequest, exc: HttpError):
        return api.create_response(request, error_envelope(str(exc)), status=exc.status_code)

    @api.exception_handler(Exception)
    def handle_unexpected_error(request: HttpRequest, exc: Exception):
        logger.error(f"Unexpected error on {request.method} {request.path}", exc_info=exc)
        return api.create_response(
            request, error_envelope(internal_error_message(exc)), status=500
        )

"""Site-level views that live outside the NinjaAPI."""
import logging
import sys

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from .errors import RouteNotFoundError
from .handlers import GENERIC_ERROR_MESSAGE, internal_error_message
from .responses import error_envelope, success_envelope

logger = logging.getLogger(__name__)


@require_GET
def health(request: HttpRequest):
    return JsonResponse(success_envelope({"status": "OK"}))


def endpoint_not_found(request: HttpRequest, *args, **kwargs):
    """Fallback for any method/path no route matches."""
    error = RouteNotFoundError()
    return JsonResponse(error_envelope(error.message), status=error.status_code)


def server_error(request: HttpRequest, *args, **kwargs):
    """handler500: Django calls it while the uncaught exception is being handled."""
    exc = sys.exc_info()[1]
    logger.error(f"Unhandled server error on {request.method} {request.path}")
    message = internal_error_message(exc) if exc is not None else GENERIC_ERROR_MESSAGE
    return JsonResponse(error_envelope(message), status=500)

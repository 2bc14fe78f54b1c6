import logging

from django.utils.deprecation import MiddlewareMixin

from .views import endpoint_not_found

logger = logging.getLogger(__name__)


class RouteNotFoundMiddleware(MiddlewareMixin):
    """
    Reports a known path hit with an unsupported method as a missing endpoint.

    django-ninja answers those with a bare 405; clients of this API only
    ever see the JSON envelope.
    """

    def process_response(self, request, response):
        if response.status_code == 405:
            logger.info(f"No handler for {request.method} {request.path}")
            return endpoint_not_found(request)
        return response

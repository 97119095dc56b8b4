import logging

from django.shortcuts import render

from .exceptions import ResourceNotFound

logger = logging.getLogger(__name__)


class ResourceNotFoundMiddleware:
    """Render the error page with 404 for lookups that found nothing."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not isinstance(exception, ResourceNotFound):
            return None
        logger.info('Resource not found', extra={'path': request.path, 'reason': str(exception)})
        return render(request, 'error.html', {'status': 404, 'message': str(exception)}, status=404)

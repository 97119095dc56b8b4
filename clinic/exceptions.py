import logging

from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class ResourceNotFound(LookupError):
    """An id-based lookup found nothing.  Not recoverable by the caller."""


class OwnerNotFound(ResourceNotFound):
    def __init__(self, owner_id):
        super().__init__(f'Owner not found with id: {owner_id}')


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.error('Unhandled API error', exc_info=exc)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': 'Internal server error'}}, status=500)
    # normalize response
    detail = None
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = str(resp.data)
    return Response({'ok': False, 'error': {'code': 'api_error', 'message': detail}}, status=resp.status_code)

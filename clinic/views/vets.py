from django.http import HttpResponseBadRequest
from django.views.decorators.http import require_GET
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..dependencies import get_vet_controller, get_view_resolver
from ..serializers.vet import VetSerializer


@require_GET
def vet_list(request):
    try:
        page = int(request.GET.get('page') or 1)
    except ValueError:
        return HttpResponseBadRequest('page must be a number')
    if page < 1:
        return HttpResponseBadRequest('page must be at least 1')

    model: dict = {}
    view = get_vet_controller().show_vet_list(page, model)
    return get_view_resolver().resolve(request, view, model)


@api_view(['GET'])
@permission_classes([AllowAny])
def vet_resources(request):
    """All vets with their specialties, as JSON."""
    vets = get_vet_controller().show_resources_vet_list()
    return Response({'vetList': VetSerializer(vets, many=True).data})

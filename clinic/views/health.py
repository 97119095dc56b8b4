from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..dependencies import get_health_checker
from ..serializers.health import HealthReportSerializer


@api_view(['GET'])
@permission_classes([AllowAny])
def health(request):
    """Application health including database connectivity.

    Answers 200 when every component is UP and 503 otherwise; the body
    has the same shape in both cases.
    """
    report = get_health_checker().check()
    return Response(HealthReportSerializer(report).data, status=report.http_status)

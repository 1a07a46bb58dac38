from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.utils import organization_payload


class ReportListView(APIView):

    def get(self, request):
        return Response(organization_payload(request.user, 'Reports retrieved successfully'))

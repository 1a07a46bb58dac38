from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.utils import organization_payload


class PipelineListView(APIView):
    """GET /pipelines - sales pipelines of the caller's organization"""

    def get(self, request):
        return Response(organization_payload(request.user, 'Pipelines retrieved successfully'))

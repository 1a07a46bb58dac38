from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.utils import organization_payload


class InteractionListView(APIView):
    """
    GET /interactions - customer interaction tracking and history for the caller's organization

    Authenticated placeholder; returns the caller and organization.
    """

    def get(self, request):
        return Response(organization_payload(request.user, 'Interactions retrieved successfully'))

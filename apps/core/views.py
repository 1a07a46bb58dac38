import logging
import time

from django.apps import apps as django_apps
from django.http import JsonResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.authentication import PublicReadJWTAuthentication
from apps.accounts.decorators import admin_required, same_organization_required
from . import services
from .exceptions import error_body
from .serializers import (
    OrganizationSerializer,
    OrganizationCreateSerializer,
    OrganizationUpdateSerializer,
)

logger = logging.getLogger(__name__)


# SYSTEM
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check_view(request):
    """
    Health check

    Returns:
        {"status": "ok", "timestamp": ISO-8601, "uptime": seconds}
    """
    started_at = django_apps.get_app_config('core').started_at
    return Response({
        'status': 'ok',
        'timestamp': timezone.now().isoformat(),
        'uptime': round(time.monotonic() - started_at, 3),
    })


# ERROR HANDLERS (config.urls handler404 / handler500)
# Requests that never reach a DRF view get the same JSON error body
def not_found_view(request, exception=None):
    return JsonResponse(
        error_body(status.HTTP_404_NOT_FOUND, f'Cannot {request.method} {request.path}'),
        status=status.HTTP_404_NOT_FOUND,
    )


def server_error_view(request):
    # the traceback is already logged by django.request
    return JsonResponse(
        error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error'),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# ORGANIZATIONS
class OrganizationListView(APIView):
    """
    GET  /organizations - list organizations (public)
    POST /organizations - create organization (public)

    An authenticated caller becomes ADMIN of the organization it creates.
    """

    authentication_classes = [PublicReadJWTAuthentication]
    permission_classes = [AllowAny]

    def get(self, request):
        organizations = services.list_organizations()
        return Response(OrganizationSerializer(organizations, many=True).data)

    def post(self, request):
        serializer = OrganizationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        created_by = request.user if request.user.is_authenticated else None
        organization = services.create_organization(
            name=serializer.validated_data['name'],
            created_by=created_by,
        )
        return Response(OrganizationSerializer(organization).data, status=status.HTTP_201_CREATED)


class OrganizationDetailView(APIView):
    """
    GET    /organizations/<id> - organization details (public)
    PUT    /organizations/<id> - rename (ADMIN of that organization)
    DELETE /organizations/<id> - delete when empty (ADMIN of that organization)
    """

    authentication_classes = [PublicReadJWTAuthentication]

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return super().get_permissions()

    def get(self, request, pk):
        organization = services.get_organization(pk)
        return Response(OrganizationSerializer(organization).data)

    @admin_required
    @same_organization_required()
    def put(self, request, pk):
        serializer = OrganizationUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        organization = services.update_organization(
            pk,
            name=serializer.validated_data.get('name'),
        )
        return Response(OrganizationSerializer(organization).data)

    @admin_required
    @same_organization_required()
    def delete(self, request, pk):
        return Response(services.delete_organization(pk))

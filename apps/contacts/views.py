import logging

from django.core.exceptions import ValidationError
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.decorators import admin_required, organization_required
from apps.core.utils import organization_payload
from .models import Contact
from .serializers import ContactSerializer

logger = logging.getLogger(__name__)


def get_organization_contacts(user):
    """Contacts visible to user (own organization only)"""
    return Contact.objects.filter(organization_id=user.organization_id)


class ContactListView(APIView):
    """
    GET  /contacts - contacts of the caller's organization
    POST /contacts - create contact (ADMIN only)
    """

    def get(self, request):
        contacts = get_organization_contacts(request.user)

        return Response(organization_payload(
            request.user,
            'Contacts retrieved successfully',
            contacts=ContactSerializer(contacts, many=True).data,
        ))

    @admin_required
    @organization_required
    def post(self, request):
        serializer = ContactSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        contact = serializer.save(
            organization_id=request.user.organization_id,
            created_by=request.user,
        )
        logger.info(f"Contact created: {contact.id} - {contact.get_full_name()} by {request.user.email}")

        return Response({
            'message': 'Contact created successfully',
            'contact': ContactSerializer(contact).data,
            'createdBy': request.user.email,
        }, status=status.HTTP_201_CREATED)


class ContactDetailView(APIView):
    """
    GET /contacts/<id>

    Contacts of other organizations answer 404 (not 403)
    so their existence is not revealed.
    """

    def get(self, request, pk):
        try:
            contact = get_organization_contacts(request.user).get(pk=pk)
        except (Contact.DoesNotExist, ValidationError):
            raise NotFound('Contact not found')

        return Response(ContactSerializer(contact).data)

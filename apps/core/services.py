"""
Organization management

Business rules for the organization/user relationship:
    - organization names are unique (case-insensitive)
    - the user who creates an organization becomes its ADMIN
    - an organization with users cannot be deleted
"""

import logging
import uuid

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Count
from rest_framework.exceptions import NotFound

from .exceptions import Conflict
from .models import Organization

logger = logging.getLogger(__name__)

User = get_user_model()

NAME_CONFLICT_MESSAGE = 'Organization with this name already exists'


def get_organization_or_404(pk):
    """
    Fetch organization by id

    Malformed ids are treated like unknown ids.

    Raises:
        NotFound: organization does not exist
    """
    try:
        pk = uuid.UUID(str(pk))
    except ValueError:
        raise NotFound('Organization not found')

    try:
        return Organization.objects.annotate(user_count=Count('users')).get(pk=pk)
    except Organization.DoesNotExist:
        raise NotFound('Organization not found')


def name_is_taken(name, exclude_pk=None):
    queryset = Organization.objects.filter(name__iexact=name)
    if exclude_pk is not None:
        queryset = queryset.exclude(pk=exclude_pk)
    return queryset.exists()


@transaction.atomic
def create_organization(name, created_by=None):
    """
    Create organization

    Args:
        name (str): Organization name
        created_by (User, optional): Creator. Moved into the new
            organization with ADMIN role.

    Returns:
        Organization: the created organization

    Raises:
        Conflict: name already used
    """
    if name_is_taken(name):
        raise Conflict(NAME_CONFLICT_MESSAGE)

    try:
        organization = Organization.objects.create(name=name)
    except IntegrityError:
        # created by a concurrent request after the check
        raise Conflict(NAME_CONFLICT_MESSAGE)

    if created_by is not None:
        created_by.role = User.ROLE_ADMIN
        created_by.organization = organization
        created_by.save(update_fields=['role', 'organization', 'updated_at'])

    logger.info(f"Organization created: {organization.id} - {organization.name}")
    return get_organization_or_404(organization.pk)


def get_organization(pk):
    return get_organization_or_404(pk)


def list_organizations():
    """All organizations with user counts, newest first"""
    return Organization.objects.annotate(user_count=Count('users')).order_by('-created_at')


@transaction.atomic
def update_organization(pk, name=None):
    """
    Update organization

    Raises:
        NotFound: organization does not exist
        Conflict: new name used by another organization
    """
    organization = get_organization_or_404(pk)

    if name and name != organization.name:
        if name_is_taken(name, exclude_pk=organization.pk):
            raise Conflict(NAME_CONFLICT_MESSAGE)

        organization.name = name
        try:
            organization.save(update_fields=['name', 'updated_at'])
        except IntegrityError:
            raise Conflict(NAME_CONFLICT_MESSAGE)
        logger.info(f"Organization renamed: {organization.id} - {organization.name}")

    return get_organization_or_404(organization.pk)


@transaction.atomic
def delete_organization(pk):
    """
    Delete organization (contacts are removed with it)

    Raises:
        NotFound: organization does not exist
        Conflict: organization still has users
    """
    organization = get_organization_or_404(pk)

    if organization.has_users():
        raise Conflict(
            'Cannot delete organization with existing users. Please remove all users first.'
        )

    organization.delete()
    logger.info(f"Organization deleted: {pk}")

    return {'message': 'Organization deleted successfully'}

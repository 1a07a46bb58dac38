"""
Registration and login

Both return the same payload:
    {
        "access_token": "<jwt>",
        "user": {"id", "email", "name", "role", "organizationId"}
    }
"""

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from rest_framework.exceptions import AuthenticationFailed, NotFound

from apps.core.exceptions import BadRequest, Conflict
from apps.core.models import Organization
from apps.core.services import get_organization_or_404, name_is_taken, NAME_CONFLICT_MESSAGE
from .serializers import UserSerializer
from .tokens import issue_token

logger = logging.getLogger(__name__)

User = get_user_model()

INVALID_CREDENTIALS_MESSAGE = 'Invalid credentials'
EMAIL_CONFLICT_MESSAGE = 'User with this email already exists'


def build_auth_response(user):
    return {
        'access_token': issue_token(user),
        'user': UserSerializer(user).data,
    }


def _resolve_organization(organization_id, organization_name):
    """
    Pick the organization a new account joins

    Returns:
        tuple: (organization, role) - joining an existing organization
            gives USER, creating one gives ADMIN
    """
    if organization_id:
        try:
            organization = get_organization_or_404(organization_id)
        except NotFound:
            raise BadRequest('Organization not found')
        return organization, User.ROLE_USER

    if organization_name:
        if name_is_taken(organization_name):
            raise Conflict(NAME_CONFLICT_MESSAGE)
        try:
            organization = Organization.objects.create(name=organization_name)
        except IntegrityError:
            # created by a concurrent request after the check
            raise Conflict(NAME_CONFLICT_MESSAGE)
        logger.info(f"Organization created at registration: {organization.id} - {organization.name}")
        return organization, User.ROLE_ADMIN

    raise BadRequest('Either organizationId or organizationName must be provided')


@transaction.atomic
def register(email, password, name=None, organization_id=None, organization_name=None):
    """
    Create an account and sign it in

    organization_id takes precedence over organization_name.

    Raises:
        Conflict: email already registered, or organization name taken
        BadRequest: unknown organization, or no organization given
    """
    if User.objects.get_by_email(email) is not None:
        raise Conflict(EMAIL_CONFLICT_MESSAGE)

    organization, role = _resolve_organization(organization_id, organization_name)

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            name=name or None,
            role=role,
            organization=organization,
        )
    except IntegrityError:
        raise Conflict(EMAIL_CONFLICT_MESSAGE)

    logger.info(f"User registered: {user.email} ({user.role}) in organization {organization.id}")
    return build_auth_response(user)


def login(email, password, ip_address=None):
    """
    Check credentials and issue a token

    Unknown email and wrong password give the same error.

    Raises:
        AuthenticationFailed: bad credentials or disabled account
    """
    user = User.objects.get_by_email(email)

    if user is None or not user.check_password(password):
        logger.warning(f"Failed login for {email} from {ip_address}")
        raise AuthenticationFailed(INVALID_CREDENTIALS_MESSAGE)

    if not user.is_active:
        logger.warning(f"Login refused for disabled account {email}")
        raise AuthenticationFailed('Account is disabled')

    user.record_login(ip_address=ip_address)

    logger.info(f"User logged in: {user.email}")
    return build_auth_response(user)

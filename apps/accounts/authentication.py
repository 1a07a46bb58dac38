"""
Bearer token authentication for the REST API

Authorization: Bearer <jwt>

- No header         -> anonymous request (permissions decide)
- Bad / expired JWT -> 401
- Unknown user      -> 401
- Inactive user     -> 401

The user is always loaded from the database, so role and organization
changes apply to tokens issued before the change.
"""

import logging

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from rest_framework import authentication, exceptions
from rest_framework.permissions import SAFE_METHODS

from .tokens import decode_token, TokenError

logger = logging.getLogger(__name__)

User = get_user_model()


class JWTAuthentication(authentication.BaseAuthentication):

    keyword = 'Bearer'

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()

        if not header or header[0].lower() != self.keyword.lower().encode():
            return None

        if len(header) != 2:
            raise exceptions.AuthenticationFailed('Invalid authorization header')

        try:
            token = header[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed('Invalid authorization header')

        return self.authenticate_credentials(token)

    def authenticate_credentials(self, token):
        try:
            payload = decode_token(token)
        except TokenError as e:
            logger.warning(f"Rejected token: {e}")
            raise exceptions.AuthenticationFailed(str(e))

        try:
            user = User.objects.select_related('organization').get(pk=payload['sub'])
        except (User.DoesNotExist, ValidationError, ValueError):
            raise exceptions.AuthenticationFailed('User not found')

        if not user.is_active:
            raise exceptions.AuthenticationFailed('Account is disabled')

        return (user, payload)

    def authenticate_header(self, request):
        # Makes DRF answer 401 (not 403) for unauthenticated requests
        return self.keyword


class PublicReadJWTAuthentication(JWTAuthentication):
    """
    Bearer authentication for endpoints with public reads

    GET/HEAD/OPTIONS with a bad or expired token continue anonymously.
    Writes keep the strict 401.
    """

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except exceptions.AuthenticationFailed as e:
            if request.method not in SAFE_METHODS:
                raise
            logger.debug(f"Ignoring rejected token on {request.method} {request.path}: {e.detail}")
            return None

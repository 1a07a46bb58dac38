"""
JWT access tokens

Claims:
    sub             user id
    email           user email
    role            ADMIN / USER
    organizationId  user's organization id (or None)
    iat, exp        issued at / expiry (unix seconds)
"""

from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings


class TokenError(Exception):
    """Token is expired, malformed or signed with another key"""


def issue_token(user):
    """
    Sign an access token for user

    Args:
        user (User): authenticated user

    Returns:
        str: encoded JWT
    """
    now = datetime.now(timezone.utc)
    payload = {
        'sub': str(user.pk),
        'email': user.email,
        'role': user.role,
        'organizationId': str(user.organization_id) if user.organization_id else None,
        'iat': now,
        'exp': now + timedelta(seconds=settings.JWT_EXPIRATION_SECONDS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token):
    """
    Verify signature and expiry

    Returns:
        dict: token claims

    Raises:
        TokenError: token can not be trusted
    """
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={'require': ['sub', 'exp', 'iat']},
        )
    except jwt.ExpiredSignatureError:
        raise TokenError('Token has expired')
    except jwt.InvalidTokenError:
        raise TokenError('Invalid token')

"""
Helper utilities for organization-scoped responses
"""
from apps.accounts.serializers import UserSerializer


def organization_payload(user, message, **extra):
    """
    Common body of organization-scoped list endpoints

    Returns:
        dict: {"message", "user", "organizationId", **extra}
    """
    user_data = UserSerializer(user).data
    return {
        'message': message,
        'user': user_data,
        'organizationId': user_data['organizationId'],
        **extra,
    }

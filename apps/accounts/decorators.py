# Decorators in this file (for APIView handler methods):
# 1. roles_required - Only listed roles can access
# 2. admin_required - Only ADMINs can access
# 3. organization_required - User must belong to an organization
# 4. same_organization_required - URL organization must be the user's own
#
# Superusers pass every role check.
# ==============================================================================

import logging
from functools import wraps

from rest_framework.exceptions import NotAuthenticated, PermissionDenied

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = 'Forbidden resource'


def _require_authenticated(request):
    if not request.user or not request.user.is_authenticated:
        raise NotAuthenticated()


# ROLE-BASED DECORATORS
def roles_required(*allowed_roles):
    """
    Decorator: Only specific roles can access

    Args:
        *allowed_roles: Role names (User.ROLE_ADMIN, User.ROLE_USER).
            No roles means any authenticated user.

    Usage:
        class ContactListView(APIView):
            @roles_required('ADMIN')
            def post(self, request):
                ...

    Raises:
        NotAuthenticated: anonymous request (401)
        PermissionDenied: role not allowed (403)
    """

    def decorator(view_method):
        @wraps(view_method)
        def wrapper(view, request, *args, **kwargs):
            _require_authenticated(request)

            if not allowed_roles or request.user.has_role(*allowed_roles):
                return view_method(view, request, *args, **kwargs)

            logger.warning(
                f"Forbidden: user {request.user.pk} with role {request.user.role} "
                f"needs one of {allowed_roles} for {request.method} {request.path}"
            )
            raise PermissionDenied(FORBIDDEN_MESSAGE)

        wrapper.required_roles = allowed_roles
        return wrapper

    return decorator


def admin_required(view_method):
    """Decorator: Only ADMIN role (or superuser) can access"""
    return roles_required('ADMIN')(view_method)


# ORGANIZATION-BASED DECORATORS
def organization_required(view_method):
    """
    Decorator: User must belong to an organization

    Organization-scoped endpoints (contacts, reports) read
    request.user.organization; superusers without one are refused.
    """

    @wraps(view_method)
    def wrapper(view, request, *args, **kwargs):
        _require_authenticated(request)

        if request.user.organization_id is None:
            raise PermissionDenied('You must belong to an organization to access this resource.')

        return view_method(view, request, *args, **kwargs)

    return wrapper


def same_organization_required(pk_param='pk'):
    """
    Decorator: The organization in the URL must be the user's own

    Args:
        pk_param (str): URL kwarg holding the organization id

    Usage:
        @admin_required
        @same_organization_required()
        def put(self, request, pk):
            ...

        @same_organization_required(pk_param='organization_id')
        def get(self, request, organization_id):
            ...

    Superusers can manage every organization.
    """

    def decorator(view_method):
        @wraps(view_method)
        def wrapper(view, request, *args, **kwargs):
            _require_authenticated(request)

            if request.user.is_superuser or request.user.belongs_to(kwargs.get(pk_param)):
                return view_method(view, request, *args, **kwargs)

            raise PermissionDenied(FORBIDDEN_MESSAGE)

        return wrapper

    return decorator

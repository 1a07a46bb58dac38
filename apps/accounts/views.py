import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .authentication import JWTAuthentication
from .serializers import (
    LoginSerializer,
    ProfileSerializer,
    RegisterSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


# HELPER FUNCTIONS
def get_client_ip(request):

    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        # X-Forwarded-For can contain multiple IPs (proxy chain)
        # First one is the original client IP
        ip = x_forwarded_for.split(',')[0].strip()
    else:
        ip = request.META.get('REMOTE_ADDR')
    return ip or None



# AUTHENTICATION VIEWS
class PublicAuthView(APIView):
    """
    Base for register/login: the Authorization header is ignored

    Credential errors still answer 401 with WWW-Authenticate: Bearer.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def get_authenticate_header(self, request):
        return JWTAuthentication.keyword


class RegisterView(PublicAuthView):
    """
    POST /auth/register

    Body:
        {"email", "password", "name"?, "organizationId"? | "organizationName"?}

    Joining an existing organization gives role USER,
    creating a new one gives role ADMIN.
    """

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = services.register(
            email=data['email'],
            password=data['password'],
            name=data.get('name'),
            organization_id=data.get('organizationId'),
            organization_name=data.get('organizationName'),
        )
        return Response(result, status=status.HTTP_201_CREATED)


class LoginView(PublicAuthView):
    """
    POST /auth/login

    Body:
        {"email", "password"}
    """

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = services.login(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
            ip_address=get_client_ip(request),
        )
        return Response(result, status=status.HTTP_200_OK)


# PROFILE VIEWS
class ProfileView(APIView):
    """GET /auth/profile - current user with timestamps"""

    def get(self, request):
        return Response(ProfileSerializer(request.user).data)


class ValidateTokenView(APIView):
    """GET /auth/validate - 200 with the user while the token is valid"""

    def get(self, request):
        return Response({
            'valid': True,
            'user': UserSerializer(request.user).data,
        })

from django.conf import settings
from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


# RESPONSE SERIALIZERS
class UserSerializer(serializers.ModelSerializer):
    """Public user shape: {id, email, name, role, organizationId}"""

    organizationId = serializers.UUIDField(source='organization_id', read_only=True, allow_null=True)

    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'role', 'organizationId']
        read_only_fields = fields


class ProfileSerializer(UserSerializer):
    """User shape plus timestamps"""

    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['createdAt', 'updatedAt']
        read_only_fields = fields


# REQUEST SERIALIZERS
class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=settings.MIN_PASSWORD_LENGTH, trim_whitespace=False, write_only=True)
    name = serializers.CharField(max_length=150, required=False, allow_blank=True, allow_null=True)
    organizationId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    organizationName = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)

    def validate_email(self, value):
        return value.lower().strip()


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)

    def validate_email(self, value):
        return value.lower().strip()

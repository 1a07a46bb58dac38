from rest_framework import serializers

from .models import Organization


class OrganizationSerializer(serializers.ModelSerializer):
    """Organization response: {id, name, createdAt, updatedAt, userCount}"""

    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    userCount = serializers.SerializerMethodField()

    class Meta:
        model = Organization
        fields = ['id', 'name', 'createdAt', 'updatedAt', 'userCount']

    def get_userCount(self, obj):
        count = getattr(obj, 'user_count', None)
        if count is None:
            count = obj.get_users_count()
        return count


class OrganizationCreateSerializer(serializers.Serializer):
    # uniqueness is checked by the service (409, not 400)
    name = serializers.CharField(max_length=200)


class OrganizationUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200, required=False)

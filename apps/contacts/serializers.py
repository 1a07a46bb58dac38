from rest_framework import serializers

from .models import Contact


class ContactSerializer(serializers.ModelSerializer):
    """
    Contact in API shape (camelCase)

    Used for both input (firstName, lastName, email?, phone?, company?)
    and output (adds id, organizationId, createdAt, updatedAt).
    """

    firstName = serializers.CharField(source='first_name', max_length=100)
    lastName = serializers.CharField(source='last_name', max_length=100)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    company = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    organizationId = serializers.UUIDField(source='organization_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Contact
        fields = [
            'id', 'firstName', 'lastName', 'email', 'phone', 'company',
            'organizationId', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ['id']

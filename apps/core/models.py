import uuid

from django.db import models


class Organization(models.Model):
    """
    Tenant of the CRM

    Every non-superuser account belongs to exactly one organization.
    Contacts are owned by an organization.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, unique=True, help_text="Organization name (e.g. Acme Corporation)")

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Organization"
        verbose_name_plural = "Organizations"
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def get_users_count(self):

        return self.users.count()

    def has_users(self):

        return self.users.exists()

import uuid

from django.conf import settings
from django.db import models
from apps.core.models import Organization


class Contact(models.Model):

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Ownership
    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name='contacts', help_text='Which organization owns this contact')
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='created_contacts', help_text='User who created the contact')

    # Basic Information
    first_name = models.CharField(max_length=100, help_text="Contact first name")
    last_name = models.CharField(max_length=100, help_text="Contact last name")
    email = models.EmailField(blank=True, null=True, help_text='Email address (optional)')
    phone = models.CharField(max_length=20, blank=True, null=True, help_text='Phone number in international format')
    company = models.CharField(max_length=200, blank=True, null=True, help_text='Company the contact works for')

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Contact'
        verbose_name_plural = 'Contacts'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['organization', 'last_name'], name='contact_org_last_name_idx'),
        ]

    def __str__(self):
        return self.get_full_name()

    def get_full_name(self):
        return f"{self.first_name} {self.last_name}"

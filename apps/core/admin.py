from django.contrib import admin
from django.db.models import Count
from django.utils.html import format_html
from .models import Organization


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):

    list_display = [
        'name',
        'users_count',
        'created_at',
    ]
    list_filter = ['created_at']
    search_fields = ['name']
    readonly_fields = ['id', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'name')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(user_count=Count('users'))

    def users_count(self, obj):

        return format_html(
            '<span style="color: #667eea; font-weight: bold;">{} users</span>',
            obj.user_count
        )

    users_count.short_description = 'Users'
    users_count.admin_order_field = 'user_count'

    def has_delete_permission(self, request, obj=None):
        # Same guard as the API: organizations with users stay
        if obj is not None and obj.has_users():
            return False
        return super().has_delete_permission(request, obj)

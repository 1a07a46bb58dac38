from django.contrib import admin
from .models import Contact


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):

    list_display = ['get_full_name', 'email', 'phone', 'company', 'organization', 'created_at']
    list_filter = ['organization', 'created_at']
    search_fields = ['first_name', 'last_name', 'email', 'phone', 'company']
    list_select_related = ['organization', 'created_by']
    readonly_fields = ['id', 'created_by', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'first_name', 'last_name', 'email', 'phone', 'company')
        }),
        ('Ownership', {
            'fields': ('organization', 'created_by')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_full_name(self, obj):
        return obj.get_full_name()

    get_full_name.short_description = 'Name'
    get_full_name.admin_order_field = 'last_name'

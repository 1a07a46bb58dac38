from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserChangeForm, UserCreationForm
from django.utils.translation import gettext_lazy as _
from django.utils.html import format_html
from .models import User


# ADMIN FORMS (email instead of username)
class UserAdminCreationForm(UserCreationForm):

    class Meta(UserCreationForm.Meta):
        model = User
        fields = ('email',)


class UserAdminChangeForm(UserChangeForm):

    class Meta(UserChangeForm.Meta):
        model = User
        fields = '__all__'


# CUSTOM USER ADMIN
@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = UserAdminChangeForm
    add_form = UserAdminCreationForm

    list_display = (
        'email',
        'name',
        'organization',
        'role_badge',
        'is_active_badge',
        'login_count',
        'created_at',
    )

    list_display_links = ('email', 'name')

    list_filter = (
        'role',
        'is_active',
        'is_staff',
        'is_superuser',
        'organization',
    )
    search_fields = (
        'email',
        'name',
        'organization__name',
    )

    ordering = ('-created_at',)
    list_per_page = 25
    list_select_related = ('organization',)

    fieldsets = (
        (_('Login Credentials'), {
            'fields': ('email', 'password'),
        }),
        (_('Personal Information'), {
            'fields': ('name',),
        }),
        (_('Organization & Role'), {
            'fields': ('organization', 'role'),
        }),
        (_('Permissions'), {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        (_('Activity Tracking'), {
            'fields': ('login_count', 'last_login_ip', 'created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    # Fields shown when creating NEW user
    add_fieldsets = (
        (_('Login Credentials'), {
            'fields': ('email', 'password1', 'password2'),
            'classes': ('wide',),
        }),
        (_('Personal Information'), {
            'fields': ('name',),
            'classes': ('wide',),
        }),
        (_('Organization & Role'), {
            'fields': ('organization', 'role'),
            'classes': ('wide',),
        }),
        (_('Permissions'), {
            'fields': ('is_active', 'is_staff'),
        }),
    )

    readonly_fields = (
        'created_at',
        'last_login',
        'login_count',
        'last_login_ip',
    )

    # CUSTOM DISPLAY METHODS
    def role_badge(self, obj):

        if obj.role == User.ROLE_ADMIN:
            color = '#28a745'  # Green
        else:
            color = '#007bff'  # Blue

        return format_html(
            '<span style="background: {}; color: white; padding: 3px 10px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            color, obj.get_role_display()
        )

    role_badge.short_description = _('Role')
    role_badge.admin_order_field = 'role'

    def is_active_badge(self, obj):
        if obj.is_active:
            return format_html(
                '<span style="background: #28a745; color: white; padding: 3px 10px; '
                'border-radius: 3px; font-size: 11px;">Active</span>'
            )
        return format_html(
            '<span style="background: #dc3545; color: white; padding: 3px 10px; '
            'border-radius: 3px; font-size: 11px;">Inactive</span>'
        )

    is_active_badge.short_description = _('Status')
    is_active_badge.admin_order_field = 'is_active'

    # CUSTOM ACTIONS
    actions = ['activate_users', 'deactivate_users']

    def activate_users(self, request, queryset):
        updated = queryset.update(is_active=True)
        self.message_user(
            request,
            _('%(count)d user(s) were successfully activated.') % {'count': updated},
            level='success'
        )

    activate_users.short_description = _('Activate selected users')

    def deactivate_users(self, request, queryset):
        """
        Bulk action: Deactivate selected users

        Superusers are skipped
        """
        queryset = queryset.filter(is_superuser=False)
        updated = queryset.update(is_active=False)
        self.message_user(
            request,
            _('%(count)d user(s) were successfully deactivated.') % {'count': updated},
            level='success'
        )

    deactivate_users.short_description = _('Deactivate selected users')

    # PERMISSIONS
    def has_delete_permission(self, request, obj=None):
        if obj and obj == request.user:
            return False  # Cannot delete yourself

        if obj and obj.is_superuser and not request.user.is_superuser:
            return False  # Cannot delete superuser unless you are one

        return super().has_delete_permission(request, obj)


# ADMIN SITE CUSTOMIZATION
admin.site.site_header = _('TalonCRM Administration')
admin.site.site_title = _('TalonCRM')
admin.site.index_title = _('Welcome to TalonCRM Admin Panel')

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class AccountsConfig(AppConfig):
    """
    Configuration class for accounts app

    This app provides:
    - Custom User model (email login, role, organization)
    - JWT issuing and DRF bearer authentication
    - Role-based decorators for API views
    - /auth endpoints (register, login, profile, validate)
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.accounts'

    # Human-readable app name (shown in admin panel)
    verbose_name = _('Accounts')

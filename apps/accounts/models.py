# Models:
# 1. User - Custom user model (replaces Django's default)

import uuid

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin, BaseUserManager
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


# USER MANAGER (handles user creation)
class UserManager(BaseUserManager):
    """
    Custom user manager for User model

    Provides methods to:
    - Create regular users
    - Create superusers (admins)
    - Handle email-based authentication
    """

    use_in_migrations = True

    def create_user(self, email, password=None, **extra_fields):
        """
        Create and save a regular user

        Args:
            email (str): User's email address (required)
            password (str): User's password (hashed before saving)
            **extra_fields: Additional fields (name, role, organization)

        Returns:
            User: The created user object

        Raises:
            ValueError: If email is not provided

        Example:
            user = User.objects.create_user(
                email='agent@acme.com',
                password='securepass123',
                name='John Doe',
                organization=organization,
            )
        """
        if not email:
            raise ValueError(_('Users must have an email address'))

        # Normalize email (convert domain to lowercase)
        email = self.normalize_email(email)

        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)

        user = self.model(email=email, **extra_fields)

        # Set password (hashed)
        user.set_password(password)

        user.save(using=self._db)

        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create and save a superuser

        Superusers have all permissions, can access admin panel
        and do not need an organization.
        """
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', User.ROLE_ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError(_('Superuser must have is_staff=True'))
        if extra_fields.get('is_superuser') is not True:
            raise ValueError(_('Superuser must have is_superuser=True'))

        return self.create_user(email, password, **extra_fields)

    def get_by_email(self, email):
        """Case-insensitive lookup, returns None when missing"""
        return self.filter(email__iexact=self.normalize_email(email)).first()



# USER MODEL
class User(AbstractBaseUser, PermissionsMixin):
    """
    Custom User model for TalonCRM

    Features:
    - Email-based authentication (no username)
    - Multi-tenancy (organization field)
    - Role-based access (ADMIN, USER)
    - Activity tracking (login count, last login, IP)
    """

    ROLE_ADMIN = 'ADMIN'
    ROLE_USER = 'USER'

    ROLE_CHOICES = [
        (ROLE_ADMIN, _('Administrator')),
        (ROLE_USER, _('User')),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Email as primary identifier (instead of username)
    email = models.EmailField(_('email address'), unique=True, max_length=255, help_text=_('Required. Used for login.'))
    name = models.CharField(_('name'), max_length=150, blank=True, null=True, help_text=_('Full name (e.g., John Doe)'))

    # ORGANIZATION & ROLE (Multi-tenancy)
    # PROTECT: an organization cannot disappear under its users
    organization = models.ForeignKey('core.Organization', on_delete=models.PROTECT, related_name='users',
                                     null=True, blank=True, verbose_name=_('organization'),
                                     help_text=_('The organization this user belongs to'))

    role = models.CharField(_('role'), max_length=20, choices=ROLE_CHOICES, default=ROLE_USER, db_index=True,
                            help_text=_('ADMIN (full access) or USER (limited access)'))

    login_count = models.PositiveIntegerField(_('login count'), default=0, help_text=_('Number of times user has logged in'))
    last_login_ip = models.GenericIPAddressField(_('last login IP'), blank=True, null=True, help_text=_('IP address of last login'))
    is_active = models.BooleanField(_('active'), default=True, help_text=_('Designates whether this user should be treated as active. Unselect this instead of deleting accounts.'))
    is_staff = models.BooleanField(_('staff status'), default=False, help_text=_('Designates whether the user can log into admin site.'))
    created_at = models.DateTimeField(_('created at'), default=timezone.now)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'

    # Fields required when creating superuser (in addition to email and password)
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = _('user')
        verbose_name_plural = _('users')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['organization', 'role'], name='user_org_role_idx'),
        ]

    def __str__(self):
        if self.name:
            return f"{self.name} ({self.email})"
        return self.email

    def get_full_name(self):
        return self.name or self.email

    def get_short_name(self):
        return self.name.split()[0] if self.name else self.email

    # ROLE CHECKS
    def is_admin(self):

        return self.role == self.ROLE_ADMIN or self.is_superuser

    def has_role(self, *roles):
        """True when role is one of roles (superusers always pass)"""
        return self.is_superuser or self.role in roles

    def belongs_to(self, organization_id):
        if self.organization_id is None:
            return False
        try:
            return self.organization_id == uuid.UUID(str(organization_id))
        except ValueError:
            return False

    # ACTIVITY TRACKING
    def record_login(self, ip_address=None):
        """
        Update login tracking after a successful login

        Args:
            ip_address (str, optional): Client IP address
        """
        self.login_count += 1
        self.last_login = timezone.now()
        if ip_address:
            self.last_login_ip = ip_address
        self.save(update_fields=['login_count', 'last_login', 'last_login_ip'])

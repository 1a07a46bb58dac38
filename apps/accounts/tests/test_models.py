"""
Tests for User model and UserManager
=====================================

Run tests:
    python manage.py test apps.accounts.tests.test_models
"""

import uuid

from django.contrib.auth import get_user_model
from django.db.models import ProtectedError
from django.test import TestCase

from apps.core.models import Organization

User = get_user_model()


class UserManagerTest(TestCase):
    """Test create_user / create_superuser / get_by_email"""

    def setUp(self):
        self.organization = Organization.objects.create(name='Acme Corporation')

    def test_create_user_hashes_password(self):
        user = User.objects.create_user(
            email='john@acme.com',
            password='password123',
            organization=self.organization,
        )

        self.assertNotEqual(user.password, 'password123')
        self.assertTrue(user.password.startswith('bcrypt_sha256$'))
        self.assertTrue(user.check_password('password123'))
        self.assertFalse(user.check_password('wrong'))

    def test_create_user_defaults(self):
        user = User.objects.create_user(email='john@acme.com', password='password123')

        self.assertEqual(user.role, User.ROLE_USER)
        self.assertTrue(user.is_active)
        self.assertFalse(user.is_staff)
        self.assertFalse(user.is_superuser)
        self.assertEqual(user.login_count, 0)
        self.assertIsInstance(user.pk, uuid.UUID)

    def test_create_user_normalizes_email_domain(self):
        user = User.objects.create_user(email='John@ACME.COM', password='password123')

        self.assertEqual(user.email, 'John@acme.com')

    def test_create_user_without_email_fails(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email='', password='password123')

    def test_create_superuser(self):
        user = User.objects.create_superuser(email='root@acme.com', password='password123')

        self.assertTrue(user.is_staff)
        self.assertTrue(user.is_superuser)
        self.assertEqual(user.role, User.ROLE_ADMIN)
        self.assertIsNone(user.organization)

    def test_create_superuser_requires_flags(self):
        with self.assertRaises(ValueError):
            User.objects.create_superuser(email='root@acme.com', password='x', is_staff=False)

    def test_get_by_email_is_case_insensitive(self):
        user = User.objects.create_user(email='john@acme.com', password='password123')

        self.assertEqual(User.objects.get_by_email('JOHN@acme.com'), user)
        self.assertIsNone(User.objects.get_by_email('nobody@acme.com'))


class UserModelTest(TestCase):
    """Test role checks, organization membership and login tracking"""

    def setUp(self):
        self.organization = Organization.objects.create(name='Acme Corporation')
        self.other_organization = Organization.objects.create(name='Tech Solutions Inc.')

        self.admin = User.objects.create_user(
            email='admin@acme.com',
            password='password123',
            name='Jane Admin',
            role=User.ROLE_ADMIN,
            organization=self.organization,
        )
        self.user = User.objects.create_user(
            email='user@acme.com',
            password='password123',
            organization=self.organization,
        )

    def test_str(self):
        self.assertEqual(str(self.admin), 'Jane Admin (admin@acme.com)')
        self.assertEqual(str(self.user), 'user@acme.com')

    def test_full_and_short_name(self):
        self.assertEqual(self.admin.get_full_name(), 'Jane Admin')
        self.assertEqual(self.admin.get_short_name(), 'Jane')
        self.assertEqual(self.user.get_full_name(), 'user@acme.com')

    def test_role_checks(self):
        self.assertTrue(self.admin.is_admin())
        self.assertFalse(self.user.is_admin())

        self.assertTrue(self.admin.has_role(User.ROLE_ADMIN))
        self.assertFalse(self.user.has_role(User.ROLE_ADMIN))
        self.assertTrue(self.user.has_role(User.ROLE_ADMIN, User.ROLE_USER))

    def test_superuser_passes_role_checks(self):
        root = User.objects.create_superuser(email='root@acme.com', password='password123', role=User.ROLE_USER)

        self.assertTrue(root.is_admin())
        self.assertTrue(root.has_role(User.ROLE_ADMIN))

    def test_belongs_to(self):
        self.assertTrue(self.user.belongs_to(self.organization.pk))
        self.assertTrue(self.user.belongs_to(str(self.organization.pk)))
        self.assertTrue(self.user.belongs_to(str(self.organization.pk).upper()))
        self.assertFalse(self.user.belongs_to(self.other_organization.pk))
        self.assertFalse(self.user.belongs_to('not-a-uuid'))
        self.assertFalse(self.user.belongs_to(None))

    def test_record_login(self):
        self.user.record_login(ip_address='192.168.1.1')
        self.user.record_login()

        self.user.refresh_from_db()
        self.assertEqual(self.user.login_count, 2)
        self.assertEqual(self.user.last_login_ip, '192.168.1.1')
        self.assertIsNotNone(self.user.last_login)

    def test_organization_with_users_is_protected(self):
        with self.assertRaises(ProtectedError):
            self.organization.delete()

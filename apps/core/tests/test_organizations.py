"""
Tests for Organization management
==================================

Test Cases:
1. Organization model helpers
2. /organizations endpoints (list, create, retrieve, update, delete)
"""

from datetime import timedelta
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.utils import timezone
from rest_framework.test import APIClient

from apps.accounts.tokens import issue_token
from apps.contacts.models import Contact
from apps.core import services
from apps.core.exceptions import Conflict
from apps.core.models import Organization

User = get_user_model()


class OrganizationModelTest(TestCase):
    """Test Organization model"""

    def setUp(self):
        self.organization = Organization.objects.create(name='Acme Corporation')

    def test_str(self):
        self.assertEqual(str(self.organization), 'Acme Corporation')

    def test_users_count(self):
        self.assertEqual(self.organization.get_users_count(), 0)
        self.assertFalse(self.organization.has_users())

        User.objects.create_user(email='john@acme.com', password='password123', organization=self.organization)

        self.assertEqual(self.organization.get_users_count(), 1)
        self.assertTrue(self.organization.has_users())

    def test_ordering_newest_first(self):
        newer = Organization.objects.create(name='Tech Solutions Inc.')
        Organization.objects.filter(pk=newer.pk).update(created_at=timezone.now() + timedelta(minutes=1))

        self.assertEqual(list(Organization.objects.all()), [newer, self.organization])


class OrganizationServiceTest(TestCase):
    """Test business rules in apps.core.services"""

    def setUp(self):
        self.organization = Organization.objects.create(name='Acme Corporation')

    def test_name_is_taken_case_insensitive(self):
        self.assertTrue(services.name_is_taken('ACME CORPORATION'))
        self.assertFalse(services.name_is_taken('Acme Corporation', exclude_pk=self.organization.pk))
        self.assertFalse(services.name_is_taken('Globex'))

    def test_create_moves_creator_in_as_admin(self):
        user = User.objects.create_user(email='john@acme.com', password='password123', organization=self.organization)

        organization = services.create_organization('Globex', created_by=user)

        user.refresh_from_db()
        self.assertEqual(user.organization, organization)
        self.assertEqual(user.role, User.ROLE_ADMIN)
        self.assertEqual(organization.user_count, 1)

    def test_create_duplicate(self):
        with self.assertRaises(Conflict):
            services.create_organization('Acme Corporation')

        self.assertEqual(Organization.objects.count(), 1)

    @patch('apps.core.services.name_is_taken', return_value=False)
    def test_create_duplicate_inserted_concurrently(self, mock_name_is_taken):
        with self.assertRaises(Conflict):
            services.create_organization('Acme Corporation')

        self.assertEqual(Organization.objects.count(), 1)

    @patch('apps.core.services.name_is_taken', return_value=False)
    def test_rename_to_name_inserted_concurrently(self, mock_name_is_taken):
        other = Organization.objects.create(name='Globex')

        with self.assertRaises(Conflict):
            services.update_organization(other.pk, name='Acme Corporation')

        other.refresh_from_db()
        self.assertEqual(other.name, 'Globex')

    def test_delete_removes_contacts(self):
        Contact.objects.create(organization=self.organization, first_name='Ana', last_name='Lopez')

        services.delete_organization(self.organization.pk)

        self.assertFalse(Organization.objects.exists())
        self.assertFalse(Contact.objects.exists())


class OrganizationApiTestBase(TestCase):

    def setUp(self):
        """Setup test data"""
        self.client = APIClient()

        self.organization = Organization.objects.create(name='Acme Corporation')
        self.other_organization = Organization.objects.create(name='Tech Solutions Inc.')
        Organization.objects.filter(pk=self.other_organization.pk).update(
            created_at=timezone.now() + timedelta(minutes=1),
        )

        self.admin = User.objects.create_user(
            email='admin@acme.com',
            password='password123',
            role=User.ROLE_ADMIN,
            organization=self.organization,
        )
        self.user = User.objects.create_user(
            email='user@acme.com',
            password='password123',
            organization=self.organization,
        )

    def login_as(self, user):
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(user)}')

    def login_with_expired_token(self, user):
        with override_settings(JWT_EXPIRATION_SECONDS=-60):
            token = issue_token(user)
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')

    def detail_url(self, organization):
        return f'/organizations/{organization.pk}'


class OrganizationListApiTest(OrganizationApiTestBase):
    """Test GET/POST /organizations"""

    def test_list_is_public(self):
        response = self.client.get('/organizations')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 2)

        # newest first
        self.assertEqual(response.data[0]['name'], 'Tech Solutions Inc.')
        self.assertEqual(response.data[0]['userCount'], 0)
        self.assertEqual(response.data[1]['name'], 'Acme Corporation')
        self.assertEqual(response.data[1]['userCount'], 2)

        self.assertEqual(
            set(response.data[0].keys()),
            {'id', 'name', 'createdAt', 'updatedAt', 'userCount'},
        )

    def test_create_anonymous(self):
        response = self.client.post('/organizations', {'name': 'Globex'})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['name'], 'Globex')
        self.assertEqual(response.data['userCount'], 0)
        self.assertTrue(Organization.objects.filter(name='Globex').exists())

    def test_create_authenticated_becomes_admin(self):
        self.login_as(self.user)

        response = self.client.post('/organizations', {'name': 'Globex'})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['userCount'], 1)

        self.user.refresh_from_db()
        self.assertEqual(str(self.user.organization_id), str(response.data['id']))
        self.assertEqual(self.user.role, User.ROLE_ADMIN)

    def test_create_duplicate_name(self):
        response = self.client.post('/organizations', {'name': 'acme corporation'})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data, {
            'statusCode': 409,
            'message': 'Organization with this name already exists',
            'error': 'Conflict',
        })

    def test_create_without_name(self):
        response = self.client.post('/organizations', {})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['message'], ['name: This field is required.'])

    def test_create_with_invalid_token(self):
        self.client.credentials(HTTP_AUTHORIZATION='Bearer garbage')

        response = self.client.post('/organizations', {'name': 'Globex'})

        self.assertEqual(response.status_code, 401)
        self.assertFalse(Organization.objects.filter(name='Globex').exists())

    def test_list_with_expired_token(self):
        self.login_with_expired_token(self.user)

        response = self.client.get('/organizations')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 2)

    def test_create_with_expired_token(self):
        self.login_with_expired_token(self.user)

        response = self.client.post('/organizations', {'name': 'Globex'})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data['message'], 'Token has expired')


class OrganizationDetailApiTest(OrganizationApiTestBase):
    """Test GET/PUT/DELETE /organizations/<id>"""

    def test_retrieve_is_public(self):
        response = self.client.get(self.detail_url(self.organization))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['name'], 'Acme Corporation')
        self.assertEqual(response.data['userCount'], 2)

    def test_retrieve_unknown(self):
        response = self.client.get('/organizations/00000000-0000-0000-0000-000000000000')

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data, {
            'statusCode': 404,
            'message': 'Organization not found',
            'error': 'Not Found',
        })

    def test_retrieve_with_expired_token(self):
        self.login_with_expired_token(self.admin)

        response = self.client.get(self.detail_url(self.organization))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['name'], 'Acme Corporation')

    def test_update_with_expired_token(self):
        self.login_with_expired_token(self.admin)

        response = self.client.put(self.detail_url(self.organization), {'name': 'Acme Corp'})

        self.assertEqual(response.status_code, 401)

    def test_retrieve_malformed_id(self):
        response = self.client.get('/organizations/not-a-uuid')

        self.assertEqual(response.status_code, 404)

    def test_update_by_admin(self):
        self.login_as(self.admin)

        response = self.client.put(self.detail_url(self.organization), {'name': 'Acme Corp'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['name'], 'Acme Corp')

        self.organization.refresh_from_db()
        self.assertEqual(self.organization.name, 'Acme Corp')

    def test_update_without_changes(self):
        self.login_as(self.admin)

        response = self.client.put(self.detail_url(self.organization), {})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['name'], 'Acme Corporation')

    def test_update_name_conflict(self):
        self.login_as(self.admin)

        response = self.client.put(self.detail_url(self.organization), {'name': 'Tech Solutions Inc.'})

        self.assertEqual(response.status_code, 409)

    def test_update_requires_admin(self):
        self.login_as(self.user)

        response = self.client.put(self.detail_url(self.organization), {'name': 'Acme Corp'})

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.data['message'], 'Forbidden resource')

    def test_update_other_organization_forbidden(self):
        self.login_as(self.admin)

        response = self.client.put(self.detail_url(self.other_organization), {'name': 'Hijacked'})

        self.assertEqual(response.status_code, 403)
        self.other_organization.refresh_from_db()
        self.assertEqual(self.other_organization.name, 'Tech Solutions Inc.')

    def test_update_anonymous(self):
        response = self.client.put(self.detail_url(self.organization), {'name': 'Acme Corp'})

        self.assertEqual(response.status_code, 401)

    def test_delete_with_users(self):
        self.login_as(self.admin)

        response = self.client.delete(self.detail_url(self.organization))

        self.assertEqual(response.status_code, 409)
        self.assertEqual(
            response.data['message'],
            'Cannot delete organization with existing users. Please remove all users first.',
        )
        self.assertTrue(Organization.objects.filter(pk=self.organization.pk).exists())

    def test_delete_empty_organization(self):
        root = User.objects.create_superuser(email='root@taloncrm.com', password='password123')
        self.login_as(root)

        response = self.client.delete(self.detail_url(self.other_organization))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {'message': 'Organization deleted successfully'})
        self.assertFalse(Organization.objects.filter(pk=self.other_organization.pk).exists())

    def test_delete_unknown(self):
        root = User.objects.create_superuser(email='root@taloncrm.com', password='password123')
        self.login_as(root)

        response = self.client.delete('/organizations/00000000-0000-0000-0000-000000000000')

        self.assertEqual(response.status_code, 404)

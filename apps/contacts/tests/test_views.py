"""
Tests for Contact views
========================

Test Cases:
1. GET /contacts is scoped to the caller's organization
2. POST /contacts is ADMIN only
3. GET /contacts/<id> hides other organizations' contacts
"""

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from apps.accounts.tokens import issue_token
from apps.contacts.models import Contact
from apps.core.models import Organization

User = get_user_model()


class ContactTestBase(TestCase):

    def setUp(self):
        """Setup test data"""
        self.client = APIClient()

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

        self.contact = Contact.objects.create(
            organization=self.organization,
            created_by=self.admin,
            first_name='Ana',
            last_name='Lopez',
            email='ana@client.com',
            company='Client Co',
        )
        self.foreign_contact = Contact.objects.create(
            organization=self.other_organization,
            first_name='Bob',
            last_name='Stone',
        )

    def login_as(self, user):
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(user)}')


class ContactModelTest(ContactTestBase):
    """Test Contact model"""

    def test_full_name(self):
        self.assertEqual(self.contact.get_full_name(), 'Ana Lopez')
        self.assertEqual(str(self.contact), 'Ana Lopez')

    def test_creator_removal_keeps_contact(self):
        self.admin.delete()

        self.contact.refresh_from_db()
        self.assertIsNone(self.contact.created_by)


class ContactListViewTest(ContactTestBase):
    """Test GET/POST /contacts"""

    def test_list_requires_token(self):
        response = self.client.get('/contacts')

        self.assertEqual(response.status_code, 401)

    def test_list_scoped_to_organization(self):
        self.login_as(self.user)

        response = self.client.get('/contacts')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['message'], 'Contacts retrieved successfully')
        self.assertEqual(response.data['user']['email'], 'user@acme.com')
        self.assertEqual(str(response.data['organizationId']), str(self.organization.pk))

        ids = [str(contact['id']) for contact in response.data['contacts']]
        self.assertEqual(ids, [str(self.contact.pk)])

    def test_create_as_admin(self):
        self.login_as(self.admin)

        response = self.client.post('/contacts', {
            'firstName': 'Carla',
            'lastName': 'Mendez',
            'email': 'carla@client.com',
            'phone': '+15551234567',
        })

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['message'], 'Contact created successfully')
        self.assertEqual(response.data['createdBy'], 'admin@acme.com')
        self.assertEqual(response.data['contact']['firstName'], 'Carla')
        self.assertEqual(str(response.data['contact']['organizationId']), str(self.organization.pk))

        contact = Contact.objects.get(first_name='Carla')
        self.assertEqual(contact.organization, self.organization)
        self.assertEqual(contact.created_by, self.admin)

    def test_create_as_user_forbidden(self):
        self.login_as(self.user)

        response = self.client.post('/contacts', {'firstName': 'Carla', 'lastName': 'Mendez'})

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.data, {
            'statusCode': 403,
            'message': 'Forbidden resource',
            'error': 'Forbidden',
        })
        self.assertFalse(Contact.objects.filter(first_name='Carla').exists())

    def test_create_ignores_organization_in_body(self):
        self.login_as(self.admin)

        response = self.client.post('/contacts', {
            'firstName': 'Carla',
            'lastName': 'Mendez',
            'organizationId': str(self.other_organization.pk),
        })

        self.assertEqual(response.status_code, 201)
        self.assertEqual(Contact.objects.get(first_name='Carla').organization, self.organization)

    def test_create_validation(self):
        self.login_as(self.admin)

        response = self.client.post('/contacts', {'firstName': 'Carla', 'email': 'not-an-email'})

        self.assertEqual(response.status_code, 400)
        self.assertIn('lastName: This field is required.', response.data['message'])
        self.assertIn('email: Enter a valid email address.', response.data['message'])


class ContactDetailViewTest(ContactTestBase):
    """Test GET /contacts/<id>"""

    def test_retrieve_own_contact(self):
        self.login_as(self.user)

        response = self.client.get(f'/contacts/{self.contact.pk}')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['lastName'], 'Lopez')
        self.assertEqual(response.data['company'], 'Client Co')

    def test_other_organization_contact_hidden(self):
        self.login_as(self.user)

        response = self.client.get(f'/contacts/{self.foreign_contact.pk}')

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data['message'], 'Contact not found')

    def test_malformed_id(self):
        self.login_as(self.user)

        response = self.client.get('/contacts/not-a-uuid')

        self.assertEqual(response.status_code, 404)

from django.contrib.auth.models import User
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.choices import FieldVisibility, Role
from apps.accounts.tests.helpers import PASSWORD, make_member


class SignupLoginTests(APITestCase):

    def test_signup_creates_member_with_friends_only_defaults(self):
        response = self.client.post(reverse('api:v1:signup'), {
            'email': 'Ruth@Example.com',
            'password': 'gleaning-Fields-7',
            'password_confirm': 'gleaning-Fields-7',
            'first_name': 'Ruth',
            'last_name': 'Miller',
        })

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIn('access', response.data)
        self.assertIn('refresh', response.data)

        user = User.objects.get(email='ruth@example.com')
        self.assertEqual(user.profile.role, Role.MEMBER)
        self.assertEqual(user.profile.profile_visibility, FieldVisibility.FRIENDS)
        self.assertEqual(user.profile.email_visibility, FieldVisibility.FRIENDS)

    def test_signup_rejects_duplicate_email(self):
        make_member('ruth@example.com')
        response = self.client.post(reverse('api:v1:signup'), {
            'email': 'RUTH@example.com',
            'password': 'gleaning-Fields-7',
            'password_confirm': 'gleaning-Fields-7',
            'first_name': 'Ruth',
            'last_name': 'Miller',
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_signup_rejects_mismatched_passwords(self):
        response = self.client.post(reverse('api:v1:signup'), {
            'email': 'ruth@example.com',
            'password': 'gleaning-Fields-7',
            'password_confirm': 'gleaning-Fields-8',
            'first_name': 'Ruth',
            'last_name': 'Miller',
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(User.objects.exists())

    def test_login_with_email(self):
        make_member('naomi@example.com')
        response = self.client.post(reverse('api:v1:login'), {
            'email': 'Naomi@example.com',
            'password': PASSWORD,
        })

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['user']['email'], 'naomi@example.com')

        me = self.client.get(
            reverse('api:v1:current_user'),
            HTTP_AUTHORIZATION=f"Bearer {response.data['access']}"
        )
        self.assertEqual(me.status_code, status.HTTP_200_OK)
        self.assertEqual(me.data['profile']['role'], Role.MEMBER)

    def test_login_wrong_password(self):
        make_member('naomi@example.com')
        response = self.client.post(reverse('api:v1:login'), {
            'email': 'naomi@example.com',
            'password': 'not-it',
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_requires_authentication(self):
        response = self.client.get(reverse('api:v1:current_user'))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIn('message', response.data)


class ProfileTests(APITestCase):

    def setUp(self):
        self.user = make_member('naomi@example.com')
        self.client.force_authenticate(self.user)

    def test_update_privacy_settings(self):
        response = self.client.patch(reverse('api:v1:profile'), {
            'phone': '555-0199',
            'phone_visibility': FieldVisibility.PRIVATE,
            'profile_visibility': FieldVisibility.PUBLIC,
            'first_name': 'Naomi',
        })

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.profile.refresh_from_db()
        self.user.refresh_from_db()
        self.assertEqual(self.user.profile.phone_visibility, FieldVisibility.PRIVATE)
        self.assertEqual(self.user.profile.profile_visibility, FieldVisibility.PUBLIC)
        self.assertEqual(self.user.first_name, 'Naomi')

    def test_role_is_not_self_assignable(self):
        response = self.client.patch(reverse('api:v1:profile'), {'role': Role.ADMIN})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.profile.refresh_from_db()
        self.assertEqual(self.user.profile.role, Role.MEMBER)

    def test_invalid_visibility_rejected(self):
        response = self.client.patch(reverse('api:v1:profile'), {'email_visibility': 'everyone'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_change_password(self):
        response = self.client.post(reverse('api:v1:password_change'), {
            'old_password': PASSWORD,
            'new_password': 'new-Vineyard-93',
            'new_password_confirm': 'new-Vineyard-93',
        })
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('new-Vineyard-93'))

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.choices import ContentVisibility, MessageType, Role
from apps.accounts.tests.helpers import make_friendship, make_member
from apps.messaging.models import Message


class MessageFeedTests(APITestCase):

    def setUp(self):
        self.author = make_member('author@example.com')
        self.member = make_member('member@example.com')
        self.leader = make_member('leader@example.com', role=Role.LEADER)
        self.admin = make_member('admin@example.com', role=Role.ADMIN)

    def post_as(self, user, **data):
        self.client.force_authenticate(user)
        payload = {'title': 'Potluck', 'content': 'Bring a dish.'}
        payload.update(data)
        return self.client.post(reverse('api:v1:message_list'), payload)

    def titles_for(self, user, **params):
        self.client.force_authenticate(user)
        response = self.client.get(reverse('api:v1:message_list'), params)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        return [m['title'] for m in response.data['results']]

    def test_create_defaults_to_public_announcement(self):
        response = self.post_as(self.author)

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['visibility'], ContentVisibility.PUBLIC)
        self.assertEqual(response.data['message_type'], MessageType.ANNOUNCEMENT)
        self.assertTrue(response.data['can_delete'])

    def test_member_cannot_post_to_leaders(self):
        response = self.post_as(self.author, visibility=ContentVisibility.LEADERS)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], 'Unauthorized')
        self.assertFalse(Message.objects.exists())

    def test_leaders_message_scenario(self):
        Message.objects.create(
            created_by=self.author, title='Council', content='...', visibility=ContentVisibility.LEADERS
        )

        self.assertEqual(self.titles_for(self.member), [])
        self.assertEqual(self.titles_for(self.leader), ['Council'])
        self.assertEqual(self.titles_for(self.author), ['Council'])

    def test_friends_message_needs_friendship(self):
        self.post_as(self.author, title='Family news', visibility=ContentVisibility.FRIENDS)

        self.assertEqual(self.titles_for(self.member), [])
        make_friendship(self.author, self.member)
        self.assertEqual(self.titles_for(self.member), ['Family news'])

    def test_filter_by_type_and_search(self):
        self.post_as(self.author, title='Pray for Sam', message_type=MessageType.PRAYER_REQUEST)
        self.post_as(self.author, title='Parking lot closed', message_type=MessageType.GENERAL)

        self.assertEqual(self.titles_for(self.member, type=MessageType.PRAYER_REQUEST), ['Pray for Sam'])
        self.assertEqual(self.titles_for(self.member, q='parking'), ['Parking lot closed'])

    def test_unknown_type_filter_rejected(self):
        self.client.force_authenticate(self.member)
        response = self.client.get(reverse('api:v1:message_list'), {'type': 'gossip'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_hidden_message_detail_is_not_found(self):
        message = Message.objects.create(
            created_by=self.author, title='Admins', content='...', visibility=ContentVisibility.ADMIN
        )

        self.client.force_authenticate(self.leader)
        response = self.client.get(reverse('api:v1:message_detail', args=[message.id]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse('api:v1:message_detail', args=[message.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['can_delete'])

    def test_only_creator_deletes(self):
        message_id = self.post_as(self.author).data['id']

        self.client.force_authenticate(self.admin)
        response = self.client.delete(reverse('api:v1:message_detail', args=[message_id]))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.author)
        response = self.client.delete(reverse('api:v1:message_detail', args=[message_id]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Message.objects.exists())

    def test_visibility_options_follow_role(self):
        expected = {
            self.member: ['public', 'friends'],
            self.leader: ['public', 'friends', 'leaders'],
            self.admin: ['public', 'friends', 'leaders', 'admin'],
        }
        for user, values in expected.items():
            with self.subTest(user=user.email):
                self.client.force_authenticate(user)
                response = self.client.get(reverse('api:v1:visibility_options'))
                self.assertEqual([o['value'] for o in response.data], values)

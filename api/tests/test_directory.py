from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.choices import FieldVisibility, FriendshipStatus
from apps.accounts.tests.helpers import make_friendship, make_member


class DirectoryTests(APITestCase):

    def setUp(self):
        self.viewer = make_member('viewer@example.com')
        self.open = make_member(
            'open@example.com',
            phone='555-0100',
            profile_visibility=FieldVisibility.PUBLIC,
            phone_visibility=FieldVisibility.PUBLIC,
            email_visibility=FieldVisibility.PRIVATE,
        )
        self.friend = make_member(
            'friend@example.com',
            phone='555-0200',
            profile_visibility=FieldVisibility.FRIENDS,
            phone_visibility=FieldVisibility.FRIENDS,
            email_visibility=FieldVisibility.FRIENDS,
        )
        self.hidden = make_member('hidden@example.com', profile_visibility=FieldVisibility.PRIVATE)
        self.friendship = make_friendship(self.viewer, self.friend)
        self.client.force_authenticate(self.viewer)

    def members_by_id(self, **params):
        response = self.client.get(reverse('api:v1:directory_list'), params)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        return {m['user_id']: m for m in response.data['results']}

    def test_lists_only_visible_profiles(self):
        members = self.members_by_id()
        self.assertEqual(set(members), {self.open.id, self.friend.id})

    def test_hidden_fields_are_null(self):
        members = self.members_by_id()

        open_card = members[self.open.id]
        self.assertEqual(open_card['phone'], '555-0100')
        self.assertIsNone(open_card['email'])
        self.assertEqual(open_card['friendship_status'], 'none')
        self.assertIsNone(open_card['friendship_id'])

        friend_card = members[self.friend.id]
        self.assertEqual(friend_card['phone'], '555-0200')
        self.assertEqual(friend_card['email'], 'friend@example.com')
        self.assertEqual(friend_card['friendship_status'], 'friends')
        self.assertEqual(friend_card['friendship_id'], self.friendship.id)

    def test_pending_friend_sees_nothing_friends_only(self):
        self.friendship.status = FriendshipStatus.PENDING
        self.friendship.save()

        members = self.members_by_id()
        self.assertNotIn(self.friend.id, members)

    def test_search_does_not_match_hidden_email(self):
        self.assertEqual(set(self.members_by_id(q='open@')), set())
        self.assertEqual(set(self.members_by_id(q='friend@')), {self.friend.id})
        self.assertEqual(set(self.members_by_id(q='OPEN tester')), {self.open.id})

    def test_member_detail(self):
        response = self.client.get(reverse('api:v1:directory_member', args=[self.open.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['display_name'], 'Open Tester')

    def test_hidden_member_is_not_found(self):
        response = self.client.get(reverse('api:v1:directory_member', args=[self.hidden.id]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'NotFound')

    def test_own_card(self):
        response = self.client.get(reverse('api:v1:directory_member', args=[self.viewer.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['friendship_status'], 'self')
        self.assertEqual(response.data['email'], 'viewer@example.com')

"""
Tests for the friendship services.
"""
from django.core import mail
from django.test import TestCase

from apps.accounts.choices import FieldVisibility, FriendshipStatus, ProfileField
from apps.accounts.exceptions import DuplicateRelationship, InvalidState, NotFound, Unauthorized
from apps.accounts.models import Friendship, make_pair_key
from apps.accounts.services import (
    ViewerContext,
    accept_friend_request,
    decline_friend_request,
    get_friend_users,
    get_friendship_status,
    get_pending_friend_requests,
    remove_friendship,
    send_friend_request,
)

from .helpers import make_member


class SendFriendRequestTests(TestCase):

    def setUp(self):
        self.alice = make_member('alice@example.com')
        self.bob = make_member('bob@example.com')

    def test_creates_pending_request_and_notifies_addressee(self):
        friendship = send_friend_request(self.alice, self.bob.id)

        self.assertEqual(friendship.status, FriendshipStatus.PENDING)
        self.assertEqual(friendship.requester, self.alice)
        self.assertEqual(friendship.addressee, self.bob)
        self.assertEqual(friendship.pair_key, make_pair_key(self.alice.id, self.bob.id))

        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ['bob@example.com'])
        self.assertIn('Alice Tester', mail.outbox[0].subject)

    def test_request_in_either_direction_is_duplicate(self):
        send_friend_request(self.alice, self.bob.id)

        with self.assertRaises(DuplicateRelationship):
            send_friend_request(self.alice, self.bob.id)
        with self.assertRaises(DuplicateRelationship):
            send_friend_request(self.bob, self.alice.id)
        self.assertEqual(Friendship.objects.count(), 1)

    def test_declined_request_still_blocks_new_request(self):
        friendship = send_friend_request(self.alice, self.bob.id)
        decline_friend_request(self.bob, friendship.id)

        with self.assertRaises(DuplicateRelationship):
            send_friend_request(self.bob, self.alice.id)

    def test_cannot_befriend_self(self):
        with self.assertRaises(Unauthorized):
            send_friend_request(self.alice, self.alice.id)

    def test_unknown_addressee(self):
        with self.assertRaises(NotFound):
            send_friend_request(self.alice, 999999)

    def test_inactive_addressee_not_found(self):
        self.bob.is_active = False
        self.bob.save()
        with self.assertRaises(NotFound):
            send_friend_request(self.alice, self.bob.id)


class RespondToFriendRequestTests(TestCase):

    def setUp(self):
        self.alice = make_member('alice@example.com')
        self.bob = make_member('bob@example.com')
        self.friendship = send_friend_request(self.alice, self.bob.id)
        mail.outbox = []

    def test_addressee_accepts(self):
        friendship = accept_friend_request(self.bob, self.friendship.id)

        self.assertEqual(friendship.status, FriendshipStatus.ACCEPTED)
        self.assertTrue(Friendship.are_friends(self.alice, self.bob))
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ['alice@example.com'])

    def test_requester_cannot_accept(self):
        with self.assertRaises(Unauthorized):
            accept_friend_request(self.alice, self.friendship.id)

        self.friendship.refresh_from_db()
        self.assertEqual(self.friendship.status, FriendshipStatus.PENDING)

    def test_decline_then_accept_is_invalid(self):
        decline_friend_request(self.bob, self.friendship.id)

        with self.assertRaises(InvalidState):
            accept_friend_request(self.alice, self.friendship.id)
        with self.assertRaises(InvalidState):
            accept_friend_request(self.bob, self.friendship.id)

        self.friendship.refresh_from_db()
        self.assertEqual(self.friendship.status, FriendshipStatus.DECLINED)
        self.assertEqual(mail.outbox, [])

    def test_missing_request(self):
        with self.assertRaises(NotFound):
            accept_friend_request(self.bob, 999999)


class RemoveFriendshipTests(TestCase):

    def setUp(self):
        self.alice = make_member('alice@example.com')
        self.bob = make_member('bob@example.com')
        self.carol = make_member('carol@example.com')
        self.friendship = send_friend_request(self.alice, self.bob.id)

    def test_requester_cancels_pending_request(self):
        remove_friendship(self.alice, self.friendship.id)
        self.assertFalse(Friendship.objects.exists())

    def test_either_party_removes_friendship(self):
        accept_friend_request(self.bob, self.friendship.id)
        remove_friendship(self.bob, self.friendship.id)
        self.assertFalse(Friendship.are_friends(self.alice, self.bob))

    def test_removing_twice_is_not_found(self):
        remove_friendship(self.alice, self.friendship.id)
        with self.assertRaises(NotFound):
            remove_friendship(self.alice, self.friendship.id)

    def test_third_party_cannot_remove(self):
        with self.assertRaises(Unauthorized):
            remove_friendship(self.carol, self.friendship.id)
        self.assertTrue(Friendship.objects.filter(id=self.friendship.id).exists())

    def test_declined_request_cannot_be_removed(self):
        decline_friend_request(self.bob, self.friendship.id)
        with self.assertRaises(InvalidState):
            remove_friendship(self.alice, self.friendship.id)

    def test_pair_can_reconnect_after_removal(self):
        accept_friend_request(self.bob, self.friendship.id)
        remove_friendship(self.alice, self.friendship.id)

        again = send_friend_request(self.bob, self.alice.id)
        self.assertEqual(again.status, FriendshipStatus.PENDING)


class FriendsVisibilityLifecycleTests(TestCase):
    """A friends-only field follows the friendship as it is created and removed."""

    def test_friends_field_tracks_friendship(self):
        alice = make_member('alice@example.com', phone='555-0101', phone_visibility=FieldVisibility.FRIENDS)
        bob = make_member('bob@example.com')

        def bob_sees_phone():
            return ViewerContext.for_user(bob).can_view_field(alice.profile, ProfileField.PHONE)

        self.assertFalse(bob_sees_phone())

        friendship = send_friend_request(bob, alice.id)
        self.assertFalse(bob_sees_phone())

        accept_friend_request(alice, friendship.id)
        self.assertTrue(bob_sees_phone())

        remove_friendship(alice, friendship.id)
        self.assertFalse(bob_sees_phone())


class FriendQueryTests(TestCase):

    def setUp(self):
        self.alice = make_member('alice@example.com')
        self.bob = make_member('bob@example.com')
        self.carol = make_member('carol@example.com')

    def test_friendship_status_labels(self):
        self.assertEqual(get_friendship_status(self.alice, self.alice)['status'], 'self')
        self.assertEqual(get_friendship_status(self.alice, self.bob)['status'], 'none')

        friendship = send_friend_request(self.alice, self.bob.id)
        self.assertEqual(get_friendship_status(self.alice, self.bob)['status'], 'request_sent')
        self.assertEqual(get_friendship_status(self.bob, self.alice)['status'], 'request_received')

        accept_friend_request(self.bob, friendship.id)
        result = get_friendship_status(self.bob, self.alice)
        self.assertEqual(result['status'], 'friends')
        self.assertEqual(result['friendship'], friendship)

    def test_pending_requests_split_by_direction(self):
        send_friend_request(self.alice, self.bob.id)
        send_friend_request(self.carol, self.alice.id)

        pending = get_pending_friend_requests(self.alice)
        self.assertEqual([f.addressee for f in pending['sent']], [self.bob])
        self.assertEqual([f.requester for f in pending['received']], [self.carol])

    def test_friend_users_lists_other_side(self):
        f1 = send_friend_request(self.alice, self.bob.id)
        f2 = send_friend_request(self.carol, self.alice.id)
        accept_friend_request(self.bob, f1.id)
        accept_friend_request(self.alice, f2.id)

        friends = {user for user, _ in get_friend_users(self.alice)}
        self.assertEqual(friends, {self.bob, self.carol})
        self.assertEqual([user for user, _ in get_friend_users(self.bob)], [self.alice])

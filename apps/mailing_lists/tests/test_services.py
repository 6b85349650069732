"""
Tests for mailing list membership and broadcast.
"""
from django.core import mail
from django.test import TestCase

from apps.accounts.choices import ContentVisibility, MessageType, Role
from apps.accounts.exceptions import InvalidState, NotFound, Unauthorized
from apps.accounts.services import ViewerContext
from apps.accounts.tests.helpers import make_member
from apps.mailing_lists import services
from apps.mailing_lists.models import MailingListMembership
from apps.messaging.models import Message


class MailingListServiceTests(TestCase):

    def setUp(self):
        self.owner = make_member('owner@example.com')
        self.member = make_member('member@example.com')
        self.leader = make_member('leader@example.com', role=Role.LEADER)
        self.choir = services.create_mailing_list(
            self.owner, ViewerContext.for_user(self.owner), 'Choir', 'Rehearsal notes'
        )

    def join(self, user, mailing_list=None):
        return services.join_list(user, ViewerContext.for_user(user), mailing_list or self.choir)

    def test_member_cannot_create_leaders_list(self):
        with self.assertRaises(Unauthorized):
            services.create_mailing_list(
                self.member, ViewerContext.for_user(self.member), 'Elders',
                privacy_level=ContentVisibility.LEADERS
            )

    def test_join_and_leave(self):
        self.join(self.member)
        self.assertTrue(self.choir.has_member(self.member))

        services.leave_list(self.member, self.choir)
        self.assertFalse(self.choir.has_member(self.member))

    def test_join_twice_is_invalid(self):
        self.join(self.member)
        with self.assertRaises(InvalidState):
            self.join(self.member)
        self.assertEqual(MailingListMembership.objects.filter(user=self.member).count(), 1)

    def test_leave_without_membership(self):
        with self.assertRaises(NotFound):
            services.leave_list(self.member, self.choir)

    def test_hidden_list_cannot_be_joined(self):
        elders = services.create_mailing_list(
            self.leader, ViewerContext.for_user(self.leader), 'Elders',
            privacy_level=ContentVisibility.LEADERS
        )
        with self.assertRaises(Unauthorized):
            self.join(self.member, elders)

    def test_member_counts(self):
        self.join(self.member)
        self.join(self.leader)
        self.assertEqual(services.get_member_counts([self.choir.id]), {self.choir.id: 2})
        self.assertEqual(services.get_membership_ids(self.member), {self.choir.id})

    def test_owner_sends_to_members(self):
        self.join(self.owner)
        self.join(self.member)
        self.join(self.leader)

        message = services.send_list_message(
            self.owner, ViewerContext.for_user(self.owner), self.choir, 'Sunday', 'Warm up at 9.'
        )

        self.assertEqual(message.title, '[Choir] Sunday')
        self.assertEqual(message.message_type, MessageType.ANNOUNCEMENT)
        self.assertEqual(message.visibility, self.choir.privacy_level)

        recipients = sorted(email.to[0] for email in mail.outbox)
        self.assertEqual(recipients, ['leader@example.com', 'member@example.com'])
        self.assertEqual(mail.outbox[0].subject, '[Choir] Sunday')

    def test_plain_member_cannot_send(self):
        self.join(self.member)
        with self.assertRaises(Unauthorized):
            services.send_list_message(
                self.member, ViewerContext.for_user(self.member), self.choir, 'Hi', 'Hello all'
            )

    def test_leader_can_send_to_any_list(self):
        self.join(self.member)
        services.send_list_message(
            self.leader, ViewerContext.for_user(self.leader), self.choir, 'Notice', 'Room change'
        )
        self.assertEqual([email.to for email in mail.outbox], [['member@example.com']])

    def test_demoted_owner_cannot_send_above_role(self):
        elders = services.create_mailing_list(
            self.leader, ViewerContext.for_user(self.leader), 'Elders',
            privacy_level=ContentVisibility.LEADERS
        )
        self.leader.profile.role = Role.MEMBER
        self.leader.profile.save()

        with self.assertRaises(Unauthorized):
            services.send_list_message(
                self.leader, ViewerContext.for_user(self.leader), elders, 'Agenda', 'Items'
            )
        self.assertFalse(Message.objects.exists())

    def test_leader_cannot_send_to_admin_list(self):
        admin = make_member('admin@example.com', role=Role.ADMIN)
        staff = services.create_mailing_list(
            admin, ViewerContext.for_user(admin), 'Staff', privacy_level=ContentVisibility.ADMIN
        )

        with self.assertRaises(Unauthorized):
            services.send_list_message(
                self.leader, ViewerContext.for_user(self.leader), staff, 'Budget', 'Numbers'
            )
        self.assertFalse(Message.objects.exists())

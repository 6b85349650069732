"""
Mailing list membership and broadcast services.
"""
import logging
from django.db import IntegrityError, transaction
from django.db.models import Count

from apps.accounts import policy
from apps.accounts.choices import MessageType
from apps.accounts.exceptions import InvalidState, NotFound, Unauthorized
from apps.messaging.models import Message

from .models import MailingList, MailingListMembership

logger = logging.getLogger(__name__)


def create_mailing_list(user, viewer, name, description='', privacy_level='public'):
    """Create a list; the role gate decides which privacy levels are allowed."""
    viewer.require_visibility(privacy_level)
    mailing_list = MailingList.objects.create(
        created_by=user,
        name=name,
        description=description,
        privacy_level=privacy_level,
    )
    logger.info(f"Mailing list created: '{mailing_list.name}' by {user.email}")
    return mailing_list


def join_list(user, viewer, mailing_list):
    """
    Add `user` to a list they are allowed to see.

    Raises:
        Unauthorized: the list's privacy level hides it from the user
        InvalidState: the user is already a member
    """
    if not viewer.can_view(mailing_list):
        raise Unauthorized("You cannot join this mailing list.")

    try:
        with transaction.atomic():
            membership = MailingListMembership.objects.create(mailing_list=mailing_list, user=user)
    except IntegrityError:
        raise InvalidState("You are already a member of this list.")

    logger.info(f"{user.email} joined mailing list '{mailing_list.name}'")
    return membership


def leave_list(user, mailing_list):
    deleted, _ = MailingListMembership.objects.filter(mailing_list=mailing_list, user=user).delete()
    if not deleted:
        raise NotFound("You are not a member of this list.")

    logger.info(f"{user.email} left mailing list '{mailing_list.name}'")
    return True


def send_list_message(user, viewer, mailing_list, subject, content):
    """
    Post an announcement to a list and email its members.

    The message is recorded on the feed with the list's privacy level, so
    the sender's role must be allowed to publish at that level.
    """
    if not policy.can_broadcast_to_list(user.id, viewer.role, mailing_list):
        raise Unauthorized("Only the list owner, leaders and admins can send to this list.")
    viewer.require_visibility(mailing_list.privacy_level)

    message = Message.objects.create(
        created_by=user,
        title=f"[{mailing_list.name}] {subject}",
        content=content,
        message_type=MessageType.ANNOUNCEMENT,
        visibility=mailing_list.privacy_level,
    )

    try:
        from .tasks import send_mailing_list_message
        send_mailing_list_message.delay(mailing_list.id, message.id)
    except Exception as e:
        logger.warning(f"Could not queue mailing list email: {e}")

    logger.info(f"Message sent to mailing list '{mailing_list.name}' by {user.email}")
    return message


def get_member_counts(list_ids):
    """Map list id -> member count in one query."""
    rows = (
        MailingListMembership.objects.filter(mailing_list_id__in=list_ids)
        .values('mailing_list_id')
        .annotate(total=Count('id'))
    )
    return {row['mailing_list_id']: row['total'] for row in rows}


def get_membership_ids(user):
    """Ids of the lists `user` belongs to."""
    return set(
        MailingListMembership.objects.filter(user=user).values_list('mailing_list_id', flat=True)
    )

"""
Friend request and friendship management services.

Business logic for friend operations, separated from views. Each function
performs one write; the rules themselves live in apps.accounts.policy.
"""
import logging
from django.db import IntegrityError, transaction
from django.contrib.auth.models import User

from ..choices import FriendshipStatus
from ..exceptions import DuplicateRelationship, NotFound
from ..models import Friendship
from .. import policy

logger = logging.getLogger(__name__)


def get_friendship_status(user, other_user):
    """
    Get the relationship status between two members.

    Returns:
        dict: {
            'status': 'self' | 'none' | 'friends' | 'request_sent'
                      | 'request_received' | 'declined',
            'friendship': Friendship or None,
        }
    """
    if user.id == other_user.id:
        return {'status': 'self', 'friendship': None}

    friendship = Friendship.between(user, other_user)
    return {'status': describe_friendship(friendship, user.id), 'friendship': friendship}


def describe_friendship(friendship, user_id):
    """Label a friendship from one member's point of view."""
    if friendship is None:
        return 'none'
    if friendship.status == FriendshipStatus.ACCEPTED:
        return 'friends'
    if friendship.status == FriendshipStatus.DECLINED:
        return 'declined'
    if friendship.requester_id == user_id:
        return 'request_sent'
    return 'request_received'


def send_friend_request(requester, addressee_id):
    """
    Send a friend request to another member.

    Raises:
        NotFound: addressee does not exist
        Unauthorized: requester and addressee are the same account
        DuplicateRelationship: a friendship already exists for the pair
    """
    try:
        addressee = User.objects.get(id=addressee_id, is_active=True)
    except User.DoesNotExist:
        raise NotFound("Member not found.")

    policy.check_send_request(requester.id, addressee.id, Friendship.between(requester, addressee))

    # The unique pair_key closes the race between two simultaneous requests
    try:
        with transaction.atomic():
            friendship = Friendship.objects.create(
                requester=requester,
                addressee=addressee,
                status=FriendshipStatus.PENDING,
            )
    except IntegrityError:
        raise DuplicateRelationship()

    # Queue notification email
    try:
        from ..tasks import send_friend_request_email
        send_friend_request_email.delay(friendship.id)
    except Exception as e:
        logger.warning(f"Could not queue friend request email: {e}")

    logger.info(f"Friend request sent: {requester.email} -> {addressee.email}")
    return friendship


def _locked_friendship(friendship_id):
    return Friendship.objects.select_for_update().filter(id=friendship_id).first()


@transaction.atomic
def respond_to_friend_request(user, friendship_id, accept):
    """Accept or decline a pending request addressed to `user`."""
    friendship = _locked_friendship(friendship_id)
    new_status = FriendshipStatus.ACCEPTED if accept else FriendshipStatus.DECLINED

    friendship.status = policy.check_respond(friendship, user.id, new_status)
    friendship.save(update_fields=['status', 'updated_at'])

    if friendship.status == FriendshipStatus.ACCEPTED:
        try:
            from ..tasks import send_friend_request_accepted_email
            send_friend_request_accepted_email.delay(friendship.id)
        except Exception as e:
            logger.warning(f"Could not queue acceptance email: {e}")

    logger.info(
        f"Friend request {friendship.status}: {friendship.requester.email} -> {user.email}"
    )
    return friendship


def accept_friend_request(user, friendship_id):
    return respond_to_friend_request(user, friendship_id, accept=True)


def decline_friend_request(user, friendship_id):
    return respond_to_friend_request(user, friendship_id, accept=False)


@transaction.atomic
def remove_friendship(user, friendship_id):
    """
    Cancel a pending request or remove an accepted friendship.

    Either party may do this. Removing a friendship that no longer exists
    raises NotFound.
    """
    friendship = _locked_friendship(friendship_id)
    policy.check_delete(friendship, user.id)

    was_pending = friendship.status == FriendshipStatus.PENDING
    other = friendship.other_party(user)
    friendship.delete()

    if was_pending:
        logger.info(f"Friend request cancelled: {user.email} / {other.email}")
    else:
        logger.info(f"Friendship removed: {user.email} <-> {other.email}")
    return True


def get_pending_friend_requests(user):
    """Get all pending friend requests for a member."""
    return {
        'received': Friendship.objects.filter(
            addressee=user, status=FriendshipStatus.PENDING
        ).select_related('requester', 'requester__profile').order_by('-created_at'),
        'sent': Friendship.objects.filter(
            requester=user, status=FriendshipStatus.PENDING
        ).select_related('addressee', 'addressee__profile').order_by('-created_at'),
    }


def get_friend_users(user):
    """Return the members `user` has an accepted friendship with, with the friendship."""
    return [(f.other_party(user), f) for f in Friendship.get_friends(user)]

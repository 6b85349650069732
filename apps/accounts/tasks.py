"""
Celery tasks for friend-related email notifications.
"""
from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string
import logging

logger = logging.getLogger(__name__)


def _site_context():
    return {
        'community_name': settings.COMMUNITY_NAME,
        'site_url': getattr(settings, 'SITE_URL', 'http://localhost:8000'),
    }


@shared_task
def send_friend_request_email(friendship_id):
    """
    Send email notification for a new friend request.
    """
    from .models import Friendship

    try:
        friendship = Friendship.objects.select_related(
            'requester', 'requester__profile', 'addressee'
        ).get(id=friendship_id)
    except Friendship.DoesNotExist:
        return f"Friendship {friendship_id} not found"

    requester_name = friendship.requester.profile.display_name

    context = {
        **_site_context(),
        'requester_name': requester_name,
    }
    plain_message = render_to_string('emails/friend_request.txt', context)

    send_mail(
        subject=f"{requester_name} wants to be your friend on {settings.COMMUNITY_NAME}",
        message=plain_message,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[friendship.addressee.email],
        fail_silently=False,
    )

    logger.info(f"Friend request email sent to {friendship.addressee.email}")
    return f"Email sent to {friendship.addressee.email}"


@shared_task
def send_friend_request_accepted_email(friendship_id):
    """
    Notify the requester that their friend request was accepted.
    """
    from .models import Friendship

    try:
        friendship = Friendship.objects.select_related(
            'requester', 'addressee', 'addressee__profile'
        ).get(id=friendship_id)
    except Friendship.DoesNotExist:
        return f"Friendship {friendship_id} not found"

    accepter_name = friendship.addressee.profile.display_name

    context = {
        **_site_context(),
        'accepter_name': accepter_name,
    }
    plain_message = render_to_string('emails/friend_request_accepted.txt', context)

    send_mail(
        subject=f"{accepter_name} accepted your friend request on {settings.COMMUNITY_NAME}",
        message=plain_message,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[friendship.requester.email],
        fail_silently=False,
    )

    logger.info(f"Acceptance email sent to {friendship.requester.email}")
    return f"Email sent to {friendship.requester.email}"

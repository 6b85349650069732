"""
Celery tasks for mailing list delivery.
"""
from celery import shared_task
from django.conf import settings
from django.core.mail import send_mass_mail
from django.template.loader import render_to_string
import logging

logger = logging.getLogger(__name__)


@shared_task
def send_mailing_list_message(list_id, message_id):
    """
    Email a list message to every member of the list except the sender.
    """
    from apps.messaging.models import Message
    from .models import MailingList

    try:
        mailing_list = MailingList.objects.get(id=list_id)
        message = Message.objects.select_related('created_by', 'created_by__profile').get(id=message_id)
    except (MailingList.DoesNotExist, Message.DoesNotExist):
        return f"MailingList {list_id} or Message {message_id} not found"

    recipients = list(
        mailing_list.members.exclude(id=message.created_by_id)
        .exclude(email='')
        .values_list('email', flat=True)
    )
    if not recipients:
        return "No recipients"

    context = {
        'community_name': settings.COMMUNITY_NAME,
        'site_url': getattr(settings, 'SITE_URL', 'http://localhost:8000'),
        'list_name': mailing_list.name,
        'sender_name': message.created_by.profile.display_name,
        'content': message.content,
    }
    plain_message = render_to_string('emails/mailing_list_message.txt', context)

    # One email per recipient
    datatuple = [
        (message.title, plain_message, settings.DEFAULT_FROM_EMAIL, [email])
        for email in recipients
    ]
    sent = send_mass_mail(datatuple, fail_silently=False)

    logger.info(f"Mailing list '{mailing_list.name}' message delivered to {sent} member(s)")
    return f"Email sent to {sent} member(s)"

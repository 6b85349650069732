from django.db import models
from django.contrib.auth.models import User

from apps.accounts.choices import MessageType
from apps.accounts.mixins import VisibilityModelMixin


class Message(VisibilityModelMixin):
    """Announcement, prayer request or general post on the community feed."""

    created_by = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='messages'
    )
    title = models.CharField(max_length=200)
    content = models.TextField()
    message_type = models.CharField(
        max_length=20,
        choices=MessageType.choices,
        default=MessageType.ANNOUNCEMENT
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['message_type', '-created_at'], name='messaging_m_type_4a1c9e_idx'),
            models.Index(fields=['created_by', '-created_at'], name='messaging_m_creator_7b2d0f_idx'),
        ]

    def __str__(self):
        return f"{self.get_message_type_display()}: {self.title[:50]}"

from django.db import models
from django.contrib.auth.models import User

from apps.accounts.choices import ContentVisibility


class MailingList(models.Model):
    """Topic-based list members can join to receive announcements."""

    created_by = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='mailing_lists_created'
    )
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    privacy_level = models.CharField(
        max_length=10,
        choices=ContentVisibility.choices,
        default=ContentVisibility.PUBLIC,
        db_index=True,
        help_text="Who can see and join this list"
    )
    members = models.ManyToManyField(
        User,
        through='MailingListMembership',
        related_name='mailing_lists'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def visibility(self):
        """Audience level under the shared content visibility rules."""
        return self.privacy_level

    def has_member(self, user):
        return self.memberships.filter(user=user).exists()


class MailingListMembership(models.Model):
    mailing_list = models.ForeignKey(
        MailingList,
        on_delete=models.CASCADE,
        related_name='memberships'
    )
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='mailing_list_memberships'
    )
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['joined_at']
        constraints = [
            models.UniqueConstraint(fields=['mailing_list', 'user'], name='mailing_list_unique_member'),
        ]

    def __str__(self):
        return f"{self.user.email} in {self.mailing_list.name}"

"""
Closed value sets shared by the community models and the visibility policy.
"""
from django.db import models


class Role(models.TextChoices):
    MEMBER = 'member', 'Member'
    LEADER = 'leader', 'Leader'
    ADMIN = 'admin', 'Admin'


class FieldVisibility(models.TextChoices):
    """Who may see a profile field."""
    PUBLIC = 'public', 'Public'
    FRIENDS = 'friends', 'Friends only'
    PRIVATE = 'private', 'Only me'


class ProfileField(models.TextChoices):
    """Profile fields that carry their own visibility setting."""
    PROFILE = 'profile', 'Profile'
    PHONE = 'phone', 'Phone'
    EMAIL = 'email', 'Email'


class ContentVisibility(models.TextChoices):
    """Who may see a message, calendar event or mailing list."""
    PUBLIC = 'public', 'Everyone'
    FRIENDS = 'friends', 'Friends only'
    LEADERS = 'leaders', 'Leaders'
    ADMIN = 'admin', 'Admins'


class FriendshipStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'
    DECLINED = 'declined', 'Declined'


class MessageType(models.TextChoices):
    ANNOUNCEMENT = 'announcement', 'Announcement'
    PRAYER_REQUEST = 'prayer_request', 'Prayer Request'
    GENERAL = 'general', 'General'

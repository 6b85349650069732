from django.db import models
from django.contrib.auth.models import User
from django.db.models import Q
from django.db.models.signals import post_save
from django.dispatch import receiver

from .choices import FieldVisibility, FriendshipStatus, Role


class Profile(models.Model):
    """Directory profile for a community member."""

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')

    phone = models.CharField(max_length=30, blank=True)
    bio = models.TextField(blank=True)

    # Changed through the admin only
    role = models.CharField(
        max_length=10,
        choices=Role.choices,
        default=Role.MEMBER,
        help_text="Member role; leaders and admins can publish restricted content"
    )

    # Privacy
    profile_visibility = models.CharField(
        max_length=10,
        choices=FieldVisibility.choices,
        default=FieldVisibility.FRIENDS,
        help_text="Who can see this profile in the directory"
    )
    phone_visibility = models.CharField(
        max_length=10,
        choices=FieldVisibility.choices,
        default=FieldVisibility.FRIENDS,
        help_text="Who can see the phone number"
    )
    email_visibility = models.CharField(
        max_length=10,
        choices=FieldVisibility.choices,
        default=FieldVisibility.FRIENDS,
        help_text="Who can see the email address"
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=['role'], name='accounts_pr_role_3c1e2f_idx'),
        ]

    def __str__(self):
        return f"Profile for {self.user.email}"

    @property
    def full_name(self):
        return f"{self.user.first_name} {self.user.last_name}".strip()

    @property
    def display_name(self):
        """Return full name or email for display."""
        return self.full_name or self.user.email

    @property
    def is_leader(self):
        return self.role in (Role.LEADER, Role.ADMIN)

    @property
    def is_admin(self):
        return self.role == Role.ADMIN


@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    """Create a Profile when a new User is created."""
    if created:
        Profile.objects.create(user=instance)


@receiver(post_save, sender=User)
def save_user_profile(sender, instance, **kwargs):
    """Save Profile when User is saved."""
    if hasattr(instance, 'profile'):
        instance.profile.save()


# =============================================================================
# Friend System
# =============================================================================

def make_pair_key(user_a_id, user_b_id):
    """Order-independent key for a pair of accounts."""
    low, high = sorted((user_a_id, user_b_id))
    return f"{low}:{high}"


class Friendship(models.Model):
    """
    Friend request and, once accepted, friendship between two members.

    One record per unordered pair: pair_key is unique, so a request in the
    opposite direction collides with the existing row at the database.
    """
    requester = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='friendships_requested'
    )
    addressee = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='friendships_received'
    )
    status = models.CharField(
        max_length=10,
        choices=FriendshipStatus.choices,
        default=FriendshipStatus.PENDING
    )
    pair_key = models.CharField(max_length=50, unique=True, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(
                condition=~models.Q(requester=models.F('addressee')),
                name='friendship_distinct_members'
            )
        ]
        indexes = [
            models.Index(fields=['requester', 'status'], name='accounts_fr_request_8d2b1a_idx'),
            models.Index(fields=['addressee', 'status'], name='accounts_fr_address_5f7c3e_idx'),
        ]

    def __str__(self):
        return f"{self.requester.email} -> {self.addressee.email} ({self.status})"

    def save(self, *args, **kwargs):
        self.pair_key = make_pair_key(self.requester_id, self.addressee_id)
        super().save(*args, **kwargs)

    def other_party(self, user):
        """Return the member on the other side of the friendship."""
        return self.addressee if self.requester_id == user.id else self.requester

    def involves(self, user_id):
        return user_id in (self.requester_id, self.addressee_id)

    @classmethod
    def between(cls, user_a, user_b):
        """Return the friendship between two members in either direction, or None."""
        return cls.objects.filter(pair_key=make_pair_key(user_a.id, user_b.id)).first()

    @classmethod
    def for_user(cls, user):
        return cls.objects.filter(Q(requester=user) | Q(addressee=user))

    @classmethod
    def are_friends(cls, user_a, user_b):
        """Check if two members have an accepted friendship."""
        return cls.objects.filter(
            pair_key=make_pair_key(user_a.id, user_b.id),
            status=FriendshipStatus.ACCEPTED
        ).exists()

    @classmethod
    def get_friends(cls, user):
        """Get all accepted friendships of a member, with both sides loaded."""
        return cls.for_user(user).filter(
            status=FriendshipStatus.ACCEPTED
        ).select_related('requester', 'addressee', 'requester__profile', 'addressee__profile')

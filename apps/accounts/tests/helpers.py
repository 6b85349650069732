from django.contrib.auth.models import User

from apps.accounts.choices import FriendshipStatus, Role
from apps.accounts.models import Friendship

PASSWORD = 'quiet-Harbor-42'


def make_member(email, role=Role.MEMBER, **profile_fields):
    """Create an account with the given role and profile settings."""
    first_name = email.split('@')[0].capitalize()
    user = User.objects.create_user(
        username=email,
        email=email,
        password=PASSWORD,
        first_name=first_name,
        last_name='Tester',
    )
    profile = user.profile
    profile.role = role
    for name, value in profile_fields.items():
        setattr(profile, name, value)
    profile.save()
    return user


def make_friendship(requester, addressee, status=FriendshipStatus.ACCEPTED):
    return Friendship.objects.create(requester=requester, addressee=addressee, status=status)

"""
Visibility and relationship authorization rules.

Everything here is a pure function of its arguments: callers fetch the rows
(profiles, friendships, content items) and pass the relevant values in.
Unknown visibility or role values raise ValueError from the enum coercion,
so a malformed row is never treated as visible.
"""
from .choices import (
    ContentVisibility, FieldVisibility, FriendshipStatus, ProfileField, Role,
)
from .exceptions import DuplicateRelationship, InvalidState, NotFound, Unauthorized


# =============================================================================
# Field visibility (directory / profile fields)
# =============================================================================

def is_friend(friendship_status):
    """A missing friendship (None) simply means "not friends"."""
    return friendship_status is not None and FriendshipStatus(friendship_status) == FriendshipStatus.ACCEPTED


def can_view_field(viewer_id, subject_id, setting, friendship_status=None):
    """
    Decide whether a viewer may see one of the subject's scoped fields.

    Args:
        viewer_id: id of the viewing account, None for anonymous requests
        subject_id: id of the account owning the field
        setting: the subject's FieldVisibility for that field
        friendship_status: status of the friendship between the two, or None

    Returns:
        bool
    """
    setting = FieldVisibility(setting)

    # A subject always sees their own data
    if viewer_id is not None and viewer_id == subject_id:
        return True

    if setting == FieldVisibility.PUBLIC:
        return True

    if viewer_id is None:
        return False

    if setting == FieldVisibility.FRIENDS:
        return is_friend(friendship_status)

    return False


def field_setting(profile, field):
    """Return the profile's stored visibility setting for `field`."""
    field = ProfileField(field)
    if field == ProfileField.PROFILE:
        return profile.profile_visibility
    if field == ProfileField.PHONE:
        return profile.phone_visibility
    return profile.email_visibility


def can_view_profile_field(viewer_id, profile, field, friendship_status=None):
    return can_view_field(
        viewer_id, profile.user_id, field_setting(profile, field), friendship_status
    )


# =============================================================================
# Content visibility (messages, calendar events, mailing lists)
# =============================================================================

def has_role(viewer_role, *roles):
    if viewer_role is None:
        return False
    return Role(viewer_role) in roles


def can_view_content(viewer_id, creator_id, visibility, viewer_role, friendship_status=None):
    """
    Decide whether a viewer may see a content item.

    The creator always sees their own item. `friends` items require an
    accepted friendship with the creator.
    """
    visibility = ContentVisibility(visibility)

    if viewer_id is not None and viewer_id == creator_id:
        return True

    if visibility == ContentVisibility.PUBLIC:
        return True

    if viewer_id is None:
        return False

    if visibility == ContentVisibility.FRIENDS:
        return is_friend(friendship_status)

    if visibility == ContentVisibility.LEADERS:
        return has_role(viewer_role, Role.LEADER, Role.ADMIN)

    return has_role(viewer_role, Role.ADMIN)


# =============================================================================
# Role gate (creation-time visibility choices)
# =============================================================================

def can_select_visibility(role, visibility):
    visibility = ContentVisibility(visibility)
    if visibility == ContentVisibility.LEADERS:
        return has_role(role, Role.LEADER, Role.ADMIN)
    if visibility == ContentVisibility.ADMIN:
        return has_role(role, Role.ADMIN)
    return True


def allowed_content_visibilities(role):
    """Visibility tiers an account with `role` may pick when creating content."""
    return [v for v in ContentVisibility if can_select_visibility(role, v)]


def require_visibility(role, visibility):
    if not can_select_visibility(role, visibility):
        raise Unauthorized(
            f"Your role cannot create content visible to '{ContentVisibility(visibility).value}'."
        )


def can_broadcast_to_list(actor_id, actor_role, mailing_list):
    """List owners, leaders and admins may send to a mailing list."""
    if actor_id is not None and actor_id == mailing_list.created_by_id:
        return True
    return has_role(actor_role, Role.LEADER, Role.ADMIN)


# =============================================================================
# Friendship state machine
#
#   absent  --send (requester)-->       pending
#   pending --accept (addressee)-->     accepted
#   pending --decline (addressee)-->    declined
#   pending --delete (either party)-->  absent
#   accepted --delete (either party)--> absent
#   declined is terminal
# =============================================================================

def check_send_request(requester_id, addressee_id, existing):
    """
    Validate absent -> pending.

    Args:
        existing: any friendship between the pair in either direction, or None
    """
    if requester_id == addressee_id:
        raise Unauthorized("You cannot send a friend request to yourself.")
    if existing is not None:
        raise DuplicateRelationship()
    return FriendshipStatus.PENDING


def check_respond(friendship, actor_id, new_status):
    """
    Validate pending -> accepted/declined. State is checked before authority.
    """
    if friendship is None:
        raise NotFound("Friend request not found.")

    new_status = FriendshipStatus(new_status)
    if new_status == FriendshipStatus.PENDING:
        raise InvalidState("A friend request can only be accepted or declined.")

    if FriendshipStatus(friendship.status) != FriendshipStatus.PENDING:
        raise InvalidState("This friend request has already been answered.")

    if actor_id != friendship.addressee_id:
        raise Unauthorized("Only the recipient can answer a friend request.")

    return new_status


def check_delete(friendship, actor_id):
    """Validate pending/accepted -> absent."""
    if friendship is None:
        raise NotFound("Friendship not found.")

    if actor_id not in (friendship.requester_id, friendship.addressee_id):
        raise Unauthorized("Only members of a friendship can remove it.")

    if FriendshipStatus(friendship.status) == FriendshipStatus.DECLINED:
        raise InvalidState("A declined friend request cannot be removed.")

"""
Viewer-scoped visibility filtering.

A ViewerContext is built once per request from the viewer's profile and
friendships, then passed explicitly to whatever needs to filter rows.
"""
from dataclasses import dataclass, field

from ..choices import ProfileField
from ..models import Friendship
from .. import policy


@dataclass(frozen=True)
class ViewerContext:
    viewer_id: int | None
    role: str | None
    friendship_statuses: dict = field(default_factory=dict)

    @classmethod
    def anonymous(cls):
        return cls(viewer_id=None, role=None)

    @classmethod
    def for_user(cls, user):
        """Snapshot the viewer's role and every friendship they are part of."""
        if user is None or not getattr(user, 'is_authenticated', False):
            return cls.anonymous()

        statuses = {}
        rows = Friendship.for_user(user).values_list('requester_id', 'addressee_id', 'status')
        for requester_id, addressee_id, status in rows:
            other_id = addressee_id if requester_id == user.id else requester_id
            statuses[other_id] = status

        profile = getattr(user, 'profile', None)
        return cls(
            viewer_id=user.id,
            role=profile.role if profile else None,
            friendship_statuses=statuses,
        )

    def friendship_status(self, other_id):
        return self.friendship_statuses.get(other_id)

    def is_friend(self, other_id):
        return policy.is_friend(self.friendship_status(other_id))

    # -- profile fields -------------------------------------------------------

    def can_view_field(self, profile, field_name):
        return policy.can_view_profile_field(
            self.viewer_id, profile, field_name, self.friendship_status(profile.user_id)
        )

    def can_view_profile(self, profile):
        return self.can_view_field(profile, ProfileField.PROFILE)

    # -- content --------------------------------------------------------------

    def can_view(self, item):
        """`item` is any model exposing created_by_id and visibility."""
        return policy.can_view_content(
            self.viewer_id,
            item.created_by_id,
            item.visibility,
            self.role,
            self.friendship_status(item.created_by_id),
        )

    def filter_visible(self, items):
        return [item for item in items if self.can_view(item)]

    def can_select_visibility(self, visibility):
        return policy.can_select_visibility(self.role, visibility)

    def require_visibility(self, visibility):
        policy.require_visibility(self.role, visibility)

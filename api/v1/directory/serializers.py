"""
Directory serializers for the Fellowship API.

Expect `viewer` (a ViewerContext) and `friendships` (member id -> Friendship)
in the serializer context.
"""
from rest_framework import serializers

from apps.accounts.choices import ProfileField
from apps.accounts.models import Profile
from apps.accounts.services import describe_friendship


class DirectoryMemberSerializer(serializers.ModelSerializer):
    """A member as seen by another member: hidden fields come back as null."""
    user_id = serializers.IntegerField(source='user.id', read_only=True)
    first_name = serializers.CharField(source='user.first_name', read_only=True)
    last_name = serializers.CharField(source='user.last_name', read_only=True)
    display_name = serializers.CharField(read_only=True)
    email = serializers.SerializerMethodField()
    phone = serializers.SerializerMethodField()
    friendship_status = serializers.SerializerMethodField()
    friendship_id = serializers.SerializerMethodField()

    class Meta:
        model = Profile
        fields = [
            'user_id', 'first_name', 'last_name', 'display_name', 'bio', 'role',
            'email', 'phone', 'friendship_status', 'friendship_id'
        ]
        read_only_fields = fields

    def _friendship(self, obj):
        return self.context.get('friendships', {}).get(obj.user_id)

    def get_email(self, obj):
        if self.context['viewer'].can_view_field(obj, ProfileField.EMAIL):
            return obj.user.email
        return None

    def get_phone(self, obj):
        if self.context['viewer'].can_view_field(obj, ProfileField.PHONE):
            return obj.phone or None
        return None

    def get_friendship_status(self, obj):
        viewer = self.context['viewer']
        if obj.user_id == viewer.viewer_id:
            return 'self'
        return describe_friendship(self._friendship(obj), viewer.viewer_id)

    def get_friendship_id(self, obj):
        friendship = self._friendship(obj)
        return friendship.id if friendship else None

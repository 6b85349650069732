"""
Friends serializers for the Fellowship API.
"""
from rest_framework import serializers

from apps.accounts.choices import ProfileField
from apps.accounts.models import Friendship
from api.serializers import MemberSummarySerializer


class FriendSerializer(serializers.Serializer):
    """
    Friend list item, built from a (friend, friendship) pair.

    Email and phone follow the friend's privacy settings for the viewer.
    """
    user_id = serializers.IntegerField(source='friend.id')
    first_name = serializers.CharField(source='friend.first_name')
    last_name = serializers.CharField(source='friend.last_name')
    display_name = serializers.CharField(source='friend.profile.display_name')
    email = serializers.SerializerMethodField()
    phone = serializers.SerializerMethodField()
    friendship_id = serializers.IntegerField(source='friendship.id')
    friendship_date = serializers.DateTimeField(source='friendship.updated_at')

    def get_email(self, obj):
        profile = obj['friend'].profile
        if self.context['viewer'].can_view_field(profile, ProfileField.EMAIL):
            return obj['friend'].email
        return None

    def get_phone(self, obj):
        profile = obj['friend'].profile
        if self.context['viewer'].can_view_field(profile, ProfileField.PHONE):
            return profile.phone or None
        return None


class FriendRequestSerializer(serializers.ModelSerializer):
    """Serializer for friend requests."""
    requester = MemberSummarySerializer(read_only=True)
    addressee = MemberSummarySerializer(read_only=True)

    class Meta:
        model = Friendship
        fields = ['id', 'requester', 'addressee', 'status', 'created_at', 'updated_at']
        read_only_fields = fields


class FriendRequestCreateSerializer(serializers.Serializer):
    """Serializer for creating friend requests."""
    addressee_id = serializers.IntegerField(min_value=1)


class FriendRequestResponseSerializer(serializers.Serializer):
    """Serializer for responding to friend requests."""
    accept = serializers.BooleanField(required=True)

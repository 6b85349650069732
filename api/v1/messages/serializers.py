"""
Message serializers for the Fellowship API.
"""
from rest_framework import serializers

from apps.accounts.choices import ContentVisibility
from apps.messaging.models import Message
from api.serializers import MemberSummarySerializer


class MessageSerializer(serializers.ModelSerializer):
    """Serializer for feed messages."""
    created_by = MemberSummarySerializer(read_only=True)
    message_type_display = serializers.CharField(source='get_message_type_display', read_only=True)
    visibility_display = serializers.CharField(source='get_visibility_display', read_only=True)
    can_delete = serializers.SerializerMethodField()

    class Meta:
        model = Message
        fields = [
            'id', 'title', 'content', 'message_type', 'message_type_display',
            'visibility', 'visibility_display', 'created_by', 'can_delete',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_can_delete(self, obj):
        viewer = self.context.get('viewer')
        return viewer is not None and obj.created_by_id == viewer.viewer_id


class MessageCreateSerializer(serializers.ModelSerializer):
    """Serializer for posting a message. The role gate is applied by the view."""

    class Meta:
        model = Message
        fields = ['title', 'content', 'message_type', 'visibility']
        extra_kwargs = {
            'visibility': {'default': ContentVisibility.PUBLIC},
        }

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError('Title cannot be blank.')
        return value.strip()


class VisibilityOptionSerializer(serializers.Serializer):
    value = serializers.CharField()
    label = serializers.CharField()

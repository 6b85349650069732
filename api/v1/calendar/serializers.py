"""
Calendar serializers for the Fellowship API.
"""
from rest_framework import serializers

from apps.accounts.choices import ContentVisibility
from apps.events.models import CalendarEvent
from api.serializers import MemberSummarySerializer


class CalendarEventSerializer(serializers.ModelSerializer):
    """Serializer for calendar events."""
    created_by = MemberSummarySerializer(read_only=True)
    visibility_display = serializers.CharField(source='get_visibility_display', read_only=True)
    is_multi_day = serializers.BooleanField(read_only=True)
    can_delete = serializers.SerializerMethodField()

    class Meta:
        model = CalendarEvent
        fields = [
            'id', 'title', 'description', 'start_date', 'end_date', 'location',
            'visibility', 'visibility_display', 'is_multi_day',
            'created_by', 'can_delete', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_can_delete(self, obj):
        viewer = self.context.get('viewer')
        return viewer is not None and obj.created_by_id == viewer.viewer_id


class CalendarEventCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating events. The role gate is applied by the view."""
    end_date = serializers.DateTimeField(required=False, allow_null=True)

    class Meta:
        model = CalendarEvent
        fields = ['title', 'description', 'start_date', 'end_date', 'location', 'visibility']
        extra_kwargs = {
            'visibility': {'default': ContentVisibility.PUBLIC},
        }

    def validate(self, attrs):
        start = attrs['start_date']
        end = attrs.get('end_date') or start
        if end < start:
            raise serializers.ValidationError({
                'end_date': 'End date cannot be before the start date.'
            })
        attrs['end_date'] = end
        return attrs

"""
Mailing list serializers for the Fellowship API.

List serializers read `member_counts` (list id -> count) and `member_of`
(set of list ids the viewer belongs to) from the context.
"""
from rest_framework import serializers

from apps.accounts import policy
from apps.accounts.choices import ContentVisibility
from apps.mailing_lists.models import MailingList, MailingListMembership
from apps.messaging.models import Message
from api.serializers import MemberSummarySerializer


class MailingListSerializer(serializers.ModelSerializer):
    created_by = MemberSummarySerializer(read_only=True)
    privacy_level_display = serializers.CharField(source='get_privacy_level_display', read_only=True)
    member_count = serializers.SerializerMethodField()
    is_member = serializers.SerializerMethodField()
    can_send = serializers.SerializerMethodField()

    class Meta:
        model = MailingList
        fields = [
            'id', 'name', 'description', 'privacy_level', 'privacy_level_display',
            'created_by', 'member_count', 'is_member', 'can_send', 'created_at'
        ]
        read_only_fields = fields

    def get_member_count(self, obj):
        return self.context.get('member_counts', {}).get(obj.id, 0)

    def get_is_member(self, obj):
        return obj.id in self.context.get('member_of', set())

    def get_can_send(self, obj):
        viewer = self.context['viewer']
        return policy.can_broadcast_to_list(viewer.viewer_id, viewer.role, obj)


class MailingListCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    privacy_level = serializers.ChoiceField(
        choices=ContentVisibility.choices,
        default=ContentVisibility.PUBLIC
    )

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('Name cannot be blank.')
        return value.strip()


class MailingListMemberSerializer(serializers.ModelSerializer):
    member = MemberSummarySerializer(source='user', read_only=True)

    class Meta:
        model = MailingListMembership
        fields = ['member', 'joined_at']
        read_only_fields = fields


class MailingListSendSerializer(serializers.Serializer):
    """Expects the target `mailing_list` in the context."""
    subject = serializers.CharField(max_length=180)
    content = serializers.CharField()

    def validate_subject(self, value):
        # The feed title is "[<list name>] <subject>"
        title_length = Message._meta.get_field('title').max_length
        room = title_length - len(self.context['mailing_list'].name) - 3
        if len(value) > room:
            raise serializers.ValidationError(
                f'Subject must be at most {max(room, 0)} characters for this list.'
            )
        return value

"""
Serializers shared across API areas.
"""
from django.contrib.auth.models import User
from rest_framework import serializers


class MemberSummarySerializer(serializers.ModelSerializer):
    """Name-only view of a member, safe to show next to anything they created."""
    user_id = serializers.IntegerField(source='id', read_only=True)
    display_name = serializers.CharField(source='profile.display_name', read_only=True)

    class Meta:
        model = User
        fields = ['user_id', 'first_name', 'last_name', 'display_name']
        read_only_fields = fields

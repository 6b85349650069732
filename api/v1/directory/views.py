"""
Member directory views for the Fellowship API.
"""
from rest_framework import generics
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.choices import ProfileField
from apps.accounts.exceptions import NotFound
from apps.accounts.models import Friendship, Profile
from api.mixins import ViewerContextMixin

from .serializers import DirectoryMemberSerializer


def friendships_by_member(user):
    """Map the other member's id to the friendship row shared with `user`."""
    return {f.other_party(user).id: f for f in Friendship.for_user(user).select_related('requester', 'addressee')}


def matches_search(viewer, profile, query):
    """Names are always searchable; email only when the viewer may see it."""
    if query in profile.full_name.lower():
        return True
    if viewer.can_view_field(profile, ProfileField.EMAIL):
        return query in profile.user.email.lower()
    return False


class DirectoryListView(ViewerContextMixin, generics.GenericAPIView):
    """
    List the other members whose profile is visible to the current member.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = DirectoryMemberSerializer

    def get_queryset(self):
        return Profile.objects.filter(
            user__is_active=True
        ).exclude(
            user=self.request.user
        ).select_related('user').order_by('user__first_name', 'user__last_name')

    @extend_schema(
        summary="List directory members",
        parameters=[
            OpenApiParameter(name='q', description='Search by name or visible email', required=False),
        ]
    )
    def get(self, request):
        viewer = self.viewer
        members = [p for p in self.get_queryset() if viewer.can_view_profile(p)]

        query = request.query_params.get('q', '').strip().lower()
        if query:
            members = [p for p in members if matches_search(viewer, p, query)]

        return self.paginate_list(
            members,
            DirectoryMemberSerializer,
            context_extra={'friendships': friendships_by_member(request.user)},
        )


class DirectoryMemberView(ViewerContextMixin, generics.GenericAPIView):
    """
    Get one member's directory card.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = DirectoryMemberSerializer

    @extend_schema(summary="Get a directory member")
    def get(self, request, user_id):
        profile = Profile.objects.select_related('user').filter(
            user_id=user_id, user__is_active=True
        ).first()

        # Hidden profiles are indistinguishable from missing ones
        if profile is None or not self.viewer.can_view_profile(profile):
            raise NotFound("Member not found.")

        serializer = DirectoryMemberSerializer(profile, context={
            'request': request,
            'viewer': self.viewer,
            'friendships': friendships_by_member(request.user),
        })
        return Response(serializer.data)

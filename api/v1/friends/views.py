"""
Friends views for the Fellowship API.

Rule checks and writes go through apps.accounts.services; relationship
errors surface as CommunityError subclasses and are mapped to HTTP status
codes by the API exception handler.
"""
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.models import Friendship
from apps.accounts.choices import FriendshipStatus
from apps.accounts.services import (
    send_friend_request,
    respond_to_friend_request,
    remove_friendship,
    get_friend_users,
)
from api.mixins import ViewerContextMixin

from .serializers import (
    FriendSerializer, FriendRequestSerializer,
    FriendRequestCreateSerializer, FriendRequestResponseSerializer,
)


class FriendsListView(ViewerContextMixin, generics.GenericAPIView):
    """
    List all friends of the current member.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = FriendSerializer

    @extend_schema(
        summary="List friends",
        parameters=[
            OpenApiParameter(name='q', description='Filter by name', required=False),
        ]
    )
    def get(self, request):
        friends = [
            {'friend': friend, 'friendship': friendship}
            for friend, friendship in get_friend_users(request.user)
        ]

        query = request.query_params.get('q', '').strip().lower()
        if query:
            friends = [f for f in friends if query in f['friend'].profile.full_name.lower()]

        friends.sort(key=lambda f: f['friend'].profile.display_name.lower())
        return self.paginate_list(friends, FriendSerializer)


class RemoveFriendshipView(generics.GenericAPIView):
    """
    Remove a friend or cancel a pending request.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Remove friendship",
        description="Either member may remove an accepted friendship or withdraw a pending request."
    )
    def delete(self, request, pk):
        remove_friendship(request.user, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class FriendRequestsReceivedView(generics.ListAPIView):
    """
    List pending friend requests received.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = FriendRequestSerializer

    @extend_schema(summary="List received friend requests")
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return Friendship.objects.filter(
            addressee=self.request.user,
            status=FriendshipStatus.PENDING
        ).select_related('requester__profile', 'addressee__profile')


class FriendRequestsSentView(generics.ListAPIView):
    """
    List pending friend requests sent.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = FriendRequestSerializer

    @extend_schema(summary="List sent friend requests")
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return Friendship.objects.filter(
            requester=self.request.user,
            status=FriendshipStatus.PENDING
        ).select_related('requester__profile', 'addressee__profile')


class SendFriendRequestView(generics.GenericAPIView):
    """
    Send a friend request.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = FriendRequestCreateSerializer

    @extend_schema(
        summary="Send friend request",
        request=FriendRequestCreateSerializer,
        responses={201: FriendRequestSerializer}
    )
    def post(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        friendship = send_friend_request(request.user, serializer.validated_data['addressee_id'])

        return Response(
            FriendRequestSerializer(friendship).data,
            status=status.HTTP_201_CREATED
        )


class RespondToFriendRequestView(generics.GenericAPIView):
    """
    Accept or decline a friend request.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = FriendRequestResponseSerializer

    @extend_schema(
        summary="Respond to friend request",
        request=FriendRequestResponseSerializer,
        responses={200: FriendRequestSerializer}
    )
    def post(self, request, pk):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        friendship = respond_to_friend_request(
            request.user, pk, accept=serializer.validated_data['accept']
        )
        return Response(FriendRequestSerializer(friendship).data)

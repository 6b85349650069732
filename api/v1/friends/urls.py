"""
Friends URL patterns for the Fellowship API.
"""
from django.urls import path

from .views import (
    FriendsListView, RemoveFriendshipView,
    FriendRequestsReceivedView, FriendRequestsSentView,
    SendFriendRequestView, RespondToFriendRequestView,
)

urlpatterns = [
    # Friends
    path('', FriendsListView.as_view(), name='friends_list'),
    path('<int:pk>/', RemoveFriendshipView.as_view(), name='remove_friendship'),

    # Friend requests
    path('requests/received/', FriendRequestsReceivedView.as_view(), name='requests_received'),
    path('requests/sent/', FriendRequestsSentView.as_view(), name='requests_sent'),
    path('requests/send/', SendFriendRequestView.as_view(), name='send_request'),
    path('requests/<int:pk>/respond/', RespondToFriendRequestView.as_view(), name='respond_request'),
]

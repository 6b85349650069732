from .friends import (
    send_friend_request,
    respond_to_friend_request,
    accept_friend_request,
    decline_friend_request,
    remove_friendship,
    get_pending_friend_requests,
    get_friend_users,
    get_friendship_status,
    describe_friendship,
)
from .visibility import ViewerContext

__all__ = [
    'send_friend_request',
    'respond_to_friend_request',
    'accept_friend_request',
    'decline_friend_request',
    'remove_friendship',
    'get_pending_friend_requests',
    'get_friend_users',
    'get_friendship_status',
    'describe_friendship',
    'ViewerContext',
]

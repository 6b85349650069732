"""
Custom permissions for the Fellowship API.
"""
from rest_framework import permissions


class IsCreator(permissions.BasePermission):
    """
    Only the member who created an object may change or delete it.
    Read access is decided by the visibility policy, not here.
    """
    message = 'Only the creator can change this.'

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.created_by_id == request.user.id

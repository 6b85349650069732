"""
Directory URL patterns for the Fellowship API.
"""
from django.urls import path

from .views import DirectoryListView, DirectoryMemberView

urlpatterns = [
    path('members/', DirectoryListView.as_view(), name='directory_list'),
    path('members/<int:user_id>/', DirectoryMemberView.as_view(), name='directory_member'),
]

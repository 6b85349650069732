"""
Mailing list URL patterns for the Fellowship API.
"""
from django.urls import path

from .views import (
    MailingListListCreateView, MailingListDetailView, MailingListMembersView,
    JoinMailingListView, LeaveMailingListView, SendMailingListMessageView,
)

urlpatterns = [
    path('', MailingListListCreateView.as_view(), name='mailing_list_list'),
    path('<int:pk>/', MailingListDetailView.as_view(), name='mailing_list_detail'),
    path('<int:pk>/members/', MailingListMembersView.as_view(), name='mailing_list_members'),
    path('<int:pk>/join/', JoinMailingListView.as_view(), name='mailing_list_join'),
    path('<int:pk>/leave/', LeaveMailingListView.as_view(), name='mailing_list_leave'),
    path('<int:pk>/send/', SendMailingListMessageView.as_view(), name='mailing_list_send'),
]

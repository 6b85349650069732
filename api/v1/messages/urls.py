"""
Message URL patterns for the Fellowship API.
"""
from django.urls import path

from .views import MessageListCreateView, MessageDetailView, VisibilityOptionsView

urlpatterns = [
    path('', MessageListCreateView.as_view(), name='message_list'),
    path('visibility-options/', VisibilityOptionsView.as_view(), name='visibility_options'),
    path('<int:pk>/', MessageDetailView.as_view(), name='message_detail'),
]

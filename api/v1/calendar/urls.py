"""
Calendar URL patterns for the Fellowship API.
"""
from django.urls import path

from .views import CalendarEventListCreateView, CalendarEventDetailView

urlpatterns = [
    path('events/', CalendarEventListCreateView.as_view(), name='event_list'),
    path('events/<int:pk>/', CalendarEventDetailView.as_view(), name='event_detail'),
]

"""
API v1 URL configuration.
"""
from django.urls import path, include

app_name = 'v1'

urlpatterns = [
    path('auth/', include('api.v1.auth.urls')),
    path('directory/', include('api.v1.directory.urls')),
    path('friends/', include('api.v1.friends.urls')),
    path('messages/', include('api.v1.messages.urls')),
    path('calendar/', include('api.v1.calendar.urls')),
    path('mailing-lists/', include('api.v1.mailing_lists.urls')),
]

"""
Fellowship API routes: versioned endpoints under v1/ plus the OpenAPI
schema and its Swagger and Redoc renderings.
"""
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

app_name = 'api'

urlpatterns = [
    path('v1/', include('api.v1.urls', namespace='v1')),

    # Schema and docs, readable without logging in (SPECTACULAR_SETTINGS)
    path('schema/', SpectacularAPIView.as_view(), name='schema'),
    path('docs/', SpectacularSwaggerView.as_view(url_name='api:schema'), name='schema-swagger'),
    path('redoc/', SpectacularRedocView.as_view(url_name='api:schema'), name='schema-redoc'),
]

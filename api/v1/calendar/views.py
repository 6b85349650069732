"""
Calendar views for the Fellowship API.
"""
import logging
from datetime import MAXYEAR, MINYEAR

from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.exceptions import NotFound
from apps.events.models import CalendarEvent
from api.mixins import ViewerContextMixin
from api.permissions import IsCreator

from .serializers import CalendarEventSerializer, CalendarEventCreateSerializer

logger = logging.getLogger(__name__)


# One year of margin on each side keeps month bounds convertible to UTC
MIN_YEAR = MINYEAR + 1
MAX_YEAR = MAXYEAR - 1


def parse_month(params):
    """Return (year, month) from query params, or None when neither is given."""
    year, month = params.get('year'), params.get('month')
    if year is None and month is None:
        return None
    try:
        year, month = int(year), int(month)
    except (TypeError, ValueError):
        raise ValidationError({'month': 'Both year and month must be given as numbers.'})
    if not 1 <= month <= 12 or not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError({'month': f'Month must be 1-12 and year {MIN_YEAR}-{MAX_YEAR}.'})
    return year, month


class CalendarEventListCreateView(ViewerContextMixin, generics.ListCreateAPIView):
    """
    List visible events, optionally for one month, or create an event.
    """
    permission_classes = [IsAuthenticated]

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return CalendarEventCreateSerializer
        return CalendarEventSerializer

    def get_queryset(self):
        queryset = CalendarEvent.objects.select_related('created_by__profile')
        month = parse_month(self.request.query_params)
        if month:
            queryset = queryset.in_month(*month)
        return queryset

    @extend_schema(
        summary="List calendar events",
        parameters=[
            OpenApiParameter(name='year', type=int, required=False),
            OpenApiParameter(name='month', type=int, description='1-12, requires year', required=False),
        ],
        responses={200: CalendarEventSerializer(many=True)}
    )
    def get(self, request, *args, **kwargs):
        return self.paginate_list(self.viewer.filter_visible(self.get_queryset()), CalendarEventSerializer)

    @extend_schema(
        summary="Create calendar event",
        request=CalendarEventCreateSerializer,
        responses={201: CalendarEventSerializer}
    )
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        self.viewer.require_visibility(serializer.validated_data['visibility'])
        event = serializer.save(created_by=request.user)

        logger.info(f"Calendar event {event.id} created by {request.user.email} ({event.visibility})")
        return Response(
            CalendarEventSerializer(event, context=self.get_serializer_context()).data,
            status=status.HTTP_201_CREATED
        )


class CalendarEventDetailView(ViewerContextMixin, generics.RetrieveDestroyAPIView):
    """
    Get or delete a single event.
    """
    permission_classes = [IsAuthenticated, IsCreator]
    serializer_class = CalendarEventSerializer

    def get_object(self):
        event = CalendarEvent.objects.select_related('created_by__profile').filter(
            pk=self.kwargs['pk']
        ).first()

        if event is None or not self.viewer.can_view(event):
            raise NotFound("Event not found.")

        self.check_object_permissions(self.request, event)
        return event

    @extend_schema(summary="Get calendar event")
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    @extend_schema(summary="Delete calendar event", description="Only the creator can delete an event.")
    def delete(self, request, *args, **kwargs):
        return super().delete(request, *args, **kwargs)

    def perform_destroy(self, instance):
        logger.info(f"Calendar event {instance.id} deleted by {self.request.user.email}")
        instance.delete()

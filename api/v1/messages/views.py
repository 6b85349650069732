"""
Message feed views for the Fellowship API.
"""
import logging

from django.db.models import Q
from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.choices import MessageType
from apps.accounts.exceptions import NotFound
from apps.accounts import policy
from apps.messaging.models import Message
from api.mixins import ViewerContextMixin
from api.permissions import IsCreator

from .serializers import MessageSerializer, MessageCreateSerializer, VisibilityOptionSerializer

logger = logging.getLogger(__name__)


class MessageListCreateView(ViewerContextMixin, generics.ListCreateAPIView):
    """
    List the messages visible to the current member, or post a new one.
    """
    permission_classes = [IsAuthenticated]

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return MessageCreateSerializer
        return MessageSerializer

    def get_queryset(self):
        queryset = Message.objects.select_related('created_by__profile')

        message_type = self.request.query_params.get('type')
        if message_type:
            if message_type not in MessageType.values:
                raise ValidationError({'type': f"Unknown message type '{message_type}'."})
            queryset = queryset.filter(message_type=message_type)

        query = self.request.query_params.get('q', '').strip()
        if query:
            queryset = queryset.filter(Q(title__icontains=query) | Q(content__icontains=query))

        return queryset

    @extend_schema(
        summary="List messages",
        parameters=[
            OpenApiParameter(name='type', description='announcement, prayer_request or general', required=False),
            OpenApiParameter(name='q', description='Search title and content', required=False),
        ],
        responses={200: MessageSerializer(many=True)}
    )
    def get(self, request, *args, **kwargs):
        return self.paginate_list(self.viewer.filter_visible(self.get_queryset()), MessageSerializer)

    @extend_schema(
        summary="Post message",
        request=MessageCreateSerializer,
        responses={201: MessageSerializer}
    )
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        self.viewer.require_visibility(serializer.validated_data['visibility'])
        message = serializer.save(created_by=request.user)

        logger.info(
            f"Message {message.id} posted by {request.user.email} "
            f"({message.message_type}, {message.visibility})"
        )
        return Response(
            MessageSerializer(message, context=self.get_serializer_context()).data,
            status=status.HTTP_201_CREATED
        )


class MessageDetailView(ViewerContextMixin, generics.RetrieveDestroyAPIView):
    """
    Get or delete a single message.
    """
    permission_classes = [IsAuthenticated, IsCreator]
    serializer_class = MessageSerializer

    def get_object(self):
        message = Message.objects.select_related('created_by__profile').filter(
            pk=self.kwargs['pk']
        ).first()

        # Hidden messages are reported the same as missing ones
        if message is None or not self.viewer.can_view(message):
            raise NotFound("Message not found.")

        self.check_object_permissions(self.request, message)
        return message

    @extend_schema(summary="Get message")
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    @extend_schema(summary="Delete message", description="Only the creator can delete a message.")
    def delete(self, request, *args, **kwargs):
        return super().delete(request, *args, **kwargs)

    def perform_destroy(self, instance):
        logger.info(f"Message {instance.id} deleted by {self.request.user.email}")
        instance.delete()


class VisibilityOptionsView(ViewerContextMixin, generics.GenericAPIView):
    """
    Visibility levels the current member's role may choose when posting.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = VisibilityOptionSerializer

    @extend_schema(summary="List visibility options", responses={200: VisibilityOptionSerializer(many=True)})
    def get(self, request):
        options = [
            {'value': v.value, 'label': v.label}
            for v in policy.allowed_content_visibilities(self.viewer.role)
        ]
        return Response(VisibilityOptionSerializer(options, many=True).data)

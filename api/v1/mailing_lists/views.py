"""
Mailing list views for the Fellowship API.
"""
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.exceptions import NotFound
from apps.mailing_lists.models import MailingList
from apps.mailing_lists import services
from api.mixins import ViewerContextMixin
from api.v1.messages.serializers import MessageSerializer

from .serializers import (
    MailingListSerializer, MailingListCreateSerializer,
    MailingListMemberSerializer, MailingListSendSerializer,
)


class VisibleListMixin(ViewerContextMixin):
    """Look up the list in the URL, hiding lists the viewer cannot see."""

    def get_mailing_list(self):
        mailing_list = MailingList.objects.select_related('created_by__profile').filter(
            pk=self.kwargs['pk']
        ).first()
        if mailing_list is None or not self.viewer.can_view(mailing_list):
            raise NotFound("Mailing list not found.")
        return mailing_list

    def list_context(self, lists):
        return {
            'member_counts': services.get_member_counts([m.id for m in lists]),
            'member_of': services.get_membership_ids(self.request.user),
        }

    def list_response(self, mailing_list, **kwargs):
        context = self.get_serializer_context()
        context.update(self.list_context([mailing_list]))
        return Response(MailingListSerializer(mailing_list, context=context).data, **kwargs)


class MailingListListCreateView(VisibleListMixin, generics.GenericAPIView):
    """
    List visible mailing lists, or create one.
    """
    permission_classes = [IsAuthenticated]

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return MailingListCreateSerializer
        return MailingListSerializer

    @extend_schema(
        summary="List mailing lists",
        parameters=[
            OpenApiParameter(name='q', description='Search name and description', required=False),
        ],
        responses={200: MailingListSerializer(many=True)}
    )
    def get(self, request):
        lists = self.viewer.filter_visible(
            MailingList.objects.select_related('created_by__profile')
        )

        query = request.query_params.get('q', '').strip().lower()
        if query:
            lists = [m for m in lists if query in m.name.lower() or query in m.description.lower()]

        return self.paginate_list(lists, MailingListSerializer, context_extra=self.list_context(lists))

    @extend_schema(
        summary="Create mailing list",
        request=MailingListCreateSerializer,
        responses={201: MailingListSerializer}
    )
    def post(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        mailing_list = services.create_mailing_list(request.user, self.viewer, **serializer.validated_data)
        return self.list_response(mailing_list, status=status.HTTP_201_CREATED)


class MailingListDetailView(VisibleListMixin, generics.GenericAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = MailingListSerializer

    @extend_schema(summary="Get mailing list")
    def get(self, request, pk):
        return self.list_response(self.get_mailing_list())


class MailingListMembersView(VisibleListMixin, generics.GenericAPIView):
    """
    Members of a visible mailing list.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = MailingListMemberSerializer

    @extend_schema(summary="List mailing list members")
    def get(self, request, pk):
        mailing_list = self.get_mailing_list()
        # Members who keep their profile hidden are left out of the roster
        memberships = [
            m for m in mailing_list.memberships.select_related('user__profile')
            if self.viewer.can_view_profile(m.user.profile)
        ]
        return self.paginate_list(memberships, MailingListMemberSerializer)


class JoinMailingListView(VisibleListMixin, generics.GenericAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = MailingListSerializer

    @extend_schema(summary="Join mailing list", request=None)
    def post(self, request, pk):
        mailing_list = self.get_mailing_list()
        services.join_list(request.user, self.viewer, mailing_list)
        return self.list_response(mailing_list)


class LeaveMailingListView(VisibleListMixin, generics.GenericAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = MailingListSerializer

    @extend_schema(summary="Leave mailing list", request=None)
    def post(self, request, pk):
        mailing_list = self.get_mailing_list()
        services.leave_list(request.user, mailing_list)
        return self.list_response(mailing_list)


class SendMailingListMessageView(VisibleListMixin, generics.GenericAPIView):
    """
    Send an announcement to every member of a list.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = MailingListSendSerializer

    @extend_schema(
        summary="Send to mailing list",
        description="Available to the list owner, leaders and admins.",
        request=MailingListSendSerializer,
        responses={201: MessageSerializer}
    )
    def post(self, request, pk):
        mailing_list = self.get_mailing_list()

        context = self.get_serializer_context()
        context['mailing_list'] = mailing_list
        serializer = MailingListSendSerializer(data=request.data, context=context)
        serializer.is_valid(raise_exception=True)

        message = services.send_list_message(
            request.user, self.viewer, mailing_list, **serializer.validated_data
        )
        return Response(
            MessageSerializer(message, context=self.get_serializer_context()).data,
            status=status.HTTP_201_CREATED
        )

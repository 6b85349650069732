"""
View mixins shared by the API endpoints.
"""
from django.utils.functional import cached_property
from rest_framework.response import Response

from apps.accounts.services import ViewerContext


class ViewerContextMixin:
    """
    Expose `self.viewer`: the requesting member's role and friendships,
    loaded once per request.
    """

    @cached_property
    def viewer(self):
        return ViewerContext.for_user(self.request.user)

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['viewer'] = self.viewer
        return context

    def paginate_list(self, items, serializer_class, context_extra=None):
        """Paginate an already-filtered list the same way a queryset would be."""
        context = {'request': self.request, 'viewer': self.viewer}
        if context_extra:
            context.update(context_extra)

        page = self.paginate_queryset(items)
        if page is not None:
            serializer = serializer_class(page, many=True, context=context)
            return self.get_paginated_response(serializer.data)
        serializer = serializer_class(items, many=True, context=context)
        return Response(serializer.data)

"""
Exception handling for the Fellowship API.
"""
import logging

from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

from apps.accounts.exceptions import CommunityError

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Thin wrapper around DRF's default handler:
    - Maps policy/relationship errors to their HTTP status
    - Normalizes payload to {"message": "...", "error": ...}
    """
    if isinstance(exc, CommunityError):
        view = context.get('view')
        logger.info(
            f"{type(exc).__name__} in {type(view).__name__ if view else 'request'}: {exc.message}"
        )
        return Response(
            {'message': exc.message, 'error': type(exc).__name__},
            status=exc.status_code,
        )

    resp = drf_exception_handler(exc, context)
    if resp is None:
        # Not handled by DRF; let Django's 500 handling take over
        return None

    data = resp.data
    message = None
    if isinstance(data, dict):
        message = data.get('detail') or data.get('message')
    elif isinstance(data, list) and data:
        message = data[0]

    return Response(
        {'message': message or 'Request failed.', 'error': data},
        status=resp.status_code,
        headers=dict(resp.items()),
    )

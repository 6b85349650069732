"""
Errors raised by the visibility policy and the friendship services.

Views never catch these; api.exceptions.custom_exception_handler maps them
to HTTP responses.
"""


class CommunityError(Exception):
    """Base class for authorization and relationship rule violations."""
    status_code = 400
    default_message = 'Request could not be completed.'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(CommunityError):
    """Actor lacks permission for the attempted view or transition."""
    status_code = 403
    default_message = 'You do not have permission to do that.'


class InvalidState(CommunityError):
    """Transition attempted from a state that does not permit it."""
    status_code = 409
    default_message = 'This action is not allowed in the current state.'


class DuplicateRelationship(CommunityError):
    """A friendship already exists between the two accounts."""
    status_code = 409
    default_message = 'A friendship already exists between these members.'


class NotFound(CommunityError):
    status_code = 404
    default_message = 'Not found.'

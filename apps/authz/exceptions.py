"""
Error taxonomy of the authorization core.

All four errors are terminal for a request: the core never retries them and
the transport layer maps each to a fixed HTTP status.
"""


class AuthorizationError(Exception):
    """Base class for authorization failures."""

    code = 'AUTHORIZATION_ERROR'
    status_code = 403
    default_message = 'Not authorized'

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class Unauthenticated(AuthorizationError):
    """No identity could be resolved for the request."""

    code = 'UNAUTHENTICATED'
    status_code = 401
    default_message = 'Authentication required'


class Forbidden(AuthorizationError):
    """The role may not perform the operation on the resource kind."""

    code = 'FORBIDDEN'
    status_code = 403
    default_message = 'You do not have permission to perform this action'


class NotFound(AuthorizationError):
    """
    The row does not exist or lies outside the caller's tenant scope.

    Both cases share this error and its message so that a caller cannot tell
    whether a row of another tenant exists.
    """

    code = 'NOT_FOUND'
    status_code = 404
    default_message = 'Resource not found'


class InvalidArgument(AuthorizationError):
    """A malformed or disallowed owner, tenant or role field."""

    code = 'INVALID_ARGUMENT'
    status_code = 400
    default_message = 'Invalid argument'


class PolicyConfigurationError(Exception):
    """The static policy or scope tables are incomplete or inconsistent."""

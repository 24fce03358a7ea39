"""
Failures a request can end in. Each one knows its HTTP status; the
application factory turns them into ``{"error": ...}`` responses.
"""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(ServiceError):
    status_code = 400


class DuplicateError(ServiceError):
    status_code = 400


class MissingReferenceError(ServiceError):
    """A booking points at a user that does not exist."""
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 401


class AuthError(ServiceError):
    status_code = 401


class InternalError(ServiceError):
    status_code = 500

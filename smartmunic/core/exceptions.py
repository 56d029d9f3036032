"""
Domain errors raised by the service layer.

Each error carries the HTTP status and error code it is rendered with by
``smartmunic.api.utils.exceptions.register_exception_handlers``.
"""


class ServiceError(Exception):
    status_code: int = 500
    code: str = "internal_server_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """A referenced issue, technician, or other record does not exist."""

    status_code = 404
    code = "not_found"


class ValidationError(ServiceError):
    """Input is missing or malformed in a way the schemas cannot catch."""

    status_code = 400
    code = "bad_request"


class ConflictError(ServiceError):
    """The operation is not allowed in the record's current state."""

    status_code = 409
    code = "conflict"

"""Error taxonomy shared by the crud layer and the HTTP surface.

Every error carries a stable ``code`` that clients can branch on; the
message is human readable and never contains persistence error text.
"""
from typing import Any


class AppError(Exception):
    status_code = 500
    code = "INTERNAL"
    message = "Internal Server Error"

    def __init__(self, message: str | None = None, *, code: str | None = None, detail: Any = None):
        super().__init__(message or self.message)
        self.message = message or self.message
        if code:
            self.code = code
        self.detail = detail

    def to_dict(self) -> dict:
        body = {"error": self.code, "message": self.message}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class UnauthenticatedError(AppError):
    status_code = 401
    code = "UNAUTHENTICATED"
    message = "Not authenticated"


class ForbiddenError(AppError):
    status_code = 403
    code = "FORBIDDEN"
    message = "Project does not exist or is owned by another user"


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"
    message = "Not found"


class ValidationError(AppError):
    status_code = 400
    code = "VALIDATION_ERROR"
    message = "Invalid input"


class ConflictError(AppError):
    status_code = 409
    code = "CONFLICT"
    message = "Conflict"

"""Error taxonomy for redirect record operations."""


class RedirectError(Exception):
    """Base class for every failure a redirect operation can report.

    Each subclass carries a ``kind`` (used in structured responses) and the
    HTTP status code the web layer answers with.
    """

    kind = "internal"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


class BadRequestError(RedirectError):
    kind = "bad_request"
    status_code = 400


class UnauthorizedError(RedirectError):
    kind = "unauthorized"
    status_code = 401


class NotFoundError(RedirectError):
    kind = "not_found"
    status_code = 404


class ConflictError(RedirectError):
    kind = "conflict"
    status_code = 409


class InternalError(RedirectError):
    kind = "internal"
    status_code = 500


class StoreError(InternalError):
    """Raised when the key-value store cannot be reached or answers badly."""


class RecordDecodeError(InternalError):
    """Raised when a member of the redirect set cannot be decoded."""

from .base import InstanceMetadataError

__all__ = [
    "ResponseError",
    "NotFound",
    "UnknownError",
]


class ResponseError(InstanceMetadataError):
    """Base class for non-2xx responses from the metadata service."""

    status_code: int
    body: bytes

    def __init__(self, message: str, status_code: int, body: bytes = b"") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class NotFound(ResponseError):
    """Exception raised when the requested metadata path does not exist (404)."""

    def __init__(self, body: bytes = b"") -> None:
        super().__init__("Not found", 404, body)


class UnknownError(ResponseError):
    """Exception raised for any other non-2xx status.

    The message never includes the status code or body. Both are
    available as attributes.
    """

    def __init__(self, status_code: int, body: bytes = b"") -> None:
        super().__init__("Unknown error.", status_code, body)

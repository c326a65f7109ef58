__all__ = [
    "InstanceMetadataError",
    "InvalidURL",
    "UnsupportedBodyType",
    "DecodeError",
]


class InstanceMetadataError(Exception):
    """Base class for instance metadata exceptions."""


class InvalidURL(InstanceMetadataError, ValueError):
    """Raised when a base URL or relative path cannot be parsed."""


class UnsupportedBodyType(InstanceMetadataError, TypeError):
    """Raised when a request body is not one of the supported variants."""

    body_type: str

    def __init__(self, body_type: str) -> None:
        self.body_type = body_type
        super().__init__(f"not supported type: {body_type}")


class DecodeError(InstanceMetadataError, ValueError):
    """Raised when a response body can't be decoded into its destination."""

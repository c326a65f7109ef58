"""Exceptions raised by the instance metadata client.

Transport failures (DNS, connect, timeout) are not wrapped. They surface as
the `httpx.TransportError` subclass httpx raised.
"""

from .base import *
from .http import *

__all__ = [
    "InstanceMetadataError",
    "InvalidURL",
    "UnsupportedBodyType",
    "DecodeError",
    "ResponseError",
    "NotFound",
    "UnknownError",
]

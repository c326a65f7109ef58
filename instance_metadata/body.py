"""Request body variants.

A request either has no body (`None`), a raw body that is sent unchanged
(`RawBody`), or a JSON body serialized from a mapping (`JsonBody`).
"""

import io
import json
from collections.abc import Mapping
from typing import IO, Any, NamedTuple, Optional, Union

from .exceptions import UnsupportedBodyType

RawContent = Union[bytes, str, IO[bytes], IO[str]]


class RawBody(NamedTuple):
    """Bytes, text or a readable stream passed through as-is."""

    content: RawContent

    def encode(self) -> Union[bytes, IO[bytes]]:
        content = self.content
        if isinstance(content, str):
            return content.encode("utf-8")
        if isinstance(content, (bytes, bytearray)):
            return bytes(content)
        if isinstance(content, io.IOBase) and not isinstance(content, io.TextIOBase):
            # Binary streams are handed to httpx unread
            return content
        # Text streams and bare readers (only a read() method) are read in full
        data = content.read()
        if isinstance(data, str):
            return data.encode("utf-8")
        return bytes(data)


class JsonBody(NamedTuple):
    """Mapping serialized to compact JSON plus a newline, keys in insertion order."""

    value: Mapping[str, Any]

    def encode(self) -> bytes:
        try:
            return (json.dumps(self.value, separators=(",", ":")) + "\n").encode("utf-8")
        except (TypeError, ValueError) as e:
            raise UnsupportedBodyType(_type_name(self.value)) from e


RequestBody = Optional[Union[RawBody, JsonBody]]


def as_request_body(obj: Any) -> RequestBody:
    """Map a plain Python value onto one of the body variants.

    Raises `UnsupportedBodyType` for anything that isn't None, bytes, text,
    a readable stream or a mapping.

    Example:
        >>> as_request_body({"foo": "bar"})
        JsonBody(value={'foo': 'bar'})
    """
    if obj is None or isinstance(obj, (RawBody, JsonBody)):
        return obj
    if isinstance(obj, (bytes, bytearray, str)) or callable(getattr(obj, "read", None)):
        return RawBody(obj)
    if isinstance(obj, Mapping):
        return JsonBody(obj)
    raise UnsupportedBodyType(_type_name(obj))


def encode_body(body: RequestBody) -> Optional[Union[bytes, IO[bytes]]]:
    """Returns the content to send for a body variant (None for no body)."""
    if body is None:
        return None
    return body.encode()


def _type_name(obj: Any) -> str:
    return type(obj).__qualname__

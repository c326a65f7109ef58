"""Destinations a response body can be decoded into.

Each destination decodes a fully read `httpx.Response` and keeps the result
in `.value`. Destinations are only touched after a successful (2xx) status,
so on any error `.value` stays None.
"""

from typing import Any, Generic, Optional, Protocol, Type, TypeVar, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodeError

T = TypeVar("T")


class Writer(Protocol):
    def write(self, data: bytes) -> Any:
        ...


class IntoString:
    """Receives the response body as text, verbatim."""

    value: Optional[str]

    def __init__(self) -> None:
        self.value = None

    def decode(self, response: httpx.Response) -> str:
        self.value = response.text
        return self.value


class IntoWriter:
    """Copies the raw response bytes into a writable stream."""

    value: Optional[int]  # number of bytes written

    def __init__(self, writer: Writer) -> None:
        self.writer = writer
        self.value = None

    def decode(self, response: httpx.Response) -> int:
        written = 0
        for chunk in response.iter_bytes():
            self.writer.write(chunk)
            written += len(chunk)
        self.value = written
        return written


class IntoModel(Generic[T]):
    """Parses the response body as JSON into a structured type.

    Any type pydantic can validate works: a model class, a dataclass,
    `dict[str, str]` and so on.
    """

    value: Optional[T]

    def __init__(self, type_: Type[T]) -> None:
        self.type_ = type_
        self.value = None
        self._adapter: TypeAdapter[T] = TypeAdapter(type_)

    def decode(self, response: httpx.Response) -> T:
        try:
            self.value = self._adapter.validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"Unable to decode response from {response.request.url} as {_name(self.type_)}: {e}"
            ) from e
        return self.value


Destination = Union[IntoString, IntoWriter, IntoModel[Any]]


def _name(type_: Any) -> str:
    return getattr(type_, "__name__", None) or repr(type_)

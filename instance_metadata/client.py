import sys
from typing import Any, Optional, Union

import httpx
from loguru import logger

from .body import as_request_body, encode_body
from .categories import Dynamic, MetaData
from .config import DEFAULT_BASE_URL, ClientConfig
from .destinations import Destination
from .exceptions import InvalidURL, NotFound, UnknownError
from .utils.dump import dump_request, dump_response
from .utils.log import disable_debug_logging, enable_debug_logging

# Sent on every request, with or without a body
REQUEST_HEADERS = {
    "Content-Type": "text/json; charset=UTF-8",
    "Accept": "text/json",
}


class Client:
    """Client for the instance metadata service.

    Holds the base URL of the service and the `httpx.Client` used to reach it.
    Both are fixed after construction, so one client can be shared by callers
    issuing requests in parallel as long as the httpx client allows it.

    No timeout is imposed here. Configure it on the httpx client. The default
    httpx client follows redirects, so only the final response is classified.

    Example:
        >>> with Client() as client:
        ...     client.meta_data.public_hostname()
        'ec2-203-0-113-7.compute-1.amazonaws.com'
    """

    def __init__(
        self,
        base_url: Optional[Union[str, httpx.URL]] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = _parse_base_url(DEFAULT_BASE_URL if base_url is None else base_url)
        self._owns_http_client = http_client is None
        self._log_handler_id: Optional[int] = None
        self.http = http_client if http_client is not None else httpx.Client(follow_redirects=True)

    @classmethod
    def from_config(
        cls, config: ClientConfig, http_client: Optional[httpx.Client] = None
    ) -> "Client":
        """Build a client from settings (see `ClientConfig`)."""
        owns_http_client = http_client is None
        if http_client is None and config.timeout is not None:
            http_client = httpx.Client(timeout=config.timeout, follow_redirects=True)
        client = cls(config.base_url, http_client)
        client._owns_http_client = owns_http_client
        if config.debug:
            client._log_handler_id = enable_debug_logging(sys.stderr)
        return client

    @property
    def meta_data(self) -> MetaData:
        """Static instance metadata (/latest/meta-data/...)."""
        return MetaData(self)

    @property
    def dynamic(self) -> Dynamic:
        """Dynamic instance data (/latest/dynamic/...)."""
        return Dynamic(self)

    def resolve(self, path: str) -> httpx.URL:
        """Resolve a path relative to the base URL.

        A leading slash replaces the base URL's path, anything else is
        resolved relative to it.
        """
        try:
            rel = httpx.URL(path)
        except httpx.InvalidURL as e:
            raise InvalidURL(f"Invalid URL '{path}': {e}") from e
        return self.base_url.join(rel)

    def build_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Build a request for a path relative to the base URL.

        `body` may be None, a `RawBody`/`JsonBody`, or a plain value that maps
        onto one of them (bytes, text, a readable stream or a mapping).
        Anything else raises `UnsupportedBodyType`.
        """
        url = self.resolve(path)
        content = encode_body(as_request_body(body))
        return self.http.build_request(
            method, url, content=content, headers=REQUEST_HEADERS
        )

    def execute(self, request: httpx.Request, destination: Destination) -> Any:
        """Send a request and decode a successful response into `destination`.

        Returns the decoded value (also available as `destination.value`).
        Raises `NotFound` on 404, `UnknownError` on any other non-2xx status
        and `DecodeError` if the body doesn't fit the destination. Transport
        errors from httpx are not caught.

        The response body is always read to the end and the response closed.
        """
        logger.opt(lazy=True).debug("{}", lambda: _safe_dump(dump_request, request))

        response = self.http.send(request, stream=True)
        try:
            response.read()
            logger.opt(lazy=True).debug("{}", lambda: _safe_dump(dump_response, response))

            if response.status_code == httpx.codes.NOT_FOUND:
                raise NotFound(response.content)
            if not response.is_success:
                raise UnknownError(response.status_code, response.content)

            return destination.decode(response)
        finally:
            response.close()

    do = execute

    def get(self, path: str, destination: Destination) -> Any:
        """Shorthand for a bodiless GET."""
        return self.execute(self.build_request("GET", path), destination)

    def close(self) -> None:
        """Close the httpx client and remove the log sink if this client created them."""
        if self._log_handler_id is not None:
            disable_debug_logging(self._log_handler_id)
            self._log_handler_id = None
        if self._owns_http_client:
            self.http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def _parse_base_url(base_url: Union[str, httpx.URL]) -> httpx.URL:
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise InvalidURL(f"Invalid base URL '{base_url}': {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURL(f"Base URL '{base_url}' must be an absolute http(s) URL.")
    return url


def _safe_dump(dump: Any, message: Any) -> str:
    try:
        return dump(message)
    except Exception as e:
        return f"<unable to dump {type(message).__name__}: {e}>"


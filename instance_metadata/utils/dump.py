"""Raw HTTP/1.1 style dumps of requests and responses for debug logging."""

import httpx

MAX_LEN_BODY = 4096

_NOT_READ = "<body not read>"


def dump_request(request: httpx.Request) -> str:
    """Render a request as it would appear on the wire."""
    target = request.url.raw_path.decode("ascii")
    try:
        body = _fmt_body(request.content)
    except httpx.RequestNotRead:
        body = _NOT_READ
    return _render(f"{request.method} {target} HTTP/1.1", request.headers, body)


def dump_response(response: httpx.Response) -> str:
    """Render a response as it was received."""
    status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}"
    try:
        body = _fmt_body(response.content)
    except httpx.ResponseNotRead:
        body = _NOT_READ
    return _render(status_line, response.headers, body)


def _render(start_line: str, headers: httpx.Headers, body: str) -> str:
    lines = [start_line]
    lines.extend(
        f"{name.decode('latin-1')}: {value.decode('latin-1')}" for name, value in headers.raw
    )
    return "\r\n".join(lines) + "\r\n\r\n" + body


def _fmt_body(content: bytes) -> str:
    """Decode and truncate a body for logging."""
    body = content.decode("utf-8", errors="replace")
    if len(body) > MAX_LEN_BODY:
        body = body[:MAX_LEN_BODY] + "..."
    return body

"""ASGI response sending: flushes a ResponseWriter through ``send()``."""

from onion._internal.asgi import Send
from onion.http.response import ResponseWriter


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # 1xx, 204 and 304 responses carry no message body.
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(response: ResponseWriter, send: Send) -> None:
    """Translate a finished ResponseWriter into ASGI send() calls."""
    status = int(response.status)
    headers = response.final_headers()
    body = response.body if _body_allowed(status) else b""

    raw_headers = [(name, value) for name, value in headers.raw if name != b"content-length"]
    if body and "content-type" not in headers:
        raw_headers.append((b"content-type", b"text/plain; charset=utf-8"))
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )

"""ASGI handler: translates ASGI scope/messages to onion types.

The only component that touches raw HTTP ASGI messages. Builds a
``Request`` and a ``ResponseWriter``, hands both to the dispatcher and
flushes the writer through ``send()``.

Exceptions raised by middleware or handlers are not caught here. They
propagate to the ASGI server, which owns the fault policy (typically a
500 response and a logged traceback).
"""

from collections.abc import Awaitable, Callable

from onion._internal.asgi import Receive, Scope, Send
from onion.http.request import Request
from onion.http.response import ResponseWriter
from onion.server.sender import send_response

Dispatch = Callable[[Request, ResponseWriter], Awaitable[None]]


async def handle_request(scope: Scope, receive: Receive, send: Send, *, dispatch: Dispatch) -> None:
    """Process a single HTTP request through *dispatch*."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    response = ResponseWriter()
    await dispatch(request, response)
    await send_response(response, send)

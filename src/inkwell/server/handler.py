"""ASGI handler — translates ASGI scope/messages to inkwell types.

The only component that touches raw ASGI directly. Converts the scope to
a typed Request, runs it through the composer, and sends the Response
back through ASGI send().
"""

import logging

from inkwell._internal.asgi import Receive, Scope, Send
from inkwell.errors import RenderError
from inkwell.http.request import Request
from inkwell.http.response import Response
from inkwell.server.composer import ResponseComposer
from inkwell.server.sender import send_response

logger = logging.getLogger("inkwell.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    composer: ResponseComposer,
) -> None:
    """Process a single HTTP request through the full pipeline.

    A ``RenderError`` abandons the response: nothing is sent and the
    server is left to close the connection.
    """
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = composer.compose(request)
    except RenderError:
        logger.exception(
            "render failed for %s %s; response dropped", request.method, request.raw_path
        )
        return
    except Exception:
        logger.exception("500 %s %s", request.method, request.raw_path)
        response = Response(
            body="Internal Server Error",
            status=500,
            content_type="text/plain; charset=utf-8",
        )

    await send_response(response, send)

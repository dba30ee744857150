"""One HTTP request, from ASGI scope to ASGI send.

The middleware chain runs first (static mounts answer asset paths there);
whatever falls through is routed to a page handler. Route handlers are
called with the request alone and read captures from ``path_params``.
"""

from collections.abc import Sequence

from kida import Environment

from studysync._internal.asgi import Scope, Send
from studysync.http.request import Request
from studysync.http.response import Response
from studysync.middleware.protocol import Middleware, Next
from studysync.routing import Router
from studysync.server.errors import ErrorHandlers, error_response
from studysync.server.negotiation import negotiate
from studysync.server.sender import send_response


def _link(middleware: Middleware, downstream: Next) -> Next:
    async def step(request: Request) -> Response:
        return await middleware(request, downstream)

    return step


async def handle_request(
    scope: Scope,
    send: Send,
    *,
    router: Router,
    middleware: Sequence[Middleware],
    error_handlers: ErrorHandlers,
    kida_env: Environment,
) -> None:
    request = Request.from_asgi(scope)

    async def route(req: Request) -> Response:
        found = router.match(req.method, req.path)
        result = found.route.handler(req.with_path_params(found.path_params))
        return negotiate(result, kida_env=kida_env)

    # First registered middleware sees the request first
    chain: Next = route
    for mw in reversed(middleware):
        chain = _link(mw, chain)

    try:
        response = await chain(request)
    except Exception as exc:
        response = error_response(exc, request, error_handlers, kida_env)

    await send_response(response, send, head=request.method == "HEAD")

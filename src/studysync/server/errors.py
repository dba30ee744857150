"""Error pages.

An exception escaping a handler becomes a response in one of two ways:

- an ``HTTPError`` goes to the handler registered for its status;
- anything else is logged with its traceback and goes to the 500 handler.

Error handlers are called as ``handler(request, exc)``. One that raises
hands its own failure to the 500 handler; if the 500 handler raises too,
the reply is plain text carrying the message of the original error.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from kida import Environment

from studysync.errors import HTTPError
from studysync.http.request import Request
from studysync.http.response import Response
from studysync.server.negotiation import negotiate

logger = logging.getLogger("studysync.server")

type ErrorHandlers = Mapping[int, Callable[[Request, Exception], Any]]


def error_response(
    exc: Exception,
    request: Request,
    handlers: ErrorHandlers,
    kida_env: Environment,
) -> Response:
    if isinstance(exc, HTTPError):
        return _http_error(exc, request, handlers, kida_env)
    return _internal_error(exc, request, handlers, kida_env)


def _http_error(
    exc: HTTPError,
    request: Request,
    handlers: ErrorHandlers,
    kida_env: Environment,
) -> Response:
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    handler = handlers.get(exc.status)
    if handler is None:
        response = Response(body=exc.detail, status=exc.status)
    else:
        try:
            response = negotiate(handler(request, exc), kida_env=kida_env)
        except Exception as page_exc:
            return _internal_error(page_exc, request, handlers, kida_env)
        if response.status == 200:
            response = response.with_status(exc.status)

    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def _internal_error(
    exc: Exception,
    request: Request,
    handlers: ErrorHandlers,
    kida_env: Environment,
) -> Response:
    logger.exception("500 %s %s", request.method, request.path, exc_info=exc)

    handler = handlers.get(500)
    if handler is not None:
        try:
            response = negotiate(handler(request, exc), kida_env=kida_env)
        except Exception:
            logger.exception("Error page failed for %s %s", request.method, request.path)
        else:
            return response.with_status(500) if response.status == 200 else response

    return Response(
        body=f"Internal Server Error: {exc}",
        status=500,
        content_type="text/plain; charset=utf-8",
    )

"""Shape of a StudySync middleware.

Any async callable taking the request and the rest of the chain works;
``StaticFiles`` is a callable object, a plain function is fine too::

    async def no_store(request: Request, next: Next) -> Response:
        response = await next(request)
        return response.with_header("Cache-Control", "no-store")
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from studysync.http.request import Request
from studysync.http.response import Response

type Next = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    async def __call__(self, request: Request, next: Next) -> Response: ...

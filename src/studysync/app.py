"""The StudySync ASGI application.

Routes, middleware and error pages are registered first. The first
request (or lifespan startup, or ``run()``) freezes the app: the kida
environment is built once and further registration is refused.
"""

import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

from kida import Environment

from studysync._internal.asgi import Receive, Scope, Send
from studysync.config import AppConfig
from studysync.middleware.protocol import Middleware
from studysync.middleware.static import StaticFiles
from studysync.routing import Route, Router
from studysync.server.handler import handle_request
from studysync.templating import create_environment

type Handler = Callable[..., Any]


class App:
    """ASGI callable serving the registered routes.

    Freezing happens under a lock with a second check inside it, so
    concurrent first requests build the environment exactly once.
    """

    __slots__ = (
        "_error_handlers",
        "_frozen",
        "_kida_env",
        "_lock",
        "_middleware",
        "_router",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self._router = Router()
        self._middleware: list[Middleware] = []
        self._error_handlers: dict[int, Handler] = {}
        self._kida_env: Environment | None = None
        self._frozen = False
        self._lock = threading.Lock()

    def route(
        self,
        path: str,
        *,
        methods: tuple[str, ...] = ("GET", "HEAD"),
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Decorator registering ``handler(request)`` for *path*.

        *path* is fixed (``/``) or captures one segment (``/{page}``).
        """

        def register(handler: Handler) -> Handler:
            self._refuse_if_frozen()
            self._router.add(
                Route(path, handler, frozenset(m.upper() for m in methods), name)
            )
            return handler

        return register

    def error(self, status: int) -> Callable[[Handler], Handler]:
        """Decorator registering ``handler(request, exc)`` for *status*."""

        def register(handler: Handler) -> Handler:
            self._refuse_if_frozen()
            self._error_handlers[status] = handler
            return handler

        return register

    def add_middleware(self, middleware: Middleware) -> None:
        """Append *middleware*; the first one added sees requests first."""
        self._refuse_if_frozen()
        self._middleware.append(middleware)

    @property
    def routes(self) -> list[Route]:
        return self._router.routes

    @property
    def template_env(self) -> Environment:
        """The kida environment. Freezes the app."""
        self._ensure_frozen()
        assert self._kida_env is not None
        return self._kida_env

    @property
    def static_mounts(self) -> tuple[tuple[str, Path], ...]:
        """``(prefix, directory)`` of each StaticFiles middleware."""
        return tuple(
            (mw.prefix, mw.directory) for mw in self._middleware if isinstance(mw, StaticFiles)
        )

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Log the startup banner and serve with pounce until interrupted."""
        from studysync.server.banner import log_startup_banner
        from studysync.server.serve import run_server

        self._ensure_frozen()
        host = host or self.config.host
        port = port or self.config.port
        log_startup_banner(self.config, self.static_mounts, host=host, port=port)

        watch = (str(self.config.resolved_root),) if self.config.debug else ()
        run_server(self, host, port, reload=self.config.debug, reload_dirs=watch)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        self._ensure_frozen()
        assert self._kida_env is not None
        await handle_request(
            scope,
            send,
            router=self._router,
            middleware=self._middleware,
            error_handlers=self._error_handlers,
            kida_env=self._kida_env,
        )

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._lock:
            if not self._frozen:
                self._kida_env = create_environment(self.config)
                self._frozen = True

    def _refuse_if_frozen(self) -> None:
        if self._frozen:
            msg = "The app is already serving; register routes and middleware before run()"
            raise RuntimeError(msg)

"""Run the app under pounce.

``pounce.Server`` accepts the App object itself, so no import string is
needed. Debug mode is one worker that restarts when site files change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from studysync.app import App

_WATCHED_SUFFIXES = (".html", ".css", ".js", ".json")


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    reload: bool = False,
    reload_dirs: tuple[str, ...] = (),
) -> None:
    """Block serving *app* on ``host:port``.

    With *reload*, templates, pages and assets under *reload_dirs* are
    watched as well as the working directory.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    settings = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=_WATCHED_SUFFIXES if reload else (),
        reload_dirs=reload_dirs,
    )
    Server(settings, app).run()

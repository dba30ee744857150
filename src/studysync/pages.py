"""Page router: allow-listed pages backed by HTML files or templates.

A requested identifier is sanitized to ``[a-zA-Z0-9_-]`` and checked
against a closed allow-list. An allowed page resolves in two tiers:

1. ``<root>/<page>.html`` if it exists, served as raw bytes;
2. otherwise the ``<page>.html`` template from the views directory.

A template that fails to render is logged and answered with the
not-found template (404), rendered with the same context.
"""

import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from kida import Environment

from studysync.errors import NotFound
from studysync.http.request import Request
from studysync.http.response import Response
from studysync.middleware.static import file_response
from studysync.templating import Template, render_template

if TYPE_CHECKING:
    from studysync.app import App

logger = logging.getLogger("studysync.pages")

ALLOWED_PAGES: frozenset[str] = frozenset(
    {
        "index",
        "home",
        "studysync",
        "reviewpage",
        "price",
        "login",
        "login2",
    }
)

NOT_FOUND_TEMPLATE = "404.html"
ERROR_TEMPLATE = "500.html"

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


def sanitize_page(raw: str) -> str:
    """Strip every character outside ``[a-zA-Z0-9_-]``.

    >>> sanitize_page("../../etc/passwd")
    'etcpasswd'
    """
    return _UNSAFE_CHARS.sub("", raw)


def is_allowed(page: str) -> bool:
    return page in ALLOWED_PAGES


def build_context(page: str, app_name: str = "StudySync", **extra: Any) -> dict[str, Any]:
    """Render context for *page*: ``appName`` and ``page`` plus *extra*."""
    return {"appName": app_name, "page": page, **extra}


class PageRenderer:
    """Resolves a page identifier to a Response.

    The kida environment is fetched through *env* on each render because
    it only exists once the app has frozen. Pre-rendered files get the
    same *cache_control* as the static mounts.
    """

    __slots__ = ("_app_name", "_cache_control", "_env", "_root")

    def __init__(
        self,
        root_dir: str | Path,
        *,
        env: Callable[[], Environment],
        app_name: str = "StudySync",
        cache_control: str | None = "public, max-age=0",
    ) -> None:
        self._root = Path(root_dir).resolve()
        self._env = env
        self._app_name = app_name
        self._cache_control = cache_control

    def render(self, page: str, **extra: Any) -> Response:
        """Serve ``<page>.html`` from the root, else render its template."""
        if not page or sanitize_page(page) != page:
            msg = f"Unsanitized page identifier: {page!r}"
            raise ValueError(msg)

        html_file = self._root / f"{page}.html"
        if html_file.is_file():
            return file_response(html_file, cache_control=self._cache_control)

        context = build_context(page, self._app_name, **extra)
        env = self._env()
        try:
            body = render_template(env, Template(f"{page}.html", **context))
        except Exception:
            logger.exception("Error rendering page %s", page)
            not_found = render_template(env, Template(NOT_FOUND_TEMPLATE, **context))
            return Response(body=not_found, status=404)
        return Response(body=body)


def register_pages(app: "App", renderer: PageRenderer) -> None:
    """Register ``/`` and ``/{page}`` on *app*."""

    @app.route("/", name="index")
    def index(request: Request) -> Response:
        return renderer.render("index")

    @app.route("/{page}", name="page")
    def page(request: Request) -> Response:
        requested = request.path_params["page"]
        sanitized = sanitize_page(requested)
        if not is_allowed(sanitized):
            raise NotFound(f"Page {requested!r} is not available")
        return renderer.render(sanitized)

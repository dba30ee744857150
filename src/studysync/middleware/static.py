"""Static asset mounts.

Each ``StaticFiles`` owns one URL prefix such as ``/css`` and answers
GET and HEAD requests below it from a directory on disk. Misses and
other methods continue down the chain to the page routes.
"""

import mimetypes
from pathlib import Path

from studysync.http.request import Request
from studysync.http.response import Response
from studysync.middleware.protocol import Next

_TEXTUAL = frozenset({"application/javascript", "application/json", "image/svg+xml"})


def guess_content_type(file_path: Path) -> str:
    """Content type from the file extension; textual types get utf-8."""
    guessed, _ = mimetypes.guess_type(file_path.name)
    if guessed is None:
        return "application/octet-stream"
    if guessed.startswith("text/") or guessed in _TEXTUAL:
        return f"{guessed}; charset=utf-8"
    return guessed


def file_response(file_path: Path, *, cache_control: str | None = None) -> Response:
    """The whole file as a 200 response."""
    response = Response(body=file_path.read_bytes(), content_type=guess_content_type(file_path))
    return response.with_header("Cache-Control", cache_control) if cache_control else response


class StaticFiles:
    """Serve ``<directory>/<rest>`` for ``<prefix>/<rest>``.

    The resolved file must stay inside *directory* (symlinks included),
    otherwise the reply is 403. A directory is served through its
    *index* file, after a 301 to the slash-terminated URL.
    """

    __slots__ = ("_cache_control", "_directory", "_index", "_prefix")

    def __init__(
        self,
        directory: str | Path,
        prefix: str,
        *,
        index: str = "index.html",
        cache_control: str = "public, max-age=0",
    ) -> None:
        self._prefix = "/" + prefix.strip("/")
        if self._prefix == "/":
            msg = "StaticFiles cannot be mounted at '/', the page routes live there"
            raise ValueError(msg)
        self._directory = Path(directory).resolve()
        self._index = index
        self._cache_control = cache_control

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def directory(self) -> Path:
        return self._directory

    async def __call__(self, request: Request, next: Next) -> Response:
        path = request.path
        under_prefix = path == self._prefix or path.startswith(self._prefix + "/")
        if request.method not in ("GET", "HEAD") or not under_prefix:
            return await next(request)

        target = (self._directory / path[len(self._prefix) :].lstrip("/")).resolve()
        if not target.is_relative_to(self._directory):
            return Response(body="Forbidden", status=403)

        if target.is_dir():
            if not (target / self._index).is_file():
                return await next(request)
            if not path.endswith("/"):
                return Response(status=301).with_header("Location", f"{path}/")
            target = target / self._index

        if not target.is_file():
            return await next(request)
        return file_response(target, cache_control=self._cache_control)

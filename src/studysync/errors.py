"""Exceptions raised by the StudySync app.

Handlers raise ``HTTPError`` subclasses to end a request with a given
status; the request pipeline turns them into error pages.
"""

from collections.abc import Iterable
from http import HTTPStatus


class StudySyncError(Exception):
    """Root of the StudySync exception tree."""


class ConfigurationError(StudySyncError):
    """Invalid settings, e.g. a non-numeric ``PORT`` or a bad route path."""


class HTTPError(StudySyncError):
    """Ends the current request with ``status``.

    ``detail`` defaults to the standard reason phrase. ``headers`` are
    appended to whatever response the error page produces.
    """

    status: int = 500

    def __init__(self, detail: str = "", *, headers: tuple[tuple[str, str], ...] = ()) -> None:
        self.detail = detail or HTTPStatus(self.status).phrase
        self.headers = headers
        super().__init__(self.detail)


class NotFound(HTTPError):  # noqa: N818
    """No route for the path, or a page outside the allow-list."""

    status = 404


class MethodNotAllowed(HTTPError):  # noqa: N818
    """The path exists but not for this method. Carries ``Allow``."""

    status = 405

    def __init__(self, allowed: Iterable[str]) -> None:
        allow = ", ".join(sorted(allowed))
        super().__init__(f"Use one of: {allow}", headers=(("Allow", allow),))

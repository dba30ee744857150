"""Tests for studysync.errors and the error page pipeline."""

import logging

import pytest

from studysync.errors import (
    ConfigurationError,
    HTTPError,
    MethodNotAllowed,
    NotFound,
    StudySyncError,
)
from studysync.http.request import Request
from studysync.http.response import Response
from studysync.server.errors import error_response


class TestExceptions:
    def test_tree(self) -> None:
        assert issubclass(ConfigurationError, StudySyncError)
        assert issubclass(NotFound, HTTPError)
        assert issubclass(MethodNotAllowed, HTTPError)

    def test_reason_phrase_default(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert str(err) == err.detail == "Not Found"

    def test_custom_detail(self) -> None:
        assert str(NotFound("Page 'x' is not available")) == "Page 'x' is not available"

    def test_method_not_allowed_allow_header(self) -> None:
        err = MethodNotAllowed({"HEAD", "GET"})
        assert err.status == 405
        assert err.headers == (("Allow", "GET, HEAD"),)

    def test_top_level_exports(self) -> None:
        import studysync

        assert studysync.NotFound is NotFound
        assert studysync.StudySyncError is StudySyncError
        with pytest.raises(AttributeError):
            studysync.DoesNotExist  # noqa: B018


class _Env:
    """Stands in for kida; error handlers in these tests return plain strings."""


REQUEST = Request("GET", "/reviewpage")


class TestErrorResponse:
    def test_http_error_without_handler(self) -> None:
        response = error_response(NotFound("gone"), REQUEST, {}, _Env())
        assert (response.status, response.text) == (404, "gone")

    def test_handler_response_takes_error_status(self) -> None:
        handlers = {404: lambda request, exc: f"missing {request.path}"}
        response = error_response(NotFound(), REQUEST, handlers, _Env())
        assert (response.status, response.text) == (404, "missing /reviewpage")

    def test_error_headers_appended(self) -> None:
        handlers = {405: lambda request, exc: "nope"}
        response = error_response(MethodNotAllowed({"GET"}), REQUEST, handlers, _Env())
        assert response.header("Allow") == "GET"

    def test_failing_http_handler_escalates_to_500(self) -> None:
        def broken(request, exc):
            raise RuntimeError("404 template missing")

        handlers = {404: broken, 500: lambda request, exc: f"500 page: {exc}"}
        response = error_response(NotFound(), REQUEST, handlers, _Env())
        assert response.status == 500
        assert response.text == "500 page: 404 template missing"

    def test_failing_500_handler_falls_back_to_text(self, caplog) -> None:
        def broken(request, exc):
            raise RuntimeError("500 template missing")

        with caplog.at_level(logging.ERROR, logger="studysync.server"):
            response = error_response(ValueError("bad row"), REQUEST, {500: broken}, _Env())
        assert response.status == 500
        assert response.text == "Internal Server Error: bad row"
        assert "500 GET /reviewpage" in caplog.text
        assert "Error page failed for GET /reviewpage" in caplog.text

    def test_500_handler_explicit_status_kept(self) -> None:
        handlers = {500: lambda request, exc: Response("busy", status=503)}
        response = error_response(RuntimeError("x"), REQUEST, handlers, _Env())
        assert response.status == 503

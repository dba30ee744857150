"""Turn whatever a handler returned into a Response."""

from typing import Any

from kida import Environment

from studysync.http.response import Response
from studysync.templating import Template, render_template


def negotiate(value: Any, *, kida_env: Environment) -> Response:
    """``Response`` as is, ``Template`` rendered, ``str`` as an HTML body."""
    match value:
        case Response():
            return value
        case Template():
            return Response(body=render_template(kida_env, value))
        case str():
            return Response(body=value)
    msg = f"Handlers must return Response, Template or str, not {type(value).__name__}"
    raise TypeError(msg)

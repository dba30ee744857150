"""Write a Response to the ASGI ``send`` callable."""

from studysync._internal.asgi import Send
from studysync.http.response import Response


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Send the start and body messages for *response*.

    ``content-length`` is computed here from the body; a value set on the
    response is dropped. A HEAD reply keeps the length but sends no bytes.
    """
    body = response.body_bytes
    headers = [(b"content-type", response.content_type.encode("latin-1"))]
    headers += [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
        if name.lower() != "content-length"
    ]
    headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send({"type": "http.response.start", "status": response.status, "headers": headers})
    await send({"type": "http.response.body", "body": b"" if head else body})

"""Request middleware: the protocol and the static asset mount."""

from studysync.middleware.protocol import Middleware, Next
from studysync.middleware.static import StaticFiles, file_response

__all__ = ["Middleware", "Next", "StaticFiles", "file_response"]

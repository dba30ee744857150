"""The request as seen by middleware and page handlers."""

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """Method and path of an incoming request, plus captured path params."""

    method: str
    path: str
    path_params: dict[str, str] = field(default_factory=dict)

    def with_path_params(self, path_params: dict[str, str]) -> "Request":
        return replace(self, path_params=path_params)

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> "Request":
        return cls(method=scope["method"].upper(), path=scope["path"] or "/")

"""kida integration.

Handlers and error pages return a ``Template``; the request pipeline
renders it against the environment built by ``create_environment``.
"""

from dataclasses import dataclass
from typing import Any

from kida import Environment, FileSystemLoader

from studysync.config import AppConfig


@dataclass(frozen=True, slots=True, init=False)
class Template:
    """A template name plus the context to render it with::

        return Template("price.html", appName="StudySync", page="price")
    """

    name: str
    context: dict[str, Any]

    def __init__(self, name: str, /, **context: Any) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "context", context)


def create_environment(config: AppConfig) -> Environment:
    """Environment loading from the views directory.

    Debug mode reloads templates when they change on disk.
    """
    return Environment(
        loader=FileSystemLoader(str(config.resolved_views)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )


def render_template(env: Environment, template: Template) -> str:
    return env.get_template(template.name).render(template.context)

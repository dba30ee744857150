"""StudySync: page router for the StudySync site.

Maps ``/<page>`` to a pre-rendered HTML file or a kida template, behind
a fixed allow-list, with static assets under ``/css``, ``/js``,
``/images`` and ``/data``::

    from studysync import create_app

    create_app().run()

Names are imported on first access, so ``import studysync`` does not
load kida.
"""

import importlib

__version__ = "0.1.0"

_EXPORTS = {
    "ALLOWED_PAGES": "studysync.pages",
    "App": "studysync.app",
    "AppConfig": "studysync.config",
    "ConfigurationError": "studysync.errors",
    "HTTPError": "studysync.errors",
    "MethodNotAllowed": "studysync.errors",
    "NotFound": "studysync.errors",
    "Request": "studysync.http.request",
    "Response": "studysync.http.response",
    "StudySyncError": "studysync.errors",
    "Template": "studysync.templating",
    "create_app": "studysync.site",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> object:
    module = _EXPORTS.get(name)
    if module is None:
        msg = f"module 'studysync' has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module), name)

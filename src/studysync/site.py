"""The StudySync site: page routes, static asset mounts, and error pages."""

from studysync.app import App
from studysync.config import AppConfig
from studysync.http.request import Request
from studysync.middleware.static import StaticFiles
from studysync.pages import (
    ERROR_TEMPLATE,
    NOT_FOUND_TEMPLATE,
    PageRenderer,
    build_context,
    register_pages,
)
from studysync.templating import Template


def create_app(config: AppConfig | None = None) -> App:
    """Build the StudySync app.

    Without *config*, settings come from the environment (``PORT``).

    Static directories are mounted first so asset requests never reach
    the page router.
    """
    config = config or AppConfig.from_env()
    app = App(config)
    root = config.resolved_root

    for name in config.static_mounts:
        app.add_middleware(
            StaticFiles(root / name, prefix=f"/{name}", cache_control=config.cache_control)
        )

    renderer = PageRenderer(
        root,
        env=lambda: app.template_env,
        app_name=config.app_name,
        cache_control=config.cache_control,
    )
    register_pages(app, renderer)

    @app.error(404)
    def not_found(request: Request, exc: Exception) -> Template:
        return Template(NOT_FOUND_TEMPLATE, **build_context("404", config.app_name))

    @app.error(500)
    def server_error(request: Request, exc: Exception) -> Template:
        context = build_context("error", config.app_name, errorMessage=str(exc))
        return Template(ERROR_TEMPLATE, **context)

    return app

"""Settings for the StudySync app: one frozen ``AppConfig`` value.

Defaults suit local development; ``from_env`` applies ``PORT``.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from studysync.errors import ConfigurationError

DEFAULT_PORT = 3000


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(root_dir="site", port=8080)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    debug: bool = False

    # Site
    app_name: str = "StudySync"
    root_dir: str | Path = "."
    views_dir: str | Path = "views"  # Relative to root_dir unless absolute

    # Templates
    autoescape: bool = True

    # Static files: each name is mounted at /<name> from <root_dir>/<name>
    static_mounts: tuple[str, ...] = ("css", "js", "images", "data")
    cache_control: str = "public, max-age=0"

    # Logging
    log_level: str = "info"

    @property
    def resolved_root(self) -> Path:
        """Absolute project root."""
        return Path(self.root_dir).resolve()

    @property
    def resolved_views(self) -> Path:
        """Absolute template directory."""
        views = Path(self.views_dir)
        if views.is_absolute():
            return views
        return (self.resolved_root / views).resolve()

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> "AppConfig":
        """Build a config from the process environment.

        Reads ``PORT`` (default ``3000``). Keyword *overrides* win over
        the environment::

            config = AppConfig.from_env(root_dir="site")
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw_port = env.get("PORT")
        if raw_port:
            try:
                port = int(raw_port)
            except ValueError as exc:
                msg = f"PORT must be an integer, got {raw_port!r}"
                raise ConfigurationError(msg) from exc
            if not 0 < port < 65536:
                msg = f"PORT out of range: {port}"
                raise ConfigurationError(msg)
            config = replace(config, port=port)

        if overrides:
            config = replace(config, **overrides)
        return config

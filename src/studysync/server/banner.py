"""Startup banner logged before the server accepts connections."""

import logging
from pathlib import Path

from studysync.config import AppConfig

logger = logging.getLogger("studysync.server")


def log_startup_banner(
    config: AppConfig,
    mounts: tuple[tuple[str, Path], ...],
    *,
    host: str | None = None,
    port: int | None = None,
) -> None:
    """Log the listening URL, project root, and static mount points."""
    logger.info(
        "Server running at http://%s:%d",
        host or config.host,
        port or config.port,
    )
    logger.info("Project root: %s", config.resolved_root)
    logger.info("Templates: %s", config.resolved_views)
    if not mounts:
        return
    logger.info("Static file directories:")
    width = max(len(prefix) for prefix, _ in mounts)
    for prefix, directory in mounts:
        logger.info("- %s -> %s", prefix.ljust(width), directory)

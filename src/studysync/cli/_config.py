"""Build an AppConfig from the environment plus CLI overrides."""

import argparse
import sys

from studysync.config import AppConfig
from studysync.errors import ConfigurationError


def config_from_args(args: argparse.Namespace) -> AppConfig:
    """``AppConfig.from_env()`` with any flags given on the command line.

    Exits with status 1 on invalid configuration (e.g. a bad ``PORT``).
    """
    overrides: dict[str, object] = {}
    for flag, field_name in (
        ("root", "root_dir"),
        ("host", "host"),
        ("port", "port"),
        ("log_level", "log_level"),
    ):
        value = getattr(args, flag, None)
        if value is not None:
            overrides[field_name] = value
    if getattr(args, "debug", False):
        overrides["debug"] = True

    try:
        return AppConfig.from_env(**overrides)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

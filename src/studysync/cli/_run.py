"""``studysync run`` — configure logging, build the site, serve it."""

import argparse
import logging

from studysync.cli._config import config_from_args
from studysync.site import create_app


def run_server(args: argparse.Namespace) -> None:
    """Start the StudySync server.

    Settings resolve as: CLI flag, then ``PORT`` from the environment,
    then the ``AppConfig`` default.
    """
    config = config_from_args(args)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    app = create_app(config)
    app.run()

"""``studysync routes``: the page routes and static mounts of the site."""

import argparse

from studysync.cli._config import config_from_args
from studysync.site import create_app


def run_routes(args: argparse.Namespace) -> None:
    app = create_app(config_from_args(args))

    rows = [
        (",".join(sorted(route.methods)), route.path, route.name or route.handler.__name__)
        for route in app.routes
    ]
    rows += [("STATIC", prefix, str(directory)) for prefix, directory in app.static_mounts]

    widths = [max(len(row[i]) for row in [("METHOD", "PATH", ""), *rows]) for i in (0, 1)]
    print(f"{'METHOD':<{widths[0]}}  {'PATH':<{widths[1]}}  TARGET")
    for methods, path, target in rows:
        print(f"{methods:<{widths[0]}}  {path:<{widths[1]}}  {target}")

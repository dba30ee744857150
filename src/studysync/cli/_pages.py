"""``studysync pages`` — show how each allow-listed page resolves.

For every page the first matching tier is reported: a ``<page>.html``
file in the project root, a template in the views directory, or
``missing`` (the request will fall back to the 404 page).
"""

import argparse

from studysync.cli._config import config_from_args
from studysync.pages import ALLOWED_PAGES


def run_pages(args: argparse.Namespace) -> None:
    config = config_from_args(args)
    root = config.resolved_root
    views = config.resolved_views

    width = max(len(page) for page in ALLOWED_PAGES)
    for page in sorted(ALLOWED_PAGES):
        html_file = root / f"{page}.html"
        template = views / f"{page}.html"
        if html_file.is_file():
            source = f"file      {html_file}"
        elif template.is_file():
            source = f"template  {template}"
        else:
            source = "missing"
        print(f"{page:<{width}}  {source}")

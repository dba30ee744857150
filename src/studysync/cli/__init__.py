"""The ``studysync`` command.

Subcommands: ``run`` serves the site, ``routes`` and ``pages`` inspect it.
Their modules are imported only when chosen.
"""

import argparse
import importlib


def _subcommand(
    subparsers: argparse._SubParsersAction, name: str, help_text: str, target: str
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, help=help_text)
    parser.set_defaults(target=target)
    parser.add_argument(
        "--root",
        help="Project root holding <page>.html files, views/ and the asset folders",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="studysync",
        description="Serve the StudySync pages and their static assets.",
    )
    subparsers = parser.add_subparsers(dest="command")

    run = _subcommand(subparsers, "run", "Start the server", "studysync.cli._run:run_server")
    run.add_argument("--host", help="Bind address")
    run.add_argument("--port", type=int, help="Bind port (default: $PORT, else 3000)")
    run.add_argument("--debug", action="store_true", help="One worker, reload on change")
    run.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging level (default: info)",
    )
    _subcommand(
        subparsers, "routes", "List routes and static mounts", "studysync.cli._routes:run_routes"
    )
    _subcommand(
        subparsers, "pages", "Show how each allowed page resolves", "studysync.cli._pages:run_pages"
    )

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        raise SystemExit(0)

    module_name, _, func_name = args.target.partition(":")
    getattr(importlib.import_module(module_name), func_name)(args)

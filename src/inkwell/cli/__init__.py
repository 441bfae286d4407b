"""inkwell CLI — configure and start the page server.

Entry point registered as ``inkwell`` in ``pyproject.toml``::

    [project.scripts]
    inkwell = "inkwell.cli:main"
"""

import argparse
import logging
import sys

from inkwell.config import ServerConfig
from inkwell.errors import ConfigurationError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def build_parser() -> argparse.ArgumentParser:
    defaults = ServerConfig()
    parser = argparse.ArgumentParser(
        prog="inkwell",
        description="inkwell — serve a directory of markdown pages as HTML.",
    )
    parser.add_argument("-p", "--port", type=int, default=defaults.port, help="Server port number")
    parser.add_argument("--host", default=defaults.host, help="Bind host address")
    parser.add_argument(
        "--docs", default=str(defaults.docs_dir), metavar="PATH", help="Path of markdown docs"
    )
    parser.add_argument(
        "--static", default=str(defaults.static_dir), metavar="PATH", help="Path of static files"
    )
    parser.add_argument(
        "--template",
        default=str(defaults.template_path),
        metavar="PATH",
        help="Page template path",
    )
    parser.add_argument(
        "--num-threads",
        type=int,
        default=defaults.workers,
        metavar="NUM",
        help="Size of the worker thread pool",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=defaults.log_level,
        help="Logging verbosity",
    )
    parser.add_argument(
        "--bad-title-status",
        type=int,
        choices=(400, 404),
        default=defaults.bad_title_status,
        help="HTTP status for invalid page titles",
    )
    return parser


def configure_logging(level: str) -> None:
    """Send inkwell's log records to stderr at *level*."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``inkwell`` command."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = ServerConfig(
            host=args.host,
            port=args.port,
            workers=args.num_threads,
            log_level=args.log_level,
            docs_dir=args.docs,
            static_dir=args.static,
            template_path=args.template,
            bad_title_status=args.bad_title_status,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    logging.getLogger("inkwell.server").debug(
        "port: %d / docs: %s / static: %s / template: %s / num_threads: %d",
        config.port,
        config.docs_dir,
        config.static_dir,
        config.template_path,
        config.workers,
    )

    from inkwell.app import App

    app = App(config)
    try:
        app.run()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

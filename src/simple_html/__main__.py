# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Sequence

import argparse
import logging
import os
import pathlib
import sys

import aiohttp.web
from dotenv import load_dotenv

from simple_html.loader import PageDefinitionError, load_document_file
from simple_html.logger import configure_logging
from simple_html.server import make_application

EXIT_INVALID_PAGE = 2
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def log_level(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        msg = f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}"
        raise argparse.ArgumentTypeError(msg)
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="simple-html")
    parser.add_argument("--local", action="store_true", default=False)
    parser.add_argument(
        "--log-level",
        type=log_level,
        default=os.environ.get("SIMPLE_HTML_LOG_LEVEL", "INFO"),
    )

    commands = parser.add_subparsers(dest="command", required=True)

    render = commands.add_parser("render", help="render a page definition to HTML")
    render.add_argument("page", type=pathlib.Path)
    render.add_argument("-o", "--output", type=pathlib.Path, default=None)

    serve = commands.add_parser("serve", help="serve a page definition over HTTP")
    serve.add_argument("page", type=pathlib.Path)
    serve.add_argument("--host", default=os.environ.get("SIMPLE_HTML_HOST", "127.0.0.1"))
    serve.add_argument("--port", type=int, default=os.environ.get("SIMPLE_HTML_PORT", "8080"))
    serve.add_argument(
        "--preload",
        action="store_true",
        default=os.environ.get("SIMPLE_HTML_PRELOAD", "").lower() in {"1", "true", "yes"},
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()

    args = build_parser().parse_args(argv)
    logger = configure_logging(args.log_level, local=args.local)

    try:
        document = load_document_file(args.page)
    except PageDefinitionError:
        logger.exception("Invalid page definition in %s", args.page)
        return EXIT_INVALID_PAGE
    except OSError as ex:
        logger.error("Unable to read %s: %s", args.page, ex)  # noqa: TRY400 message is enough
        return EXIT_INVALID_PAGE

    if args.command == "render":
        content = document.render(0)
        if args.output is None:
            sys.stdout.write(content)
        else:
            args.output.write_text(content, encoding="utf-8")
            logger.info("Wrote %s", args.output)
        return 0

    logger.info("Serving %s on %s:%d", args.page, args.host, args.port)
    aiohttp.web.run_app(
        make_application(document, preload=args.preload),
        host=args.host,
        port=args.port,
        print=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

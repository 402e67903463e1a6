# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

import hashlib
import html
import logging

import aiohttp.web
import brotli  # type: ignore[import-untyped]
import multidict

from .element import Node, Tag
from .page import Document

_LOGGER = logging.getLogger("simple_html").getChild("server")


class DocResponse:
    document: Document
    status: int
    preload: bool

    def __init__(self, document: Document, status: int = 200, *, preload: bool = False) -> None:
        self.document = document
        self.status = status
        self.preload = preload

    def respond(self, request: aiohttp.web.BaseRequest) -> aiohttp.web.Response:
        content = self.document.render(0).encode("utf-8")
        tag = hashlib.sha1(content, usedforsecurity=False).hexdigest()

        if tag in request.headers.getall("If-None-Match", []):
            return aiohttp.web.Response(status=304, headers={"ETag": tag})

        headers = multidict.CIMultiDict(
            {
                "Content-Type": "text/html; charset=utf-8",
                "Cache-Control": "must-revalidate, no-cache",
                "ETag": tag,
            },
        )

        if self.preload and (preloads := self.preloads()):
            headers["Link"] = ", ".join(preloads)

        if "br" in request.headers.get("Accept-Encoding", ""):
            content = brotli.compress(content)
            headers["Content-Encoding"] = "br"
            headers["Vary"] = "accept-encoding"

        return aiohttp.web.Response(status=self.status, body=content, headers=headers)

    def preloads(self) -> list[str]:
        return [_preload_string(style, "style") for style in self.document.styles] + [
            _preload_string(script, "script") for script in self.document.script_links
        ]


def not_found_document(path: str) -> Document:
    return (
        Document()
        .with_title("Page not found")
        .with_header(1, "Page not found")
        .with_child(
            Node(Tag.PARAGRAPH)
            .with_child("Nothing is served at")
            .with_child(Node(Tag.CODE).with_child(html.escape(path))),
        )
        .with_link("/")
    )


def make_application(document: Document, *, preload: bool = False) -> aiohttp.web.Application:
    page = DocResponse(document, preload=preload)

    async def index(request: aiohttp.web.Request) -> aiohttp.web.Response:
        _LOGGER.info("Serving page", extra={"path": request.path})
        return page.respond(request)

    async def not_found(request: aiohttp.web.Request) -> aiohttp.web.Response:
        _LOGGER.warning("No page at %s", request.path)
        return DocResponse(not_found_document(request.path), status=404).respond(request)

    app = aiohttp.web.Application()
    app.router.add_get("/", index)
    app.router.add_route("*", "/{tail:.*}", not_found)

    return app


def _preload_string(href: str, as_type: str) -> str:
    return f'<{href}>; rel="preload"; as="{as_type}"; crossorigin="anonymous"'

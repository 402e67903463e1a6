# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Iterable, Mapping
from typing import Any, Self

from .element import INDENT, ChildBuilder, Renderable, as_renderable

MetaAttributes = Mapping[Any, Any] | Iterable[tuple[Any, Any]]


class Document(ChildBuilder, Renderable):
    """
    The root of a page.

    Head metadata is kept separately from the body tree, and the whole
    envelope is produced by a single call to ``render``. Body children are
    always rendered one level deep, whatever depth is requested.
    """

    title: str | None
    meta: list[str]
    head_links: list[tuple[str, str]]
    script_links: list[str]
    script_literals: list[str]
    body: list[Renderable]

    def __init__(self) -> None:
        self.title = None
        self.meta = []
        self.head_links = []
        self.script_links = []
        self.script_literals = []
        self.body = []

    def set_title(self, title: Any) -> None:
        self.title = str(title)

    def with_title(self, title: Any) -> Self:
        self.set_title(title)
        return self

    def add_meta(self, attributes: MetaAttributes) -> None:
        pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
        self.meta.append(" ".join(f'{key}="{value}"' for key, value in pairs))

    def with_meta(self, attributes: MetaAttributes) -> Self:
        self.add_meta(attributes)
        return self

    def add_head_link(self, rel: Any, href: Any) -> None:
        self.head_links.append((str(rel), str(href)))

    def with_head_link(self, rel: Any, href: Any) -> Self:
        self.add_head_link(rel, href)
        return self

    def add_script(self, script: Any) -> None:
        self.script_literals.append(str(script))

    def with_script(self, script: Any) -> Self:
        self.add_script(script)
        return self

    def add_script_link(self, link: Any) -> None:
        self.script_links.append(str(link))

    def with_script_link(self, link: Any) -> Self:
        self.add_script_link(link)
        return self

    def add_child(self, child: Renderable | Any) -> None:
        self.body.append(as_renderable(child))

    @property
    def styles(self) -> list[str]:
        return [href for rel, href in self.head_links if rel == "stylesheet"]

    def render(self, depth: int = 0) -> str:  # noqa: ARG002 a document is always the page root
        head = "".join(
            [
                f"{INDENT}<title>{self.title}</title>\n" if self.title is not None else "",
                *(f"{INDENT}<meta {meta}>\n" for meta in self.meta),
                *(f'{INDENT}<link rel="{rel}" href="{href}">\n' for rel, href in self.head_links),
                *(f'{INDENT}<script src="{link}" />\n' for link in self.script_links),
            ],
        )
        content = "".join(f"{child.render(1)}\n" for child in self.body)
        scripts = "".join(
            f"{INDENT}<script>\n{script}\n{INDENT}</script>\n" for script in self.script_literals
        )

        return f"<!DOCTYPE html>\n<head>\n{head}</head>\n<body>\n{content}{scripts}</body>"

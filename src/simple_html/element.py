# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import Any, Self

import abc
import enum
import logging

_LOGGER = logging.getLogger("simple_html").getChild("element")

INDENT = "  "


class Tag(enum.StrEnum):
    DIV = "div"
    PARAGRAPH = "p"
    HEADER1 = "h1"
    HEADER2 = "h2"
    HEADER3 = "h3"
    HEADER4 = "h4"
    UNORDERED_LIST = "ul"
    LIST_ELEMENT = "li"
    LINK = "a"
    NAV = "nav"
    IMAGE = "img"
    CODE = "code"

    @classmethod
    def _missing_(cls, value: object) -> Tag | None:
        # Accept kind names ("Header2", "unordered_list") as well as output names.
        name = str(value).replace("_", "").lower()
        for member in cls:
            if member.name.replace("_", "").lower() == name:
                return member
        return None


HEADERS: dict[int, Tag] = {
    1: Tag.HEADER1,
    2: Tag.HEADER2,
    3: Tag.HEADER3,
    4: Tag.HEADER4,
}


class Renderable(abc.ABC):
    @abc.abstractmethod
    def render(self, depth: int = 0) -> str:
        pass

    @property
    def html(self) -> str:
        return self.render(0)

    def __str__(self) -> str:
        return self.html


class TextNode(Renderable, str):
    __slots__ = ()

    def render(self, depth: int = 0) -> str:
        return f"{INDENT * depth}{self}"

    def __str__(self) -> str:
        return str.__str__(self)


def as_renderable(child: Renderable | Any) -> Renderable:
    return child if isinstance(child, Renderable) else TextNode(child)


class ChildBuilder(abc.ABC):
    """
    Convenience operations shared by anything that owns an ordered list of children.

    Each ``add_*`` method mutates in place and returns nothing; the matching
    ``with_*`` method calls it and returns the receiver for chaining.
    """

    @abc.abstractmethod
    def add_child(self, child: Renderable | Any) -> None:
        pass

    def with_child(self, child: Renderable | Any) -> Self:
        self.add_child(child)
        return self

    def add_header(self, level: int, text: Any) -> None:
        tag = None
        if isinstance(level, int) and not isinstance(level, bool):
            tag = HEADERS.get(level)

        if tag is None:
            _LOGGER.debug("Ignoring header with unsupported level %r", level)
            return

        self.add_child(Node(tag).with_child(str(text)))

    def with_header(self, level: int, text: Any) -> Self:
        self.add_header(level, text)
        return self

    def add_paragraph(self, text: Any) -> None:
        self.add_child(Node(Tag.PARAGRAPH).with_child(str(text)))

    def with_paragraph(self, text: Any) -> Self:
        self.add_paragraph(text)
        return self

    def add_link(self, href: Any) -> None:
        self.add_child(Node(Tag.LINK).with_attribute("href", href))

    def with_link(self, href: Any) -> Self:
        self.add_link(href)
        return self

    def add_image(self, src: Any) -> None:
        self.add_child(Node(Tag.IMAGE).with_attribute("src", src))

    def with_image(self, src: Any) -> Self:
        self.add_image(src)
        return self


class Node(ChildBuilder, Renderable):
    tag: Tag
    attributes: list[tuple[str, str]]
    children: list[Renderable]

    def __init__(self, tag: Tag) -> None:
        self.tag = tag
        self.attributes = []
        self.children = []

    def add_attribute(self, name: Any, value: Any) -> None:
        self.attributes.append((str(name), str(value)))

    def with_attribute(self, name: Any, value: Any) -> Self:
        self.add_attribute(name, value)
        return self

    def add_child(self, child: Renderable | Any) -> None:
        self.children.append(as_renderable(child))

    def render(self, depth: int = 0) -> str:
        tag = self.tag.value
        indent = INDENT * depth
        content = "".join(f"{child.render(depth + 1)}\n" for child in self.children)

        return f"{indent}<{tag}{self._render_attributes(depth)}>\n{content}{indent}</{tag}>"

    def _render_attributes(self, depth: int) -> str:
        if not self.attributes:
            return ""

        if len(self.attributes) == 1:
            name, value = self.attributes[0]
            return f' {name}="{value}"'

        # Fragments after the first follow on with no separator.
        prefix = INDENT * (depth + 1)
        return "\n" + "".join(f'{prefix}{name}="{value}"' for name, value in self.attributes)

    def __repr__(self) -> str:
        return (
            f"<Node {self.tag.value} "
            f"attributes={len(self.attributes)} children={len(self.children)}>"
        )

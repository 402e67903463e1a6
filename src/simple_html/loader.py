# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Mapping
from typing import Any

import json
import logging
import pathlib

from .element import ChildBuilder, Node, Renderable, Tag, TextNode
from .page import Document

_LOGGER = logging.getLogger("simple_html").getChild("loader")

_SHORTHANDS = ("header", "paragraph", "link", "image")


class PageDefinitionError(ValueError):
    path: str

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def load_document_file(file: pathlib.Path | str) -> Document:
    file = pathlib.Path(file)
    _LOGGER.info("Loading page definition from %s", file)

    with file.open("r", encoding="utf-8") as in_stream:
        try:
            data = json.load(in_stream)
        except json.JSONDecodeError as ex:
            raise PageDefinitionError("$", f"invalid JSON ({ex})") from ex
        except UnicodeDecodeError as ex:
            raise PageDefinitionError("$", f"not valid UTF-8 ({ex})") from ex

    return load_document(data)


def load_document(data: Any) -> Document:
    """
    Build a document from a decoded page definition.

    The definition is a mapping with the optional keys ``title``, ``meta``,
    ``links``, ``script_links``, ``scripts`` and ``body``. Every body entry is
    either a string, a node mapping (``tag``, ``attributes``, ``children``)
    or one of the ``header``/``paragraph``/``link``/``image`` shorthands.
    """
    if not isinstance(data, Mapping):
        raise PageDefinitionError("$", "page definition must be an object")

    unknown = set(data) - {"title", "meta", "links", "script_links", "scripts", "body"}
    if unknown:
        raise PageDefinitionError("$", f"unknown keys {sorted(unknown)}")

    document = Document()

    if "title" in data:
        document.set_title(_scalar(data["title"], "title"))

    for index, meta in enumerate(_list(data.get("meta", []), "meta")):
        document.add_meta(_pairs(meta, f"meta[{index}]"))

    for index, link in enumerate(_list(data.get("links", []), "links")):
        path = f"links[{index}]"
        if not isinstance(link, Mapping) or set(link) != {"rel", "href"}:
            raise PageDefinitionError(path, "expected an object with 'rel' and 'href'")
        document.add_head_link(_scalar(link["rel"], path), _scalar(link["href"], path))

    for index, link in enumerate(_list(data.get("script_links", []), "script_links")):
        document.add_script_link(_scalar(link, f"script_links[{index}]"))

    for index, script in enumerate(_list(data.get("scripts", []), "scripts")):
        document.add_script(_scalar(script, f"scripts[{index}]"))

    _add_children(document, data.get("body", []), "body")

    _LOGGER.debug(
        "Loaded page definition",
        extra={"title": document.title, "body": len(document.body)},
    )

    return document


def _add_children(parent: ChildBuilder, children: Any, path: str) -> None:
    for index, child in enumerate(_list(children, path)):
        _add_child(parent, child, f"{path}[{index}]")


def _add_child(parent: ChildBuilder, child: Any, path: str) -> None:
    if isinstance(child, str):
        parent.add_child(TextNode(child))
        return

    if not isinstance(child, Mapping):
        raise PageDefinitionError(path, f"expected a string or object, got {type(child).__name__}")

    shorthand = [key for key in _SHORTHANDS if key in child]
    if shorthand:
        _add_shorthand(parent, shorthand[0], child, path)
        return

    parent.add_child(_node(child, path))


def _add_shorthand(parent: ChildBuilder, kind: str, child: Mapping[str, Any], path: str) -> None:
    expected = {"header", "text"} if kind == "header" else {kind}
    if set(child) != expected:
        raise PageDefinitionError(path, f"'{kind}' entries take exactly the keys {sorted(expected)}")

    if kind == "header":
        level = child["header"]
        if not isinstance(level, int) or isinstance(level, bool):
            raise PageDefinitionError(path, "header level must be an integer")
        parent.add_header(level, _scalar(child["text"], path))
    elif kind == "paragraph":
        parent.add_paragraph(_scalar(child["paragraph"], path))
    elif kind == "link":
        parent.add_link(_scalar(child["link"], path))
    else:
        parent.add_image(_scalar(child["image"], path))


def _node(child: Mapping[str, Any], path: str) -> Renderable:
    unknown = set(child) - {"tag", "attributes", "children"}
    if unknown:
        raise PageDefinitionError(path, f"unknown keys {sorted(unknown)}")

    if "tag" not in child:
        raise PageDefinitionError(path, "node is missing 'tag'")

    name = _scalar(child["tag"], f"{path}.tag")
    try:
        tag = Tag(name)
    except ValueError as ex:
        raise PageDefinitionError(f"{path}.tag", f"unknown tag {name!r}") from ex

    node = Node(tag)

    for name, value in _pairs(child.get("attributes", []), f"{path}.attributes"):
        node.add_attribute(name, value)

    _add_children(node, child.get("children", []), f"{path}.children")

    return node


def _list(value: Any, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise PageDefinitionError(path, "expected a list")

    return value


def _scalar(value: Any, path: str) -> str:
    if isinstance(value, bool) or not isinstance(value, str | int | float):
        raise PageDefinitionError(path, f"expected a string, got {type(value).__name__}")

    return str(value)


def _pairs(value: Any, path: str) -> list[tuple[str, str]]:
    if isinstance(value, Mapping):
        return [(_scalar(k, path), _scalar(v, f"{path}.{k}")) for k, v in value.items()]

    pairs = []
    for index, pair in enumerate(_list(value, path)):
        if not isinstance(pair, list) or len(pair) != 2:  # noqa: PLR2004 name and value
            raise PageDefinitionError(f"{path}[{index}]", "expected a [name, value] pair")
        pairs.append((_scalar(pair[0], f"{path}[{index}]"), _scalar(pair[1], f"{path}[{index}]")))

    return pairs

# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""
Build HTML pages as a tree of nodes and render them with stable indentation.

    >>> from simple_html import Node, Tag
    >>> print(Node(Tag.HEADER1).with_child("Header Text").render(0))
    <h1>
      Header Text
    </h1>
"""

from __future__ import annotations as _future_annotations

from .element import Node, Renderable, Tag, TextNode
from .loader import PageDefinitionError, load_document, load_document_file
from .page import Document

__all__ = [
    "Document",
    "Node",
    "PageDefinitionError",
    "Renderable",
    "Tag",
    "TextNode",
    "load_document",
    "load_document_file",
]

"""Parse stored JATS XML into the document tree."""

from __future__ import annotations

from bibmarkup.html_utils import TagVocabulary, convert_tree
from bibmarkup.nodes import (
    Bold,
    Code,
    Document,
    Italic,
    List,
    ListItem,
    Paragraph,
    SmallCaps,
    Subscript,
    Superscript,
)

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for JATS parsing (pip install beautifulsoup4)."
    ) from exc


JATS_VOCABULARY = TagVocabulary(
    elements={
        "p": Paragraph,
        "bold": Bold,
        "italic": Italic,
        "monospace": Code,
        "sup": Superscript,
        "sub": Subscript,
        "sc": SmallCaps,
        "list": List,
        "list-item": ListItem,
    },
    transparent=frozenset({"article", "body", "sec", "div"}),
    link_tag="ext-link",
    link_attrs=("xlink:href", "href"),
)


def parse_jats(jats: str) -> Document:
    """Parse a JATS fragment.

    The lenient ``html.parser`` builder is used so no HTML implied-element
    rules (auto-inserted ``<p>``, ``<body>``) leak into the tree.
    """
    soup = BeautifulSoup(jats, "html.parser")
    return convert_tree(soup, JATS_VOCABULARY)

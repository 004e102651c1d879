"""Parse user-authored HTML into the document tree."""

from __future__ import annotations

import re
from itertools import chain

from bibmarkup.config import BIBMARKUP_SMALL_CAPS_TAG
from bibmarkup.html_utils import TagVocabulary, convert_nodes, convert_tree
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
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


HTML_VOCABULARY = TagVocabulary(
    elements={
        "p": Paragraph,
        "strong": Bold,
        "b": Bold,
        "em": Italic,
        "i": Italic,
        "code": Code,
        "sup": Superscript,
        "sub": Subscript,
        BIBMARKUP_SMALL_CAPS_TAG: SmallCaps,
        "ul": List,
        "ol": List,
        "li": ListItem,
    },
    transparent=frozenset({"html", "body", "div"}),
    link_tag="a",
    link_attrs=("href",),
)


# Inputs carrying their own document skeleton are parsed as is.
_DOCUMENT_RE = re.compile(r"<\s*(?:!doctype|html|head|body)\b", re.IGNORECASE)
_FRAGMENT_WRAPPER = "div"


def parse_html(html: str) -> Document:
    """Parse an HTML fragment or document.

    Unknown elements become transparent ``Document`` wrappers around their
    children; malformed markup is repaired by lxml rather than rejected.
    Fragments are parsed inside a wrapper element because lxml trims
    leading whitespace placed directly under ``<body>``.
    """
    if _DOCUMENT_RE.search(html):
        return convert_tree(BeautifulSoup(html, "lxml"), HTML_VOCABULARY)

    soup = BeautifulSoup(f"<{_FRAGMENT_WRAPPER}>{html}</{_FRAGMENT_WRAPPER}>", "lxml")
    wrapper = soup.find(_FRAGMENT_WRAPPER)
    if wrapper is None:
        return convert_tree(soup, HTML_VOCABULARY)
    # A stray closing tag in the fragment can end the wrapper early.
    elements = chain(wrapper.children, wrapper.next_siblings)
    return Document(children=convert_nodes(elements, HTML_VOCABULARY, depth=0))

"""Shared DOM helpers for the HTML and JATS parsers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from bibmarkup.config import BIBMARKUP_MAX_DEPTH
from bibmarkup.nodes import STRUCTURAL_TYPES, Document, Link, Node, Text, all_inline

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PageElement, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


@dataclass(frozen=True)
class TagVocabulary:
    """Mapping from element names onto tree variants for one markup dialect.

    Attributes:
        elements: Element name to the variant it becomes.
        transparent: Element names that become a ``Document`` of their children.
        link_tag: Element name that becomes a ``Link``.
        link_attrs: Attributes tried, in order, for the link URL.
    """

    elements: dict[str, type]
    transparent: frozenset[str] = field(default_factory=frozenset)
    link_tag: str = "a"
    link_attrs: tuple[str, ...] = ("href",)

    def build(self, tag: Tag, children: list[Node]) -> Node:
        name = (tag.name or "").lower()
        if name in self.transparent:
            return Document(children=children)
        if name == self.link_tag:
            return Link(url=self._link_url(tag), children=children)
        variant = self.elements.get(name)
        if variant is not None:
            return variant(children=children)
        if not children:
            return Text(value="")
        return Document(children=children)

    def _link_url(self, tag: Tag) -> str:
        for attr in self.link_attrs:
            value = tag.get(attr)
            if value:
                return str(value)
        return ""


def find_document_root(soup: BeautifulSoup) -> Tag | BeautifulSoup:
    """Return the ``<body>`` element, or the soup itself as a pseudo-body."""
    body = soup.find("body")
    if body is not None:
        return body
    return soup


def convert_tree(soup: BeautifulSoup, vocabulary: TagVocabulary) -> Document:
    """Convert a parsed soup into a ``Document`` rooted at its body."""
    root = find_document_root(soup)
    if isinstance(root, BeautifulSoup):
        return Document(children=convert_children(root, vocabulary, depth=0))
    node = convert_element(root, vocabulary, depth=0)
    if isinstance(node, Document):
        return node
    return Document(children=[node])


def convert_element(tag: Tag, vocabulary: TagVocabulary, *, depth: int) -> Node:
    if depth >= BIBMARKUP_MAX_DEPTH:
        return Text(value=tag.get_text())
    return vocabulary.build(tag, convert_children(tag, vocabulary, depth=depth))


def convert_children(tag: Tag, vocabulary: TagVocabulary, *, depth: int) -> list[Node]:
    return convert_nodes(tag.children, vocabulary, depth=depth)


def convert_nodes(elements: Iterable[PageElement], vocabulary: TagVocabulary, *, depth: int) -> list[Node]:
    """Convert sibling DOM nodes, dropping layout whitespace around blocks."""
    children: list[Node] = []
    for child in elements:
        if isinstance(child, Tag):
            children.append(convert_element(child, vocabulary, depth=depth + 1))
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            children.append(Text(value=str(child)))
    return drop_layout_whitespace(children)


def drop_layout_whitespace(children: list[Node]) -> list[Node]:
    """Remove whitespace-only text that sits next to a block-level sibling."""
    kept: list[Node] = []
    for index, child in enumerate(children):
        if isinstance(child, Text) and not child.value.strip():
            previous = children[index - 1] if index else None
            following = children[index + 1] if index + 1 < len(children) else None
            if _is_block(previous) or _is_block(following):
                continue
        kept.append(child)
    return kept


def _is_block(node: Node | None) -> bool:
    if isinstance(node, STRUCTURAL_TYPES):
        return True
    return isinstance(node, Document) and not all_inline(node.children)

"""Content-class legality checks for document trees and raw submissions."""

from __future__ import annotations

import re
from typing import Callable, Iterator

from bibmarkup.exceptions import TitleListItemError, TitleMultipleTopLevelElementsError
from bibmarkup.formats import ConversionLimit
from bibmarkup.nodes import NODE_TYPES, Document, List, ListItem, Node, Text, all_inline


def validate(node: Node, limit: ConversionLimit) -> None:
    """Check ``node`` against the legality profile for ``limit``.

    The tree is walked in pre-order and the first violation is raised.

    Raises:
        TitleMultipleTopLevelElementsError: A title document has several
            top-level children that are not all inline.
        TitleListItemError: A title contains a list or list item.
    """
    limit = ConversionLimit(limit)
    check = _check_title if limit.is_title else _check_abstract
    for current in _preorder(node):
        check(current, limit)


def _preorder(node: Node) -> Iterator[Node]:
    stack = [node]
    while stack:
        current = stack.pop()
        if not isinstance(current, NODE_TYPES):
            raise TypeError(f"Not a document tree node: {current!r}")
        yield current
        if not isinstance(current, Text):
            stack.extend(reversed(current.children))


def _check_title(node: Node, limit: ConversionLimit) -> None:
    if isinstance(node, (List, ListItem)):
        raise TitleListItemError(limit)
    if isinstance(node, Document) and len(node.children) > 1 and not all_inline(node.children):
        raise TitleMultipleTopLevelElementsError(limit)


def _check_abstract(node: Node, limit: ConversionLimit) -> None:
    # Paragraphs, lists and every inline variant are legal in abstracts and biographies.
    return None


# ---------------------------------------------------------------------------
# Advisory string scan
# ---------------------------------------------------------------------------

_TITLE_TAG_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<ul[^>]*>", re.IGNORECASE), "unordered list"),
    (re.compile(r"<ol[^>]*>", re.IGNORECASE), "ordered list"),
    (re.compile(r"<li[^>]*>", re.IGNORECASE), "list item"),
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "line break"),
    (re.compile(r"<break\s*/?>", re.IGNORECASE), "break element"),
)
_MARKDOWN_LIST_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s", re.MULTILINE)
_NESTED_LIST_RE = re.compile(r"<li[^>]*>.*<[uo]l[^>]*>", re.IGNORECASE | re.DOTALL)
_TABLE_RE = re.compile(r"<(?:table|tr|td|th)\b", re.IGNORECASE)
_IMAGE_RE = re.compile(r"<img\b|!\[", re.IGNORECASE)


def scan_title(content: str) -> list[str]:
    """Describe list and line-break markup that a title cannot hold."""
    found = [description for pattern, description in _TITLE_TAG_PATTERNS if pattern.search(content)]
    blocks = [block for block in re.split(r"\n\s*\n", content) if block.strip()]
    if len(blocks) > 1:
        found.append("multiple paragraphs")
    if _MARKDOWN_LIST_RE.search(content):
        found.append("markdown list")
    return found


def scan_abstract(content: str) -> list[str]:
    """Describe tables, images and nested lists, which abstracts cannot hold."""
    found: list[str] = []
    if _NESTED_LIST_RE.search(content):
        found.append("nested lists")
    if _TABLE_RE.search(content):
        found.append("tables")
    if _IMAGE_RE.search(content):
        found.append("images")
    return found


_SCANNERS: dict[ConversionLimit, Callable[[str], list[str]]] = {
    ConversionLimit.TITLE: scan_title,
    ConversionLimit.ABSTRACT: scan_abstract,
    ConversionLimit.BIOGRAPHY: scan_abstract,
}


def scan_content(content: str, limit: ConversionLimit) -> list[str]:
    """Cheap pre-parse scan returning human-readable violations.

    Advisory only: an empty result does not mean ``validate`` will pass.
    """
    return _SCANNERS[ConversionLimit(limit)](content)

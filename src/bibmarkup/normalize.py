"""Wrap loose top-level inline content in an implicit paragraph."""

from __future__ import annotations

from bibmarkup.formats import MarkupFormat
from bibmarkup.nodes import FORMATTING_TYPES, Document, Link, Node, Paragraph, Text, all_inline

# A lone top-level child of these variants is wrapped in a paragraph.
# JATS is mostly produced by our own renderer, which writes bare inline runs
# at the top level, so it wraps formatting variants too.
_SINGLE_CHILD_WRAP: dict[MarkupFormat, tuple[type, ...]] = {
    MarkupFormat.MARKDOWN: (Text, Link),
    MarkupFormat.HTML: (Text, Link),
    MarkupFormat.JATS_XML: (Text, Link) + FORMATTING_TYPES,
}


def normalize(root: Node, source_format: MarkupFormat) -> Node:
    """Return a new root whose inline content sits inside a ``Paragraph``.

    Consumes ``root``: its children are moved into the returned tree.
    Plain-text trees are returned unchanged.
    """
    if source_format is MarkupFormat.PLAIN_TEXT or not isinstance(root, Document):
        return root

    children = list(root.children)
    if len(children) > 1 and all_inline(children):
        return Document(children=[Paragraph(children=children)])
    if len(children) == 1 and isinstance(children[0], _SINGLE_CHILD_WRAP[source_format]):
        return Document(children=[Paragraph(children=children)])
    return Document(children=children)

"""Remove paragraph and list wrapping while keeping every leaf."""

from __future__ import annotations

from bibmarkup.nodes import Document, List, ListItem, Node, Paragraph, Text, all_inline, rebuild


def strip_structure(node: Node, *, keep_inline_paragraphs: bool) -> Node:
    """Return a new tree without structural wrappers.

    ``List`` and ``ListItem`` are always unwrapped and nested ``Document``
    wrappers are spliced into their parent. A ``Paragraph`` is kept when
    ``keep_inline_paragraphs`` is set and it holds only inline children;
    otherwise it is unwrapped, collapsing to its only child if one remains.
    Inline variants and links are rebuilt around their stripped children.
    """
    if isinstance(node, Text):
        return Text(value=node.value)
    if isinstance(node, Paragraph):
        if keep_inline_paragraphs and all_inline(node.children):
            return Paragraph(
                children=[strip_structure(child, keep_inline_paragraphs=True) for child in node.children]
            )
        flattened = _flatten(node.children, keep_inline_paragraphs)
        if len(flattened) == 1:
            return flattened[0]
        return Document(children=flattened)
    if isinstance(node, (Document, List, ListItem)):
        return Document(children=_flatten(node.children, keep_inline_paragraphs))
    return rebuild(
        node, [strip_structure(child, keep_inline_paragraphs=keep_inline_paragraphs) for child in node.children]
    )


def _flatten(children: list[Node], keep_inline_paragraphs: bool) -> list[Node]:
    flattened: list[Node] = []
    for child in children:
        stripped = strip_structure(child, keep_inline_paragraphs=keep_inline_paragraphs)
        if isinstance(stripped, Document):
            flattened.extend(stripped.children)
        else:
            flattened.append(stripped)
    return flattened


def strip_for_title(node: Node) -> Node:
    """Title-preserving strip: inline-only paragraphs survive."""
    return strip_structure(node, keep_inline_paragraphs=True)


def strip_all(node: Node) -> Node:
    """Full strip used for JATS to plain-text-like conversion."""
    return strip_structure(node, keep_inline_paragraphs=False)

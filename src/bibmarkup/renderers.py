"""Render the document tree to JATS, HTML, Markdown and plain text."""

from __future__ import annotations

import html
from typing import Callable

from bibmarkup.config import BIBMARKUP_LIST_BULLET, BIBMARKUP_SMALL_CAPS_TAG
from bibmarkup.formats import MarkupFormat
from bibmarkup.nodes import (
    Bold,
    Code,
    Document,
    Italic,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    SmallCaps,
    Subscript,
    Superscript,
    Text,
)

JATS_TAGS: dict[type, str] = {
    Paragraph: "p",
    Bold: "bold",
    Italic: "italic",
    Code: "monospace",
    Superscript: "sup",
    Subscript: "sub",
    SmallCaps: "sc",
    List: "list",
    ListItem: "list-item",
}

HTML_TAGS: dict[type, str] = {
    Paragraph: "p",
    Bold: "strong",
    Italic: "em",
    Code: "code",
    Superscript: "sup",
    Subscript: "sub",
    SmallCaps: BIBMARKUP_SMALL_CAPS_TAG,
    List: "ul",
    ListItem: "li",
}

# Markdown has no syntax for these, so inline HTML is emitted.
MARKDOWN_DELIMITERS: dict[type, tuple[str, str]] = {
    Bold: ("**", "**"),
    Italic: ("*", "*"),
    Code: ("`", "`"),
    Superscript: ("<sup>", "</sup>"),
    Subscript: ("<sub>", "</sub>"),
    SmallCaps: ("<sc>", "</sc>"),
}

_BLOCK_TYPES = (Document, Paragraph, List, ListItem)


def render_jats(node: Node) -> str:
    """Render JATS XML, the canonical storage form."""
    if isinstance(node, Text):
        return html.escape(node.value, quote=False)
    inner = "".join(render_jats(child) for child in node.children)
    if isinstance(node, Document):
        return inner
    if isinstance(node, Link):
        return f'<ext-link xlink:href="{html.escape(node.url)}">{inner}</ext-link>'
    tag = JATS_TAGS[type(node)]
    return f"<{tag}>{inner}</{tag}>"


def render_plain_text_to_jats(node: Node) -> str:
    """Render a plain-text tree to JATS; a bare root text gets a ``<p>``."""
    if isinstance(node, Text):
        return f"<p>{html.escape(node.value, quote=False)}</p>"
    return render_jats(node)


def render_html(node: Node) -> str:
    if isinstance(node, Text):
        return html.escape(node.value, quote=False)
    inner = "".join(render_html(child) for child in node.children)
    if isinstance(node, Document):
        return inner
    if isinstance(node, Link):
        return f'<a href="{html.escape(node.url)}">{inner}</a>'
    tag = HTML_TAGS[type(node)]
    return f"<{tag}>{inner}</{tag}>"


def render_markdown(node: Node) -> str:
    if isinstance(node, Text):
        return node.value
    if isinstance(node, Document):
        return _join_blocks([render_markdown(child) for child in node.children], node.children)
    inner = "".join(render_markdown(child) for child in node.children)
    if isinstance(node, (Paragraph, List)):
        return inner
    if isinstance(node, ListItem):
        return f"- {inner}\n"
    if isinstance(node, Link):
        return f"[{inner}]({node.url})"
    opening, closing = MARKDOWN_DELIMITERS[type(node)]
    return f"{opening}{inner}{closing}"


def render_plain_text(node: Node) -> str:
    """Render text only; formatting is dropped and links keep their URL."""
    if isinstance(node, Text):
        return node.value
    if isinstance(node, Document):
        return _join_blocks([render_plain_text(child) for child in node.children], node.children)
    inner = "".join(render_plain_text(child) for child in node.children)
    if isinstance(node, ListItem):
        return f"{BIBMARKUP_LIST_BULLET}{inner}\n"
    if isinstance(node, Link):
        return f"{inner} ({node.url})"
    return inner


def _join_blocks(parts: list[str], nodes: list[Node]) -> str:
    """Concatenate siblings, separating block-level ones with a blank line."""
    result = ""
    for index, (part, node) in enumerate(zip(parts, nodes)):
        if index and (isinstance(node, _BLOCK_TYPES) or isinstance(nodes[index - 1], _BLOCK_TYPES)):
            result = result.rstrip("\n") + "\n\n"
        result += part
    return result


RENDERERS: dict[MarkupFormat, Callable[[Node], str]] = {
    MarkupFormat.JATS_XML: render_jats,
    MarkupFormat.HTML: render_html,
    MarkupFormat.MARKDOWN: render_markdown,
    MarkupFormat.PLAIN_TEXT: render_plain_text,
}

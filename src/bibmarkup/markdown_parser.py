"""Parse Markdown into the document tree by walking the markdown-it token stream."""

from __future__ import annotations

import re
from dataclasses import dataclass

from markdown_it import MarkdownIt
from markdown_it.token import Token

from bibmarkup.config import BIBMARKUP_SMALL_CAPS_TAG
from bibmarkup.html_parser import parse_html
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

_OPENERS: dict[str, type] = {
    "paragraph_open": Paragraph,
    "strong_open": Bold,
    "em_open": Italic,
    "bullet_list_open": List,
    "ordered_list_open": List,
    "list_item_open": ListItem,
}

# Inline HTML the Markdown renderer emits for variants Markdown has no syntax for.
_INLINE_HTML: dict[str, type] = {
    "sup": Superscript,
    "sub": Subscript,
    "sc": SmallCaps,
    BIBMARKUP_SMALL_CAPS_TAG: SmallCaps,
}
_INLINE_HTML_RE = re.compile(r"^<(/?)([a-zA-Z][\w-]*)\s*>$")


@dataclass
class _Open:
    node: Node
    closer: str


def _md() -> MarkdownIt:
    # commonmark preset keeps raw HTML enabled, needed for <sup>/<sub>/<sc>.
    return MarkdownIt("commonmark")


def parse_markdown(markdown: str) -> Document:
    """Parse Markdown into a ``Document``.

    Tokens are folded onto an explicit stack of open nodes: an opening
    token pushes, its matching close pops the node and appends it to the
    new top. Closers with no open counterpart are ignored and nodes left
    open at the end are closed implicitly.
    """
    root = Document()
    stack: list[_Open] = [_Open(root, "")]
    for token in _md().parse(markdown):
        if token.type == "inline":
            for child in token.children or []:
                _handle_token(child, stack)
        else:
            _handle_token(token, stack)
    while len(stack) > 1:
        _close_top(stack)
    return root


def _handle_token(token: Token, stack: list[_Open]) -> None:
    if token.type in ("paragraph_open", "paragraph_close") and token.hidden:
        # Tight list items carry no paragraph of their own.
        return
    if token.type == "html_inline":
        _handle_inline_html(token, stack)
        return
    if token.nesting == 1:
        _open(token, stack)
        return
    if token.nesting == -1:
        _close(token.type, stack)
        return
    _append(stack, *_leaf_nodes(token))


def _open(token: Token, stack: list[_Open]) -> None:
    closer = token.type[: -len("_open")] + "_close" if token.type.endswith("_open") else token.type
    if token.type == "link_open":
        node: Node = Link(url=str(token.attrGet("href") or ""))
    else:
        variant = _OPENERS.get(token.type, Document)
        node = variant()
    stack.append(_Open(node, closer))


def _close(closer: str, stack: list[_Open]) -> None:
    if not any(entry.closer == closer for entry in stack[1:]):
        return
    while True:
        entry = _close_top(stack)
        if entry.closer == closer:
            return


def _close_top(stack: list[_Open]) -> _Open:
    entry = stack.pop()
    stack[-1].node.children.append(entry.node)
    return entry


def _append(stack: list[_Open], *nodes: Node) -> None:
    stack[-1].node.children.extend(nodes)


def _leaf_nodes(token: Token) -> list[Node]:
    if token.type == "text":
        return [Text(value=token.content)]
    if token.type == "code_inline":
        return [Code(children=[Text(value=token.content)])]
    if token.type in ("softbreak", "hardbreak"):
        return [Text(value="\n")]
    if token.type == "image":
        return [Text(value=token.content)] if token.content else []
    if token.type in ("fence", "code_block"):
        return [Code(children=[Text(value=token.content.rstrip("\n"))])]
    if token.type == "html_block":
        return list(parse_html(token.content).children)
    return []


def _handle_inline_html(token: Token, stack: list[_Open]) -> None:
    match = _INLINE_HTML_RE.match(token.content.strip())
    if not match:
        return
    closing, name = match.group(1), match.group(2).lower()
    variant = _INLINE_HTML.get(name)
    if variant is None:
        return
    closer = f"html:{name}"
    if closing:
        _close(closer, stack)
    else:
        stack.append(_Open(variant(), closer))

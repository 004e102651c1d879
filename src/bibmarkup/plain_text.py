"""Parse plain text, recognising bare URLs as links."""

from __future__ import annotations

import re

from bibmarkup.nodes import Document, Link, Node, Text

_URL_RE = re.compile(r"https?://\S+")


def parse_plain_text(text: str) -> Node:
    """Split trimmed text into alternating ``Text`` and ``Link`` nodes.

    A single segment is returned as is rather than wrapped in a ``Document``.
    """
    text = text.strip()
    nodes: list[Node] = []
    position = 0
    for match in _URL_RE.finditer(text):
        if match.start() > position:
            nodes.append(Text(value=text[position : match.start()]))
        url = match.group(0)
        nodes.append(Link(url=url, children=[Text(value=url)]))
        position = match.end()
    if position < len(text):
        nodes.append(Text(value=text[position:]))
    if not nodes:
        nodes.append(Text(value=text))
    if len(nodes) == 1:
        return nodes[0]
    return Document(children=nodes)

"""Document tree shared by every markup parser and renderer."""

from __future__ import annotations

from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class Document(BaseModel):
    """Tree root, also used as a transparent wrapper for unrecognised markup."""

    type: Literal["document"] = "document"
    children: list[Node] = Field(default_factory=list)


class Paragraph(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    children: list[Node] = Field(default_factory=list)


class Bold(BaseModel):
    type: Literal["bold"] = "bold"
    children: list[Node] = Field(default_factory=list)


class Italic(BaseModel):
    type: Literal["italic"] = "italic"
    children: list[Node] = Field(default_factory=list)


class Code(BaseModel):
    type: Literal["code"] = "code"
    children: list[Node] = Field(default_factory=list)


class Superscript(BaseModel):
    type: Literal["superscript"] = "superscript"
    children: list[Node] = Field(default_factory=list)


class Subscript(BaseModel):
    type: Literal["subscript"] = "subscript"
    children: list[Node] = Field(default_factory=list)


class SmallCaps(BaseModel):
    type: Literal["small_caps"] = "small_caps"
    children: list[Node] = Field(default_factory=list)


class List(BaseModel):
    type: Literal["list"] = "list"
    children: list[Node] = Field(default_factory=list)


class ListItem(BaseModel):
    type: Literal["list_item"] = "list_item"
    children: list[Node] = Field(default_factory=list)


class Link(BaseModel):
    """Hyperlink; ``children`` hold the visible link text."""

    type: Literal["link"] = "link"
    url: str = ""
    children: list[Node] = Field(default_factory=list)


class Text(BaseModel):
    type: Literal["text"] = "text"
    value: str = ""


Node = Annotated[
    Union[
        Document,
        Paragraph,
        Bold,
        Italic,
        Code,
        Superscript,
        Subscript,
        SmallCaps,
        List,
        ListItem,
        Link,
        Text,
    ],
    Field(discriminator="type"),
]

for _model in (Document, Paragraph, Bold, Italic, Code, Superscript, Subscript, SmallCaps, List, ListItem, Link):
    _model.model_rebuild()

NODE_TYPES: tuple[type[BaseModel], ...] = (
    Document,
    Paragraph,
    Bold,
    Italic,
    Code,
    Superscript,
    Subscript,
    SmallCaps,
    List,
    ListItem,
    Link,
    Text,
)

# Formatting variants that only wrap inline content.
FORMATTING_TYPES: tuple[type[BaseModel], ...] = (Bold, Italic, Code, Superscript, Subscript, SmallCaps)
INLINE_TYPES: tuple[type[BaseModel], ...] = FORMATTING_TYPES + (Text, Link)
STRUCTURAL_TYPES: tuple[type[BaseModel], ...] = (Paragraph, List, ListItem)

node_adapter: TypeAdapter = TypeAdapter(Node)


def is_inline(node: BaseModel) -> bool:
    """Return True for inline formatting, links and text."""
    return isinstance(node, INLINE_TYPES)


def all_inline(nodes: list[Node]) -> bool:
    return all(is_inline(node) for node in nodes)


def iter_text(node: BaseModel) -> Iterator[str]:
    """Yield the value of every ``Text`` leaf in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Text):
            yield current.value
            continue
        stack.extend(reversed(current.children))


def rebuild(node: BaseModel, children: list[Node]) -> BaseModel:
    """Return a fresh node of the same variant holding ``children``."""
    if isinstance(node, Link):
        return Link(url=node.url, children=children)
    return type(node)(children=children)

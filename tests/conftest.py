"""Test setup for bibmarkup."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bibmarkup.nodes import (  # noqa: E402
    Bold,
    Code,
    Document,
    Italic,
    Link,
    List,
    ListItem,
    Paragraph,
    SmallCaps,
    Subscript,
    Superscript,
    Text,
)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest."""
    config.addinivalue_line(
        "markers",
        "properties: checks that run over the shared sample tree corpus",
    )


def t(value: str) -> Text:
    return Text(value=value)


SAMPLE_TREES = [
    Document(),
    Document(children=[Paragraph(children=[t("Plain paragraph")])]),
    Document(
        children=[
            Paragraph(
                children=[
                    Bold(children=[t("Bold")]),
                    t(" and "),
                    Italic(children=[t("italic")]),
                    t(" text"),
                ]
            )
        ]
    ),
    Document(
        children=[
            Paragraph(children=[t("Intro with "), Code(children=[t("code")]), t(" & <escapes>")]),
            List(
                children=[
                    ListItem(children=[t("Item 1")]),
                    ListItem(children=[Superscript(children=[t("2")]), Subscript(children=[t("i")])]),
                ]
            ),
            Paragraph(children=[Link(url="https://example.com/?a=1&b=2", children=[t("a link")])]),
        ]
    ),
    Document(children=[SmallCaps(children=[t("Small caps text")])]),
    Document(
        children=[
            t("Visit "),
            Link(url="https://example.com", children=[t("https://example.com")]),
            t(" for more info"),
        ]
    ),
    Document(
        children=[
            Paragraph(children=[t("Para")]),
            List(children=[ListItem(children=[Paragraph(children=[Bold(children=[t("Nested")])])])]),
        ]
    ),
    Document(children=[t(" lead "), Bold(children=[t("b")]), t(" tail")]),
]


@pytest.fixture(params=range(len(SAMPLE_TREES)), ids=lambda index: f"tree{index}")
def sample_tree(request: pytest.FixtureRequest) -> Document:
    """Each sample tree in turn, freshly copied."""
    return SAMPLE_TREES[request.param].model_copy(deep=True)

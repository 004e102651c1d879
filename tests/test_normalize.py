"""Tests for top-level paragraph normalisation."""

from __future__ import annotations

import pytest

from bibmarkup.formats import MarkupFormat
from bibmarkup.nodes import Bold, Document, Link, List, ListItem, Paragraph, SmallCaps, Text
from bibmarkup.normalize import normalize


def t(value: str) -> Text:
    return Text(value=value)


class TestNormalize:
    """Implicit paragraph wrapping per source format."""

    @pytest.mark.parametrize("fmt", [MarkupFormat.MARKDOWN, MarkupFormat.HTML, MarkupFormat.JATS_XML])
    def test_several_inline_children_are_wrapped(self, fmt: MarkupFormat) -> None:
        tree = Document(children=[t("a "), Bold(children=[t("b")]), SmallCaps(children=[t("c")])])

        result = normalize(tree, fmt)

        assert result == Document(
            children=[Paragraph(children=[t("a "), Bold(children=[t("b")]), SmallCaps(children=[t("c")])])]
        )

    @pytest.mark.parametrize("fmt", [MarkupFormat.MARKDOWN, MarkupFormat.HTML, MarkupFormat.JATS_XML])
    @pytest.mark.parametrize("child", [t("lone"), Link(url="https://example.com", children=[t("x")])])
    def test_single_text_or_link_is_wrapped(self, fmt: MarkupFormat, child) -> None:
        result = normalize(Document(children=[child]), fmt)

        assert result == Document(children=[Paragraph(children=[child])])

    def test_single_formatting_child_wrapped_only_for_jats(self) -> None:
        bold = Bold(children=[t("b")])

        assert normalize(Document(children=[bold]), MarkupFormat.JATS_XML) == Document(
            children=[Paragraph(children=[bold])]
        )
        assert normalize(Document(children=[bold]), MarkupFormat.MARKDOWN) == Document(children=[bold])
        assert normalize(Document(children=[bold]), MarkupFormat.HTML) == Document(children=[bold])

    def test_mixed_children_are_left_alone(self) -> None:
        tree = Document(children=[Paragraph(children=[t("p")]), t("tail")])

        assert normalize(tree, MarkupFormat.HTML) == tree

    def test_single_block_child_is_left_alone(self) -> None:
        tree = Document(children=[List(children=[ListItem(children=[t("i")])])])

        assert normalize(tree, MarkupFormat.MARKDOWN) == tree

    def test_empty_document(self) -> None:
        assert normalize(Document(), MarkupFormat.MARKDOWN) == Document()

    def test_plain_text_is_untouched(self) -> None:
        tree = Document(children=[t("a"), t("b")])

        assert normalize(tree, MarkupFormat.PLAIN_TEXT) is tree

    def test_non_document_root_is_untouched(self) -> None:
        node = t("x")

        assert normalize(node, MarkupFormat.HTML) is node

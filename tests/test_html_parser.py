"""Tests for the HTML parser."""

from __future__ import annotations

import pytest

import bibmarkup.html_utils as html_utils
from bibmarkup.html_parser import parse_html
from bibmarkup.nodes import Bold, Document, Italic, Link, List, ListItem, Paragraph, SmallCaps, Text, iter_text


def t(value: str) -> Text:
    return Text(value=value)


class TestParseHtml:
    """Element mapping onto tree variants."""

    def test_empty_input(self) -> None:
        assert parse_html("") == Document()

    def test_inline_elements(self) -> None:
        tree = parse_html("<em>Italic</em> and <strong>Bold</strong>")

        assert tree == Document(
            children=[Italic(children=[t("Italic")]), t(" and "), Bold(children=[t("Bold")])]
        )

    @pytest.mark.parametrize("tag", ["b", "strong"])
    def test_bold_aliases(self, tag: str) -> None:
        assert parse_html(f"<{tag}>x</{tag}>") == Document(children=[Bold(children=[t("x")])])

    def test_list(self) -> None:
        tree = parse_html("<ul><li>One</li><li>Two</li></ul>")

        assert tree == Document(
            children=[List(children=[ListItem(children=[t("One")]), ListItem(children=[t("Two")])])]
        )

    def test_link(self) -> None:
        tree = parse_html('<a href="https://example.com">Link</a>')

        assert tree == Document(children=[Link(url="https://example.com", children=[t("Link")])])

    def test_small_caps_tag(self) -> None:
        tree = parse_html("<text>Small caps text</text>")

        assert tree == Document(children=[SmallCaps(children=[t("Small caps text")])])

    def test_full_document_uses_body(self) -> None:
        tree = parse_html("<html><head><title>x</title></head><body><p>Body</p></body></html>")

        assert tree == Document(children=[Paragraph(children=[t("Body")])])

    def test_div_is_transparent(self) -> None:
        tree = parse_html("<div><p>A</p></div>")

        assert tree == Document(children=[Document(children=[Paragraph(children=[t("A")])])])

    def test_unknown_element_keeps_children(self) -> None:
        tree = parse_html("<p><span>kept</span></p>")

        assert tree == Document(children=[Paragraph(children=[Document(children=[t("kept")])])])

    def test_comments_are_skipped(self) -> None:
        tree = parse_html("<p><!-- note -->Text</p>")

        assert tree == Document(children=[Paragraph(children=[t("Text")])])

    def test_entities_are_decoded(self) -> None:
        tree = parse_html("<p>a &amp; b</p>")

        assert tree == Document(children=[Paragraph(children=[t("a & b")])])


class TestWhitespace:
    """Leading whitespace survives; layout whitespace around blocks does not."""

    def test_leading_whitespace_is_kept(self) -> None:
        tree = parse_html(" lead <strong>b</strong> tail")

        assert tree == Document(children=[t(" lead "), Bold(children=[t("b")]), t(" tail")])

    def test_newlines_around_blocks_are_dropped(self) -> None:
        tree = parse_html("\n<p>A</p>\n<ul>\n<li>One</li>\n</ul>\n")

        assert tree == Document(
            children=[Paragraph(children=[t("A")]), List(children=[ListItem(children=[t("One")])])]
        )

    def test_stray_closing_div_keeps_following_text(self) -> None:
        tree = parse_html("<em>a</em></div>b")

        assert list(iter_text(tree)) == ["a", "b"]


class TestDepthCap:
    """Nesting beyond the configured depth collapses to text."""

    def test_deep_nesting_is_flattened(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(html_utils, "BIBMARKUP_MAX_DEPTH", 2)

        tree = parse_html("<p><strong><em>deep</em></strong></p>")

        assert tree == Document(children=[Paragraph(children=[t("deep")])])

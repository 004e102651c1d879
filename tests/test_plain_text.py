"""Tests for the plain-text parser."""

from __future__ import annotations

from bibmarkup.nodes import Document, Link, Text
from bibmarkup.plain_text import parse_plain_text


class TestParsePlainText:
    """URL detection in plain text."""

    def test_url_in_sentence(self) -> None:
        tree = parse_plain_text("Visit https://example.com for more info")

        assert tree == Document(
            children=[
                Text(value="Visit "),
                Link(url="https://example.com", children=[Text(value="https://example.com")]),
                Text(value=" for more info"),
            ]
        )

    def test_text_without_urls_is_a_single_text(self) -> None:
        assert parse_plain_text("  Just a title  ") == Text(value="Just a title")

    def test_lone_url_is_a_single_link(self) -> None:
        assert parse_plain_text("http://example.org/a") == Link(
            url="http://example.org/a", children=[Text(value="http://example.org/a")]
        )

    def test_empty_input(self) -> None:
        assert parse_plain_text("") == Text(value="")

    def test_markup_is_literal(self) -> None:
        assert parse_plain_text("<b>not bold</b>") == Text(value="<b>not bold</b>")

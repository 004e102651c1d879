"""Markup formats and content classes accepted at the conversion boundary."""

from __future__ import annotations

from enum import Enum


class MarkupFormat(str, Enum):
    """Text formats a title, abstract or biography can be authored or read in."""

    HTML = "HTML"
    MARKDOWN = "MARKDOWN"
    PLAIN_TEXT = "PLAIN_TEXT"
    JATS_XML = "JATS_XML"


class ConversionLimit(str, Enum):
    """Content class selecting the legality profile applied to a tree.

    ``ABSTRACT`` and ``BIOGRAPHY`` allow paragraphs and lists; ``TITLE``
    allows inline formatting only.
    """

    TITLE = "TITLE"
    ABSTRACT = "ABSTRACT"
    BIOGRAPHY = "BIOGRAPHY"

    @property
    def is_title(self) -> bool:
        return self is ConversionLimit.TITLE


DEFAULT_MARKUP_FORMAT = MarkupFormat.JATS_XML

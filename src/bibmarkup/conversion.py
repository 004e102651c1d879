"""Conversion pipeline between authoring formats and canonical JATS."""

from __future__ import annotations

import html
from typing import Callable

from bibmarkup.config import BIBMARKUP_MAX_INPUT_CHARS
from bibmarkup.exceptions import ContentTooLargeError, MissingMarkupFormatError, ValidationError
from bibmarkup.formats import ConversionLimit, MarkupFormat
from bibmarkup.html_parser import parse_html
from bibmarkup.jats_parser import parse_jats
from bibmarkup.markdown_parser import parse_markdown
from bibmarkup.nodes import Node
from bibmarkup.normalize import normalize
from bibmarkup.plain_text import parse_plain_text
from bibmarkup.renderers import RENDERERS, render_jats, render_plain_text_to_jats
from bibmarkup.strip import strip_all, strip_for_title
from bibmarkup.utils.logging_config import get_logger
from bibmarkup.validation import validate

logger = get_logger(__name__)

PARSERS: dict[MarkupFormat, Callable[[str], Node]] = {
    MarkupFormat.MARKDOWN: parse_markdown,
    MarkupFormat.HTML: parse_html,
    MarkupFormat.JATS_XML: parse_jats,
    MarkupFormat.PLAIN_TEXT: parse_plain_text,
}


def parse(source: str, markup_format: MarkupFormat) -> Node:
    """Parse ``source`` and apply the structural normaliser."""
    markup_format = MarkupFormat(markup_format)
    tree = PARSERS[markup_format](source)
    return normalize(tree, markup_format)


def render(tree: Node, markup_format: MarkupFormat) -> str:
    return RENDERERS[MarkupFormat(markup_format)](tree)


def to_canonical(
    source: str,
    markup_format: MarkupFormat | None,
    limit: ConversionLimit,
) -> str:
    """Convert authored text into the JATS string that gets stored.

    The text is parsed, normalised and validated against ``limit``. Titles
    are stored inline, so an accepted title loses its paragraph wrapping
    before rendering.

    Args:
        source: Text as submitted by the user.
        markup_format: Format ``source`` is written in.
        limit: Content class of the field being written.

    Returns:
        Canonical JATS XML.

    Raises:
        MissingMarkupFormatError: If ``markup_format`` is None.
        ContentTooLargeError: If ``source`` exceeds the configured ceiling.
        ValidationError: If the content is not legal for ``limit``.
    """
    if markup_format is None:
        raise MissingMarkupFormatError()
    markup_format = MarkupFormat(markup_format)
    limit = ConversionLimit(limit)
    if len(source) > BIBMARKUP_MAX_INPUT_CHARS:
        raise ContentTooLargeError(len(source), BIBMARKUP_MAX_INPUT_CHARS)

    logger.debug(
        "Converting to canonical JATS",
        extra={"markup_format": markup_format.value, "limit": limit.value, "length": len(source)},
    )
    tree = parse(source, markup_format)
    try:
        validate(tree, limit)
    except ValidationError as exc:
        logger.info(
            "Rejected content",
            extra={"markup_format": markup_format.value, "limit": limit.value, "error": str(exc)},
        )
        raise

    if limit.is_title:
        return render_jats(strip_all(tree))
    if markup_format is MarkupFormat.PLAIN_TEXT:
        return render_plain_text_to_jats(tree)
    return render_jats(tree)


def from_canonical(
    jats: str,
    markup_format: MarkupFormat | None,
    limit: ConversionLimit,
) -> str:
    """Render stored JATS in the format a caller asked for.

    Titles keep inline-only paragraphs, except for plain-text output where
    every structural wrapper is removed. Values stored before markup support
    (no tags at all) are read as plain text once entities are decoded, which
    also covers inline-only titles such as ``Pride &amp; Prejudice``.

    Raises:
        MissingMarkupFormatError: If ``markup_format`` is None.
    """
    if markup_format is None:
        raise MissingMarkupFormatError()
    markup_format = MarkupFormat(markup_format)
    limit = ConversionLimit(limit)

    logger.debug(
        "Converting from canonical JATS",
        extra={"markup_format": markup_format.value, "limit": limit.value, "length": len(jats)},
    )
    legacy_plain = not has_markup(jats)
    # Tagless values may still carry entities written by the JATS renderer.
    tree = parse_plain_text(html.unescape(jats)) if legacy_plain else parse_jats(jats)

    if limit.is_title:
        tree = strip_all(tree) if markup_format is MarkupFormat.PLAIN_TEXT else strip_for_title(tree)
    elif legacy_plain and markup_format is MarkupFormat.JATS_XML:
        return render_plain_text_to_jats(tree)
    return render(tree, markup_format)


def has_markup(content: str) -> bool:
    """Return True when ``content`` contains at least one closing tag."""
    return "<" in content and "</" in content

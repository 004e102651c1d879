"""bibmarkup: convert rich-text catalog fields between Markdown, HTML, plain text and JATS."""

from bibmarkup.conversion import from_canonical, parse, render, to_canonical
from bibmarkup.exceptions import (
    BibMarkupError,
    ContentTooLargeError,
    MissingMarkupFormatError,
    TitleListItemError,
    TitleMultipleTopLevelElementsError,
    ValidationError,
)
from bibmarkup.formats import ConversionLimit, MarkupFormat
from bibmarkup.nodes import Node
from bibmarkup.strip import strip_all, strip_for_title
from bibmarkup.validation import scan_content, validate

__all__ = [
    "BibMarkupError",
    "ContentTooLargeError",
    "ConversionLimit",
    "MarkupFormat",
    "MissingMarkupFormatError",
    "Node",
    "TitleListItemError",
    "TitleMultipleTopLevelElementsError",
    "ValidationError",
    "from_canonical",
    "parse",
    "render",
    "scan_content",
    "strip_all",
    "strip_for_title",
    "to_canonical",
    "validate",
]

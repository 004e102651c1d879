"""Custom exceptions for bibmarkup."""

from __future__ import annotations

from bibmarkup.formats import ConversionLimit


class BibMarkupError(Exception):
    """Base exception for bibmarkup operations."""


class ValidationError(BibMarkupError):
    """Content is not legal for the requested content class."""

    message = "Content is not allowed for this field."

    def __init__(self, limit: ConversionLimit, detail: str | None = None) -> None:
        self.limit = limit
        super().__init__(detail or self.message)


class TitleMultipleTopLevelElementsError(ValidationError):
    """Title contains more than one top-level block."""

    message = "Title contains more than one top-level element."


class TitleListItemError(ValidationError):
    """Title contains a list or list item."""

    message = "Title contains a list item; lists are not allowed in titles."


class MissingMarkupFormatError(BibMarkupError):
    """A conversion was requested without a markup format."""

    def __init__(self) -> None:
        super().__init__("A markup format is required for this operation.")


class ContentTooLargeError(BibMarkupError):
    """Input exceeds the configured size ceiling."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Content is {length} characters long; the maximum is {limit}.")

"""Pydantic models for the markup API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from bibmarkup.formats import DEFAULT_MARKUP_FORMAT, ConversionLimit, MarkupFormat


class CanonicalRequest(BaseModel):
    """Request model for ``POST /api/markup/canonical``.

    Attributes
    ----------
    content : str
        Text as authored by the user.
    markup_format : MarkupFormat | None
        Format of ``content``. Required; a missing value is rejected with 400.
    conversion_limit : ConversionLimit
        Content class of the field being written.

    """

    content: str = Field(..., description="Authored text")
    markup_format: MarkupFormat | None = Field(default=None, description="Format of the authored text")
    conversion_limit: ConversionLimit = Field(..., description="Title, abstract or biography")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate that ``content`` is not blank."""
        if not v.strip():
            err = "content cannot be empty"
            raise ValueError(err)
        return v


class RenderRequest(BaseModel):
    """Request model for ``POST /api/markup/render``.

    Attributes
    ----------
    content : str
        Stored JATS XML.
    markup_format : MarkupFormat
        Target format, JATS XML unless given.
    conversion_limit : ConversionLimit
        Content class of the stored field.

    """

    content: str = Field(..., description="Stored JATS XML")
    markup_format: MarkupFormat = Field(default=DEFAULT_MARKUP_FORMAT, description="Target format")
    conversion_limit: ConversionLimit = Field(..., description="Title, abstract or biography")


class ScanRequest(BaseModel):
    """Request model for ``POST /api/markup/scan``."""

    content: str = Field(..., description="Raw submitted text")
    conversion_limit: ConversionLimit = Field(..., description="Title, abstract or biography")


class MarkupResponse(BaseModel):
    """Converted text together with the format it is written in."""

    content: str = Field(..., description="Converted text")
    markup_format: MarkupFormat = Field(..., description="Format of ``content``")


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    kind : str
        Exception class name, for clients that branch on the failure.

    """

    error: str = Field(..., description="Error message")
    kind: str = Field(..., description="Error kind")

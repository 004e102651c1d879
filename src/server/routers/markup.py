"""Markup conversion endpoints for the API."""

from __future__ import annotations

from fastapi import APIRouter

from bibmarkup.conversion import from_canonical, to_canonical
from bibmarkup.formats import MarkupFormat
from bibmarkup.schemas import ScanReport
from bibmarkup.utils.logging_config import get_logger
from bibmarkup.validation import scan_content
from server.models import CanonicalRequest, ErrorResponse, MarkupResponse, RenderRequest, ScanRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/api/markup", tags=["markup"])

COMMON_MARKUP_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Markup format missing"},
    413: {"model": ErrorResponse, "description": "Content too large"},
    422: {"model": ErrorResponse, "description": "Content not allowed for this field"},
}


@router.post("/canonical", response_model=MarkupResponse, responses=COMMON_MARKUP_RESPONSES)
def api_to_canonical(request: CanonicalRequest) -> MarkupResponse:
    """Convert authored text into canonical JATS.

    **Parameters**

    - **request** (`CanonicalRequest`): authored text, its format and content class

    **Returns**

    - **MarkupResponse**: the JATS string to persist
    """
    content = to_canonical(request.content, request.markup_format, request.conversion_limit)
    return MarkupResponse(content=content, markup_format=MarkupFormat.JATS_XML)


@router.post("/render", response_model=MarkupResponse, responses=COMMON_MARKUP_RESPONSES)
def api_from_canonical(request: RenderRequest) -> MarkupResponse:
    """Render stored JATS in the requested format."""
    content = from_canonical(request.content, request.markup_format, request.conversion_limit)
    return MarkupResponse(content=content, markup_format=request.markup_format)


@router.post("/scan", response_model=ScanReport)
def api_scan(request: ScanRequest) -> ScanReport:
    """Return the advisory list of disallowed constructs found in raw text."""
    report = ScanReport(
        conversion_limit=request.conversion_limit,
        violations=scan_content(request.content, request.conversion_limit),
    )
    if not report.ok:
        logger.info(
            "Scan found disallowed markup",
            extra={"limit": report.conversion_limit.value, "violations": report.violations},
        )
    return report

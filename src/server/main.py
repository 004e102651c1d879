"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bibmarkup.exceptions import (
    BibMarkupError,
    ContentTooLargeError,
    MissingMarkupFormatError,
    ValidationError,
)
from bibmarkup.utils.logging_config import get_logger
from server.models import ErrorResponse
from server.routers import markup_router
from server.server_config import APP_DESCRIPTION, APP_TITLE, APP_VERSION

logger = get_logger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[BibMarkupError], int], ...] = (
    (ValidationError, 422),
    (MissingMarkupFormatError, 400),
    (ContentTooLargeError, 413),
)

app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION, version=APP_VERSION)
app.include_router(markup_router)


@app.exception_handler(BibMarkupError)
async def bibmarkup_error_handler(request: Request, exc: BibMarkupError) -> JSONResponse:
    status_code = 400
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            status_code = code
            break
    logger.warning(
        "Markup request failed",
        extra={"path": request.url.path, "error": str(exc), "status_code": status_code},
    )
    body = ErrorResponse(error=str(exc), kind=type(exc).__name__)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}

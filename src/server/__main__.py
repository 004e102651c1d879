"""Server module entry point for running with python -m server."""

import os

import uvicorn

from bibmarkup.config import BIBMARKUP_LOG_LEVEL
from bibmarkup.utils.logging_config import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info(
        "Starting bibmarkup server",
        extra={
            "host": host,
            "port": port,
            "log_level": BIBMARKUP_LOG_LEVEL,
        },
    )

    # Our handler is already installed; uvicorn only takes the level.
    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=BIBMARKUP_LOG_LEVEL.lower(),
        log_config=None,
    )

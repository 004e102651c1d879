"""Server configuration."""

from __future__ import annotations

APP_TITLE = "bibmarkup"
APP_DESCRIPTION = "Convert catalog titles, abstracts and biographies to and from canonical JATS."
APP_VERSION = "0.1.0"

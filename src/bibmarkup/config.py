"""Local configuration for bibmarkup."""

from __future__ import annotations

import os


DEFAULT_MAX_DEPTH = 64
DEFAULT_MAX_INPUT_CHARS = 100_000
DEFAULT_SMALL_CAPS_TAG = "text"
DEFAULT_LIST_BULLET = "• "
DEFAULT_LOG_LEVEL = "INFO"

# Nesting below this depth is flattened to text by the DOM parsers.
BIBMARKUP_MAX_DEPTH = int(os.getenv("BIBMARKUP_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
BIBMARKUP_MAX_INPUT_CHARS = int(os.getenv("BIBMARKUP_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS)))
BIBMARKUP_SMALL_CAPS_TAG = os.getenv("BIBMARKUP_SMALL_CAPS_TAG", DEFAULT_SMALL_CAPS_TAG).strip().lower()
BIBMARKUP_LIST_BULLET = os.getenv("BIBMARKUP_LIST_BULLET", DEFAULT_LIST_BULLET)
BIBMARKUP_LOG_LEVEL = os.getenv("BIBMARKUP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

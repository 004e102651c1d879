"""Shared schemas for bibmarkup."""

from bibmarkup.schemas.markup import ScanReport

__all__ = ["ScanReport"]

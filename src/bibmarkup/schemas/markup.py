"""Markup field models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bibmarkup.formats import ConversionLimit


class ScanReport(BaseModel):
    """Outcome of the advisory pre-parse scan."""

    conversion_limit: ConversionLimit
    violations: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

"""
Shared dataclasses and errors used across the guide generation pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field


class GuideConfigurationError(ValueError):
    """Raised when the association table or store contents cannot be used"""
    pass


@dataclass(slots=True)
class ScheduleRecord:
    """In-memory representation of one channel row from the record store."""
    xmltv_id: str
    name: str
    logo: str | None = None


@dataclass(slots=True)
class CanonicalChannel:
    """Merged view of every record sharing one xmltv_id."""
    id: str
    display_names: list[str] = field(default_factory=list)
    logo: str | None = None
    country: str | None = None
    site: str | None = None


__all__ = ["GuideConfigurationError", "ScheduleRecord", "CanonicalChannel"]

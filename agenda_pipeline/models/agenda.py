"""Agenda item model.

One record per `tr.agenda-item` row of a conference schedule page.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PresenterRef(BaseModel):
    """A presenter linked from an agenda row."""

    name: str
    link: Optional[str] = None


class AgendaItem(BaseModel):
    """One schedule entry (session, talk or event slot)."""

    # ===== TIMING =====
    # Raw attribute values, no timezone conversion
    start_utc: Optional[str] = Field(default=None, alias="s_utc")
    end_utc: Optional[str] = Field(default=None, alias="e_utc")

    # ===== EVENT =====
    event_title: str = Field(min_length=1)
    event_link: Optional[str] = None

    # ===== LOCATION =====
    location: str = Field(min_length=1)
    location_link: Optional[str] = None

    # Set only on rows that are not themselves the primary session
    primary_session_id: Optional[str] = Field(default=None, alias="primary_session")

    # ===== NESTED LISTS =====
    presenters: list[PresenterRef] = Field(default_factory=list)
    # None means the row had no track list at all; [] means an empty one
    tags: Optional[list[str]] = None

    class Config:
        populate_by_name = True

    def to_record(self) -> dict:
        """Convert to the JSON record written by the pipeline."""
        return self.model_dump(by_alias=True, exclude_none=True)

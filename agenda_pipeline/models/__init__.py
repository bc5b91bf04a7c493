"""Data models for the agenda pipeline."""

from agenda_pipeline.models.agenda import AgendaItem, PresenterRef

__all__ = [
    "AgendaItem",
    "PresenterRef",
]

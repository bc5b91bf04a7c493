"""HTML → AgendaItem extraction."""

from agenda_pipeline.extractors.agenda import (
    AgendaError,
    MissingRequiredField,
    extract_agenda,
)

__all__ = [
    "AgendaError",
    "MissingRequiredField",
    "extract_agenda",
]

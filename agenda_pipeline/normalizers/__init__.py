"""Text and link cleanup applied to everything pulled out of the markup."""

from agenda_pipeline.normalizers.text import normalize, resolve_link

__all__ = [
    "normalize",
    "resolve_link",
]

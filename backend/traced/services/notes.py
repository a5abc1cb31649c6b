"""Contextual note resolution for vendor records."""
from __future__ import annotations

from ..models.vendor import VendorRecord


def resolve_note(record: VendorRecord, from_slug: str) -> str:
    """Return the note written for `from_slug`, else the record's default note.

    Slugs match exactly: no case folding or normalization.
    """
    if from_slug and from_slug in record.notes:
        return record.notes[from_slug]
    return record.note

"""Domain model for an Artwork record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _parse_year(value: Any) -> Optional[int]:
    """Convert the API's year value → int | None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True, slots=True)
class Artwork:
    id: int
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    # ---------- mappings ----------
    @classmethod
    def from_api(cls, doc: Dict[str, Any]) -> "Artwork":
        """
        Build an `Artwork` from one element of the API's `data` list.

        Raises:
            KeyError: The record has no `id` field.
            ValueError: The `id` field is null.
        """
        record_id = doc["id"]
        if record_id is None:
            raise ValueError("artwork id is null")
        return cls(
            id=record_id,
            title=_text(doc.get("title")),
            place_of_origin=_text(doc.get("place_of_origin")),
            artist_display=_text(doc.get("artist_display")),
            inscriptions=_text(doc.get("inscriptions")),
            date_start=_parse_year(doc.get("date_start")),
            date_end=_parse_year(doc.get("date_end")),
        )

"""
Catalog domain models.

Contains the read-only record describing one recorded show.
"""

import re
from typing import Any, Optional, NamedTuple

_YEAR_PATTERN = re.compile(r"^(\d{4})-")
_SONG_SEPARATORS = re.compile(r"[;\n]")

# Catalog JSON key -> Show field. snake_case keys are accepted as well.
FIELD_ALIASES = {
    "ShowID": "show_id",
    "Artist": "artist",
    "ShowDate": "show_date",
    "VenueName": "venue_name",
    "City": "city",
    "Country": "country",
    "EventOrFestival": "event_or_festival",
    "RecordingType": "recording_type",
    "DurationSec": "duration_sec",
    "ChecksumSHA1": "checksum_sha1",
    "Width": "width",
    "Height": "height",
    "Songs": "songs",
}


def _clean_text(value: Any) -> Optional[str]:
    """Strip a text value, mapping blanks and None to None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _to_int(value: Any) -> Optional[int]:
    """Coerce numeric strings like "3600" or "3600.0" to int."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(float(str(value).strip()))
    except (ValueError, OverflowError):
        return None


def _to_songs(value: Any) -> tuple[str, ...]:
    """Normalize a song list given as a list or a separated string.

    Raises:
        ValueError: If value is neither a string nor a list of titles
    """
    if value is None:
        return ()
    if isinstance(value, str):
        parts = _SONG_SEPARATORS.split(value)
    elif isinstance(value, (list, tuple)):
        parts = [str(v) for v in value if v is not None]
    else:
        raise ValueError(f"Songs must be a string or a list, got {type(value).__name__}")
    return tuple(p.strip() for p in parts if p.strip())


class Show(NamedTuple):
    """Represents one recorded show in the catalog.

    Every attribute except artist may be missing; the matcher treats a
    missing attribute as a non-match rather than an error.
    """
    show_id: str
    artist: str
    show_date: Optional[str] = None  # YYYY-MM-DD
    venue_name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    event_or_festival: Optional[str] = None
    recording_type: Optional[str] = None  # e.g. "Soundboard", "Audience"
    duration_sec: int = 0
    checksum_sha1: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    songs: tuple[str, ...] = ()

    @property
    def year(self) -> Optional[int]:
        """4-digit year from show_date, or None when absent or unparsable."""
        if not self.show_date:
            return None
        match = _YEAR_PATTERN.match(self.show_date.strip())
        if not match:
            return None
        return int(match.group(1))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Show":
        """Build a Show from a catalog JSON object.

        Args:
            data: Object using catalog keys (ShowID, Artist, ...) or snake_case keys

        Returns:
            Show with blank strings mapped to None and numbers coerced to int

        Raises:
            ValueError: If the object has no artist or its songs are not a string or list
        """
        fields: dict[str, Any] = {}
        for key, value in data.items():
            name = FIELD_ALIASES.get(key, key)
            if name in cls._fields:
                fields[name] = value

        artist = _clean_text(fields.get("artist"))
        if not artist:
            raise ValueError("Show record has no artist")

        show_id = _clean_text(fields.get("show_id"))
        if show_id is None:
            # Stable fallback id so anchors and keys still work
            show_id = "-".join(
                filter(None, [artist, _clean_text(fields.get("show_date"))])
            )

        return cls(
            show_id=show_id,
            artist=artist,
            show_date=_clean_text(fields.get("show_date")),
            venue_name=_clean_text(fields.get("venue_name")),
            city=_clean_text(fields.get("city")),
            country=_clean_text(fields.get("country")),
            event_or_festival=_clean_text(fields.get("event_or_festival")),
            recording_type=_clean_text(fields.get("recording_type")),
            duration_sec=_to_int(fields.get("duration_sec")) or 0,
            checksum_sha1=_clean_text(fields.get("checksum_sha1")),
            width=_to_int(fields.get("width")),
            height=_to_int(fields.get("height")),
            songs=_to_songs(fields.get("songs")),
        )

"""Show card formatting - badge, location, duration and artwork text."""

import re
from typing import Callable, NamedTuple, Optional

from .models import Show

# (checksum, index) -> URL, or None when no artwork exists
ImageResolver = Callable[[str, int], Optional[str]]

PLACEHOLDER_PALETTE = (
    "bg-red-900",
    "bg-blue-900",
    "bg-green-900",
    "bg-purple-900",
    "bg-pink-900",
    "bg-indigo-900",
    "bg-yellow-900",
    "bg-teal-900",
)

_FNV_OFFSET_BASIS = 0x811C9DC5
_FNV_PRIME = 0x01000193
_WHITESPACE = re.compile(r"\s+")


class ShowCard(NamedTuple):
    """Display-ready text for one show card."""
    anchor: str
    artist: str
    year_label: str
    recording_type: Optional[str]
    location: str
    venue_name: Optional[str]
    event_or_festival: Optional[str]
    duration: Optional[str]
    resolution: Optional[str]
    image_url: Optional[str]
    initials: str
    placeholder_color: str


def year_label(show: Show) -> str:
    """Year badge text, "Date Unknown" for undated shows."""
    if not show.show_date:
        return "Date Unknown"
    return show.show_date.split("-")[0]


def duration_text(duration_sec: int) -> Optional[str]:
    """Format a duration as "1h 5m" or "42m"; None under one minute."""
    total_minutes = max(duration_sec or 0, 0) // 60
    if total_minutes == 0:
        return None
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def location_text(show: Show) -> str:
    """"City, Country" when known, else the venue, else "Unknown"."""
    location = ", ".join(part for part in (show.city, show.country) if part)
    return location or show.venue_name or "Unknown"


def resolution_text(show: Show) -> Optional[str]:
    if show.width and show.height:
        return f"{show.width}x{show.height}"
    return None


def artist_initials(name: str) -> str:
    """First letters of the first two words, upper-cased."""
    return "".join(word[0] for word in name.split()[:2]).upper()


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a hash of the UTF-8 encoding of text."""
    value = _FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * _FNV_PRIME) & 0xFFFFFFFF
    return value


def placeholder_color(name: str) -> str:
    """Stable palette entry for an artist's placeholder artwork."""
    return PLACEHOLDER_PALETTE[fnv1a_32(name) % len(PLACEHOLDER_PALETTE)]


def default_image_url(checksum: str, index: int, base_url: str = "/images") -> str:
    return f"{base_url.rstrip('/')}/{checksum}_{index:02d}.jpg"


def image_url(
    show: Show,
    resolver: Optional[ImageResolver] = None,
    index: int = 1,
    base_url: str = "/images",
) -> Optional[str]:
    """Resolve artwork for a show.

    Args:
        show: Show to resolve artwork for
        resolver: Injected (checksum, index) -> URL function; overrides base_url
        index: Artwork index within the recording
        base_url: Prefix for the default checksum path scheme

    Returns:
        Artwork URL, or None when the show has no checksum (placeholder is used)
    """
    if not show.checksum_sha1:
        return None
    if resolver is not None:
        return resolver(show.checksum_sha1, index)
    return default_image_url(show.checksum_sha1, index, base_url)


def artist_anchor(name: str) -> str:
    """Element id of an artist row, e.g. "artist-Pearl-Jam"."""
    return f"artist-{_WHITESPACE.sub('-', name)}"


def show_anchor(show: Show) -> str:
    return f"show-{show.show_id}"


def format_card(
    show: Show,
    resolver: Optional[ImageResolver] = None,
    base_url: str = "/images",
) -> ShowCard:
    """Bundle all card text for a show."""
    return ShowCard(
        anchor=show_anchor(show),
        artist=show.artist,
        year_label=year_label(show),
        recording_type=show.recording_type,
        location=location_text(show),
        venue_name=show.venue_name,
        event_or_festival=show.event_or_festival,
        duration=duration_text(show.duration_sec),
        resolution=resolution_text(show),
        image_url=image_url(show, resolver, base_url=base_url),
        initials=artist_initials(show.artist),
        placeholder_color=placeholder_color(show.artist),
    )

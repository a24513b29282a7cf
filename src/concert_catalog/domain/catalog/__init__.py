"""Catalog domain - show records, loading, grouping and card formatting."""

from .models import Show
from .loader import CatalogError, load_shows, group_by_artist, list_artists, artist_index
from .display import ShowCard, format_card, placeholder_color, image_url

__all__ = [
    "Show",
    "CatalogError",
    "load_shows",
    "group_by_artist",
    "list_artists",
    "artist_index",
    "ShowCard",
    "format_card",
    "placeholder_color",
    "image_url",
]

"""Catalog loading and artist grouping.

Reads the show catalog from JSON and arranges shows the way the browser
presents them: one row per artist, artists alphabetical, shows by date.
"""

import json
from pathlib import Path
from typing import Iterable, Union

from loguru import logger

from .models import Show


class CatalogError(ValueError):
    """Raised when a catalog file cannot be read or has the wrong shape."""


def load_shows(path: Union[str, Path]) -> list[Show]:
    """Load shows from a JSON catalog file.

    The file holds either a list of show objects or an object with a
    "shows" list. Entries that are not objects or have no artist are
    skipped with a warning.

    Args:
        path: Path to the catalog JSON file

    Returns:
        Shows in file order

    Raises:
        CatalogError: If the file is missing or unreadable, not UTF-8 JSON, or not a list of shows
    """
    catalog_path = Path(path).expanduser()
    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {catalog_path}") from e
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {catalog_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CatalogError(f"Catalog {catalog_path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in catalog {catalog_path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("shows")
    if not isinstance(data, list):
        raise CatalogError(
            f"Catalog {catalog_path} must contain a list of shows or a 'shows' list"
        )

    shows = []
    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping catalog entry {position}: not an object")
            continue
        try:
            shows.append(Show.from_dict(entry))
        except ValueError as e:
            logger.warning(f"Skipping catalog entry {position}: {e}")

    logger.info(f"Loaded {len(shows)} shows from {catalog_path}")
    return shows


def _show_sort_key(show: Show) -> tuple:
    # Undated shows go last
    return (show.show_date is None, show.show_date or "", show.show_id)


def group_by_artist(shows: Iterable[Show]) -> dict[str, list[Show]]:
    """Group shows into artist rows.

    Returns:
        Mapping of artist -> shows, artists sorted case-insensitively and
        each row sorted chronologically with undated shows last
    """
    rows: dict[str, list[Show]] = {}
    for show in shows:
        rows.setdefault(show.artist, []).append(show)

    return {
        artist: sorted(rows[artist], key=_show_sort_key)
        for artist in sorted(rows, key=str.casefold)
    }


def list_artists(shows: Iterable[Show]) -> list[str]:
    """Sorted unique artist names (the artist dropdown contents)."""
    return sorted({show.artist for show in shows}, key=str.casefold)


def artist_index(artists: list[str], current: str) -> int:
    """Position of the current artist in the dropdown list, or -1."""
    try:
        return artists.index(current)
    except ValueError:
        return -1

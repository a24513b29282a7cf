"""Evaluate parsed search queries against catalog shows.

All comparisons are case-insensitive substring tests except ``year``, which
compares the 4-digit year of the show date numerically. A missing show
attribute never matches and never raises.
"""

from typing import Callable, Iterable, Optional, Union

from loguru import logger

from ..catalog.models import Show
from .query import Clause, FieldFilter, FilterExpression, FreeText, parse


def _contains(haystack: Optional[str], needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


def _any_song_contains(show: Show, needle: str) -> bool:
    return any(needle in song.lower() for song in show.songs)


def _match_year(show: Show, value: str) -> bool:
    year = show.year
    if year is None:
        return False
    # Plain ASCII digits only: no sign, underscores or non-ASCII digits
    if not (value.isascii() and value.isdigit()):
        return False
    return int(value) == year


# Field -> (show, normalized value) -> bool
FIELD_MATCHERS: dict[str, Callable[[Show, str], bool]] = {
    "artist": lambda show, value: _contains(show.artist, value),
    "song": _any_song_contains,
    "type": lambda show, value: _contains(show.recording_type, value),
    "country": lambda show, value: _contains(show.country, value),
    "year": _match_year,
}


def _free_text_fields(show: Show) -> tuple[Optional[str], ...]:
    return (
        show.artist,
        show.venue_name,
        show.city,
        show.country,
        show.event_or_festival,
        show.recording_type,
    )


def match_clause(show: Show, clause: Clause) -> bool:
    """Check if a show satisfies a single clause."""
    value = clause.value.strip().lower()

    if isinstance(clause, FieldFilter):
        matcher = FIELD_MATCHERS.get(clause.field)
        return matcher is not None and matcher(show, value)

    if isinstance(clause, FreeText):
        return any(
            _contains(text, value) for text in _free_text_fields(show)
        ) or _any_song_contains(show, value)

    return False


def matches(show: Show, expression: FilterExpression) -> bool:
    """Check if a show satisfies every clause (AND). Empty expressions match."""
    return all(match_clause(show, clause) for clause in expression.clauses)


def matches_query(show: Show, raw: Optional[str]) -> bool:
    return matches(show, parse(raw))


def filter_shows(
    shows: Iterable[Show], query: Union[str, FilterExpression, None]
) -> list[Show]:
    """
    Filter shows by a search query.

    Args:
        shows: Shows to filter
        query: Raw query text or an already parsed FilterExpression

    Returns:
        Matching shows in input order (all shows for an empty query)
    """
    expression = query if isinstance(query, FilterExpression) else parse(query)
    shows = list(shows)

    if not expression:
        return shows

    result = [show for show in shows if matches(show, expression)]
    logger.debug(
        f"Query {expression.describe()!r} matched {len(result)} of {len(shows)} shows"
    )
    return result

"""Search domain - query language parsing and show matching."""

from .query import (
    RECOGNIZED_FIELDS,
    SEARCH_HINT,
    SEARCH_PLACEHOLDER,
    Clause,
    FieldFilter,
    FilterExpression,
    FreeText,
    parse,
    parse_token,
)
from .matcher import filter_shows, match_clause, matches, matches_query

__all__ = [
    "RECOGNIZED_FIELDS",
    "SEARCH_HINT",
    "SEARCH_PLACEHOLDER",
    "Clause",
    "FieldFilter",
    "FilterExpression",
    "FreeText",
    "parse",
    "parse_token",
    "filter_shows",
    "match_clause",
    "matches",
    "matches_query",
]

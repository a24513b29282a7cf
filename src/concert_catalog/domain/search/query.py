"""Search query parsing.

Turns the text typed into the search box into an ordered set of clauses:

    artist:pearl song:alive 1999 -> FieldFilter(artist, pearl),
                                    FieldFilter(song, alive),
                                    FreeText(1999)

Tokens are split on whitespace and never merged, so a multi-word field
value like ``artist:pearl jam`` becomes a field filter for "pearl" plus a
free-text clause for "jam". Values keep their original case; the matcher
normalizes them.
"""

from dataclasses import dataclass
from typing import Optional, Union

from loguru import logger

RECOGNIZED_FIELDS = frozenset({"artist", "song", "type", "country", "year"})

SEARCH_PLACEHOLDER = "Search... (Try: artist:pearl jam, song:alive, type:soundboard)"

# Field -> example value shown in the search hint
SEARCH_HINT = {
    "artist": "pearl jam",
    "song": "alive",
    "type": "soundboard",
    "country": "usa",
    "year": "1999",
}


@dataclass(frozen=True)
class FieldFilter:
    """Clause restricting one named show attribute."""

    field: str  # artist, song, type, country, year
    value: str

    def __str__(self) -> str:
        return f"{self.field}:{self.value}"


@dataclass(frozen=True)
class FreeText:
    """Clause matched against every searchable attribute."""

    value: str

    def __str__(self) -> str:
        return self.value


Clause = Union[FieldFilter, FreeText]


@dataclass(frozen=True)
class FilterExpression:
    """Ordered, implicitly AND-ed clauses parsed from one query string."""

    clauses: tuple[Clause, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def __iter__(self):
        return iter(self.clauses)

    def field_filters(self, field: Optional[str] = None) -> list[FieldFilter]:
        """Field filters in order, optionally only those for one field."""
        return [
            c
            for c in self.clauses
            if isinstance(c, FieldFilter) and (field is None or c.field == field)
        ]

    def free_text(self) -> list[FreeText]:
        return [c for c in self.clauses if isinstance(c, FreeText)]

    def describe(self) -> str:
        """Query text that parses back to the same clauses."""
        return " ".join(str(c) for c in self.clauses)


def parse_token(token: str) -> Clause:
    """Classify a single whitespace-free token.

    A token is a field filter when the text before its first colon is a
    recognized field (any case) and the text after it is non-empty.
    Everything else, including "foo:bar", "artist:" and ":", is free text.
    """
    prefix, colon, rest = token.partition(":")
    if colon and rest:
        field = prefix.lower()
        if field in RECOGNIZED_FIELDS:
            return FieldFilter(field=field, value=rest)
    return FreeText(value=token)


def parse(raw: Optional[str]) -> FilterExpression:
    """Parse search box text into a FilterExpression.

    Never raises: malformed fragments degrade to free text, and empty or
    whitespace-only input yields an empty expression that matches every show.

    Args:
        raw: Query text as typed

    Returns:
        Immutable FilterExpression with one clause per token
    """
    if not raw:
        return FilterExpression()

    clauses = tuple(parse_token(token) for token in raw.split())
    logger.debug(f"Parsed query {raw!r} into {len(clauses)} clause(s)")
    return FilterExpression(clauses=clauses)

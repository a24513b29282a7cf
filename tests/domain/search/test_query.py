"""Tests for search query parsing."""

import pytest

from concert_catalog.domain.search.query import (
    RECOGNIZED_FIELDS,
    FieldFilter,
    FilterExpression,
    FreeText,
    parse,
    parse_token,
)


class TestParseEmpty:
    """Empty input yields an empty expression."""

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n ", None])
    def test_blank_queries(self, raw):
        """Blank or missing text parses to no clauses."""
        expression = parse(raw)
        assert expression == FilterExpression()
        assert len(expression) == 0
        assert not expression


class TestFieldFilters:
    """Recognized field prefixes become field filters."""

    @pytest.mark.parametrize("field", sorted(RECOGNIZED_FIELDS))
    def test_each_recognized_field(self, field):
        """Every recognized field parses to a FieldFilter."""
        expression = parse(f"{field}:value")
        assert expression.clauses == (FieldFilter(field=field, value="value"),)

    def test_field_name_is_case_insensitive(self):
        """Field names are lower-cased, values keep their case."""
        expression = parse("ARTIST:Pearl Song:ALIVE")
        assert expression.clauses == (
            FieldFilter(field="artist", value="Pearl"),
            FieldFilter(field="song", value="ALIVE"),
        )

    def test_value_split_on_first_colon_only(self):
        """Later colons stay in the value."""
        assert parse_token("song:intro:reprise") == FieldFilter(
            field="song", value="intro:reprise"
        )

    def test_repeated_field_filters_are_kept(self):
        """Both filters on the same field are retained in order."""
        expression = parse("artist:pearl artist:jam")
        assert expression.field_filters("artist") == [
            FieldFilter(field="artist", value="pearl"),
            FieldFilter(field="artist", value="jam"),
        ]


class TestFreeText:
    """Anything that is not a valid field filter is free text."""

    def test_unknown_field_keeps_colon(self):
        """foo:bar is free text with the colon preserved."""
        assert parse("foo:bar").clauses == (FreeText(value="foo:bar"),)

    @pytest.mark.parametrize("token", ["artist:", ":", "year:", ":alive"])
    def test_empty_value_or_prefix(self, token):
        """A missing value or missing field degrades to verbatim free text."""
        assert parse_token(token) == FreeText(value=token)

    def test_adjacent_words_not_merged(self):
        """Each word is its own clause."""
        expression = parse("  live   at  wembley ")
        assert expression.free_text() == [
            FreeText("live"),
            FreeText("at"),
            FreeText("wembley"),
        ]

    def test_case_preserved(self):
        """The parser does not normalize free text."""
        assert parse("Wembley").clauses == (FreeText(value="Wembley"),)


class TestMultiWordFieldValue:
    """Multi-word field values are split, not merged."""

    def test_artist_pearl_jam_splits_into_field_and_free_text(self):
        """artist:pearl jam -> artist filter for pearl + free text jam."""
        expression = parse("artist:pearl jam")
        assert expression.clauses == (
            FieldFilter(field="artist", value="pearl"),
            FreeText(value="jam"),
        )


class TestFilterExpression:
    """FilterExpression helpers."""

    def test_is_immutable(self):
        """Expressions cannot be mutated after parsing."""
        expression = parse("song:alive")
        with pytest.raises(AttributeError):
            expression.clauses = ()

    def test_deterministic(self):
        """Same input gives structurally equal output."""
        raw = "artist:pearl year:1999 jam foo:bar"
        assert parse(raw) == parse(raw)

    def test_describe_round_trips(self):
        """describe() produces text that parses to the same clauses."""
        expression = parse("  artist:pearl   jam year:1999 ")
        assert expression.describe() == "artist:pearl jam year:1999"
        assert parse(expression.describe()) == expression

    def test_mixed_query_order(self):
        """Clauses keep query order."""
        expression = parse("1999 type:soundboard country:usa")
        assert [str(c) for c in expression] == [
            "1999",
            "type:soundboard",
            "country:usa",
        ]

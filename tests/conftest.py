"""Shared fixtures for catalog and search tests."""

import json
from pathlib import Path

import pytest

from concert_catalog.domain.catalog.models import Show


@pytest.fixture
def pearl_jam_show() -> Show:
    """The reference Pearl Jam soundboard recording."""
    return Show(
        show_id="pj-1999-07-05",
        artist="Pearl Jam",
        show_date="1999-07-05",
        venue_name="Alpine Valley Music Theatre",
        city="East Troy",
        country="USA",
        event_or_festival="Summer Tour",
        recording_type="Soundboard",
        duration_sec=9000,
        songs=("Alive", "Black"),
    )


@pytest.fixture
def undated_show() -> Show:
    """A show with no date and no songs."""
    return Show(
        show_id="nirvana-unknown",
        artist="Nirvana",
        venue_name="Paramount Theatre",
        city="Seattle",
        country="USA",
        recording_type="Audience",
    )


@pytest.fixture
def catalog_entries() -> list[dict]:
    """Raw catalog entries using the catalog JSON keys."""
    return [
        {
            "ShowID": "1",
            "Artist": "Pearl Jam",
            "ShowDate": "1999-07-05",
            "VenueName": "Alpine Valley Music Theatre",
            "City": "East Troy",
            "Country": "USA",
            "EventOrFestival": "",
            "RecordingType": "Soundboard",
            "DurationSec": "9000",
            "ChecksumSHA1": "abc123",
            "Width": "1920",
            "Height": "1080",
            "Songs": ["Alive", "Black"],
        },
        {
            "ShowID": "2",
            "Artist": "Pearl Jam",
            "ShowDate": "1992-03-01",
            "City": "London",
            "Country": "UK",
            "RecordingType": "Audience",
            "DurationSec": "3000",
            "Songs": "Even Flow; Jeremy",
        },
        {
            "ShowID": "3",
            "Artist": "Nirvana",
            "ShowDate": "1991-10-31",
            "VenueName": "Paramount Theatre",
            "City": "Seattle",
            "Country": "USA",
            "EventOrFestival": "Halloween Show",
            "RecordingType": "Pro-shot",
            "DurationSec": "4800",
        },
        {
            "ShowID": "4",
            "Artist": "alice in chains",
            "RecordingType": "Audience",
        },
    ]


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_entries: list[dict]) -> Path:
    """Catalog JSON file on disk."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_entries), encoding="utf-8")
    return path

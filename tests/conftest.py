"""Shared fixtures for the Lyrical test suite."""

import pytest

from lyrical.models import LyricSearchResult


@pytest.fixture
def make_result():
    """Factory for LyricSearchResult objects with sensible defaults."""

    def _make(id=1, duration=200.0, synced_lyrics="[00:01.00]Hello", **kwargs):
        fields = {
            "name": f"Song {id}",
            "track_name": f"Song {id}",
            "artist_name": "Artist",
            "album_name": "Album",
            "instrumental": False,
            "plain_lyrics": "Hello",
        }
        fields.update(kwargs)
        return LyricSearchResult(id=id, duration=duration, synced_lyrics=synced_lyrics, **fields)

    return _make


class FakeProvider:
    """In-memory search provider that records its calls."""

    def __init__(self, results):
        self.results = results
        self.calls = []
        self.closed = False

    def find(self, track_name, artist_name):
        self.calls.append((track_name, artist_name))
        return list(self.results)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_provider():
    return FakeProvider

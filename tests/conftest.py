from typing import List

import pytest

from core.entities import Track
from core.schemas import AudioFeatures


def _track(track_id: str, name: str = "", isrc: str | None = None) -> Track:
    return Track(
        id=track_id,
        name=name or f"Track {track_id}",
        uri=f"spotify:track:{track_id}",
        artists=("Test Artist",),
        album="Test Album",
        isrc=isrc,
    )


def _features(**overrides) -> AudioFeatures:
    values = dict(
        acousticness=0.2,
        danceability=0.5,
        energy=0.5,
        instrumentalness=0.0,
        key=0,
        liveness=0.1,
        loudness=-6.0,
        mode=1,
        speechiness=0.05,
        tempo=120.0,
        valence=0.5,
    )
    values.update(overrides)
    return AudioFeatures(**values)


@pytest.fixture
def make_track():
    return _track


@pytest.fixture
def make_tracks():
    def factory(prefix: str, count: int) -> List[Track]:
        return [_track(f"{prefix}-{i}") for i in range(count)]
    return factory


@pytest.fixture
def make_features():
    return _features

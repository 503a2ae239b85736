import pytest

from processing.distance import DISTANCE_WEIGHTS, key_distance, track_distance


def test_identical_vectors_have_zero_distance(make_features):
    f = make_features()
    assert track_distance(f, f) == 0


def test_tempo_difference_of_span_isolates_tempo_weight(make_features):
    a = make_features(tempo=100.0)
    b = make_features(tempo=240.0)

    assert track_distance(a, b) == pytest.approx(0.30)


def test_tempo_term_is_not_clamped(make_features):
    a = make_features(tempo=60.0)
    b = make_features(tempo=340.0)

    assert track_distance(a, b) == pytest.approx(0.60)


def test_key_distance_wraps_around_the_circle():
    assert key_distance(0, 11) == pytest.approx(1 / 6)
    assert key_distance(0, 6) == pytest.approx(1.0)
    assert key_distance(3, 3) == 0


def test_mode_mismatch(make_features):
    a = make_features(mode=0)
    b = make_features(mode=1)

    assert track_distance(a, b) == pytest.approx(0.10 * 0.5)


def test_weighted_sum_of_all_terms(make_features):
    a = make_features(tempo=120, key=0, mode=1, energy=0.2, valence=0.1, danceability=0.9)
    b = make_features(tempo=155, key=3, mode=0, energy=0.8, valence=0.6, danceability=0.4)

    expected = (
        0.30 * (35 / 140)
        + 0.25 * (3 / 6)
        + 0.10 * 0.5
        + 0.15 * 0.6
        + 0.10 * 0.5
        + 0.10 * 0.5
    )
    assert track_distance(a, b) == pytest.approx(expected)


def test_symmetric(make_features):
    a = make_features(tempo=90, key=2, energy=0.3)
    b = make_features(tempo=128, key=9, mode=0, energy=0.9, valence=0.2)

    assert track_distance(a, b) == pytest.approx(track_distance(b, a))


def test_weights_sum_to_one():
    assert sum(DISTANCE_WEIGHTS.values()) == pytest.approx(1.0)

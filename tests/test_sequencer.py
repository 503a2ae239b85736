from processing.sequencer import smart_sort


def _ids(tracks):
    return [t.id for t in tracks]


def test_single_featured_track_is_returned_with_rest_appended(make_track, make_features):
    tracks = [make_track("a"), make_track("b"), make_track("c")]
    features = {"b": make_features()}

    assert _ids(smart_sort(tracks, features)) == ["b", "a", "c"]


def test_no_features_keeps_order(make_track):
    tracks = [make_track("a"), make_track("b"), make_track("c")]

    assert _ids(smart_sort(tracks, {})) == ["a", "b", "c"]


def test_empty_input():
    assert smart_sort([], {}) == []


def test_starts_at_highest_energy_then_walks_nearest(make_track, make_features):
    tracks = [make_track(i) for i in ("slow", "mid", "fast", "opener")]
    features = {
        "slow": make_features(tempo=80, energy=0.3),
        "mid": make_features(tempo=118, energy=0.6),
        "fast": make_features(tempo=150, energy=0.7),
        "opener": make_features(tempo=160, energy=0.9),
    }

    assert _ids(smart_sort(tracks, features)) == ["opener", "fast", "mid", "slow"]


def test_energy_tie_goes_to_first_track(make_track, make_features):
    tracks = [make_track("a"), make_track("b")]
    features = {
        "a": make_features(energy=0.8, tempo=100),
        "b": make_features(energy=0.8, tempo=140),
    }

    assert _ids(smart_sort(tracks, features)) == ["a", "b"]


def test_distance_tie_goes_to_first_remaining_track(make_track, make_features):
    tracks = [make_track("x"), make_track("y"), make_track("seed")]
    features = {
        "x": make_features(energy=0.5, tempo=110),
        "y": make_features(energy=0.5, tempo=130),
        "seed": make_features(energy=0.9, tempo=120),
    }

    # x and y are equally far from the seed
    assert _ids(smart_sort(tracks, features)) == ["seed", "x", "y"]


def test_unfeatured_tracks_go_last_in_original_order(make_track, make_features):
    tracks = [make_track(i) for i in ("n1", "f1", "n2", "f2", "n3")]
    features = {
        "f1": make_features(energy=0.2),
        "f2": make_features(energy=0.9),
    }

    assert _ids(smart_sort(tracks, features)) == ["f2", "f1", "n1", "n2", "n3"]


def test_is_a_permutation(make_track, make_features):
    tracks = [make_track(str(i)) for i in range(12)]
    features = {
        str(i): make_features(tempo=90 + i * 7 % 50, key=i % 12, energy=(i % 5) / 5)
        for i in range(0, 12, 2)
    }

    result = smart_sort(tracks, features)

    assert sorted(_ids(result)) == sorted(_ids(tracks))

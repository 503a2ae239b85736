from processing.deduplicator import collect_manifests


def test_respects_quota_and_rank_order(make_tracks):
    sources = {"u1": make_tracks("u1", 10)}

    manifests, contributions = collect_manifests(sources, [("u1", 3)])

    assert [t.id for t in manifests[0]] == ["u1-0", "u1-1", "u1-2"]
    assert contributions == {"u1": 3}


def test_skips_tracks_already_taken_by_earlier_source(make_track):
    shared = make_track("shared")
    sources = {
        "u1": [shared, make_track("a1")],
        "u2": [shared, make_track("b1"), make_track("b2")],
    }

    manifests, contributions = collect_manifests(sources, [("u1", 2), ("u2", 2)])

    assert [t.id for t in manifests[0]] == ["shared", "a1"]
    assert [t.id for t in manifests[1]] == ["b1", "b2"]
    assert contributions == {"u1": 2, "u2": 2}


def test_duplicates_within_one_source_are_dropped(make_track):
    sources = {"u1": [make_track("a"), make_track("a"), make_track("b")]}

    manifests, contributions = collect_manifests(sources, [("u1", 5)])

    assert [t.id for t in manifests[0]] == ["a", "b"]
    assert contributions == {"u1": 2}


def test_short_or_empty_sources_contribute_what_they_have(make_tracks):
    sources = {"u1": make_tracks("u1", 2), "u2": []}

    manifests, contributions = collect_manifests(sources, [("u1", 5), ("u2", 5)])

    assert len(manifests) == 2
    assert manifests[1] == []
    assert contributions == {"u1": 2, "u2": 0}

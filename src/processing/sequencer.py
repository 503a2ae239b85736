"""
Greedy nearest-neighbour sequencing for smooth, DJ-like transitions.
"""
import logging
from typing import List, Mapping, Sequence

from core.entities import Track
from core.schemas import AudioFeatures
from processing.distance import track_distance

logger = logging.getLogger(__name__)


def smart_sort(
    tracks: Sequence[Track],
    features: Mapping[str, AudioFeatures],
) -> List[Track]:
    """
    Reorder tracks so adjacent tracks sound alike.

    Tracks with features are walked greedily, starting from the most
    energetic one and always moving to the closest remaining track.
    Tracks without features keep their relative order and go last.
    Ties go to the track that came first in the input.
    """
    featured = [t for t in tracks if t.id in features]
    unfeatured = [t for t in tracks if t.id not in features]

    if len(featured) <= 1:
        return featured + unfeatured

    current = featured[0]
    for track in featured[1:]:
        if features[track.id].energy > features[current.id].energy:
            current = track

    remaining = [t for t in featured if t is not current]
    ordered = [current]

    while remaining:
        current_features = features[current.id]
        nearest_index = 0
        nearest_distance = float("inf")

        for index, track in enumerate(remaining):
            distance = track_distance(current_features, features[track.id])
            if distance < nearest_distance:
                nearest_distance = distance
                nearest_index = index

        current = remaining.pop(nearest_index)
        ordered.append(current)

    logger.debug(
        f"Sequenced {len(featured)} tracks by similarity, "
        f"{len(unfeatured)} without features appended"
    )

    return ordered + unfeatured

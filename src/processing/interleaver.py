"""
Chunked round robin interleaving of per-source manifests
"""
from collections import deque
from typing import Deque, List, Optional, Sequence

from core.entities import Track
from processing.shuffle import Shuffler


def interleave(
    manifests: Sequence[Sequence[Track]],
    total_tracks: Optional[int] = None,
    shuffler: Optional[Shuffler] = None,
) -> List[Track]:
    """
    Merge manifests one track per source per round.

    Each manifest is shuffled once up front. The order of the still-active
    manifests is reshuffled at the start of every round, so no source is
    consistently first.
    """
    shuffler = shuffler or Shuffler()

    active: List[Deque[Track]] = [
        deque(shuffler.shuffle(manifest)) for manifest in manifests if manifest
    ]
    interleaved: List[Track] = []

    while active:
        active = shuffler.shuffle(active)

        next_round: List[Deque[Track]] = []
        for manifest in active:
            interleaved.append(manifest.popleft())
            if manifest:
                next_round.append(manifest)
        active = next_round

    if total_tracks is not None:
        return interleaved[:total_tracks]
    return interleaved

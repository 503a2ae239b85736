import logging
import re
from typing import Iterable, List, Mapping, Sequence

from core.entities import Track

logger = logging.getLogger(__name__)

# Name patterns for instrumental / karaoke releases. The upstream catalogue
# has no reliable instrumental flag, so we go by track name.
INSTRUMENTAL_PATTERNS = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"\binstrumental\b",
        r"インストゥルメンタル",
        r"インスト",
        r"\bkaraoke\b",
        r"カラオケ",
        r"\boff vocal\b",
        r"オフボーカル",
        r"\b-?inst\.?\b",
        r"\(inst\.?\)",
        r"\[inst\.?\]",
        r"\bno vocals?\b",
        r"\bwithout vocals?\b",
        r"\bbacking track\b",
    )
]


def is_instrumental(track: Track) -> bool:
    name = track.name.lower()
    return any(pattern.search(name) for pattern in INSTRUMENTAL_PATTERNS)


def filter_instrumentals(tracks: Iterable[Track]) -> List[Track]:
    """Drop tracks whose name marks them as an instrumental version."""
    return [track for track in tracks if not is_instrumental(track)]


def filter_sources(
    sources: Mapping[str, Sequence[Track]],
) -> dict[str, List[Track]]:
    """
    Apply the instrumental filter to every source, keeping source order.
    """
    filtered: dict[str, List[Track]] = {}

    for source_id, tracks in sources.items():
        kept = filter_instrumentals(tracks)
        dropped = len(tracks) - len(kept)
        if dropped:
            logger.info(f"Filtered {dropped} instrumental tracks from {source_id}")
        filtered[source_id] = kept

    return filtered

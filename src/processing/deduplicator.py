import logging
from typing import Dict, List, Mapping, Sequence, Set, Tuple

from core.entities import Track

logger = logging.getLogger(__name__)


def collect_manifests(
    sources: Mapping[str, Sequence[Track]],
    quotas: Sequence[Tuple[str, int]],
) -> Tuple[List[List[Track]], Dict[str, int]]:
    """
    Build one manifest per source, taking tracks in ranked order until the
    source's quota is filled.

    A track id accepted from any earlier source is skipped, so the manifests
    never share a track.

    Returns:
        Tuple of (manifests, contributions)
        manifests follows the order of `quotas`
        contributions maps source id -> number of tracks accepted
    """
    seen_ids: Set[str] = set()
    manifests: List[List[Track]] = []
    contributions: Dict[str, int] = {}

    for source_id, quota in quotas:
        manifest: List[Track] = []

        for track in sources.get(source_id, ()):
            if len(manifest) >= quota:
                break

            if track.id in seen_ids:
                logger.debug(f"Skipping duplicate track {track.id} from {source_id}")
                continue

            seen_ids.add(track.id)
            manifest.append(track)

        manifests.append(manifest)
        contributions[source_id] = len(manifest)

    return manifests, contributions

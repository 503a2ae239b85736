from typing import Iterable, List, Tuple


def allocate_quotas(source_ids: Iterable[str], total_tracks: int = 100) -> List[Tuple[str, int]]:
    """
    Split total_tracks evenly across sources.

    The first `total_tracks % N` sources, in the order given, receive one
    extra track. Quotas are 0 when there are more sources than tracks.
    """
    ids = list(source_ids)
    if not ids:
        return []

    base, remainder = divmod(total_tracks, len(ids))

    return [
        (source_id, base + 1 if index < remainder else base)
        for index, source_id in enumerate(ids)
    ]

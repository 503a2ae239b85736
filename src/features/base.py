"""
Base classes for audio feature providers
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from core.entities import Track
from core.schemas import AudioFeatures


class FeatureProvider(ABC):
    """
    Base interface for all audio feature lookups.
    """

    name: str

    @abstractmethod
    async def fetch_features(self, tracks: Sequence[Track]) -> Dict[str, AudioFeatures]:
        """
        Fetch audio features for the given tracks, keyed by track id.
        Coverage may be partial. Must NEVER raise uncaught exceptions.
        """
        raise NotImplementedError


class NullFeatureProvider(FeatureProvider):
    name = "none"

    async def fetch_features(self, tracks: Sequence[Track]) -> Dict[str, AudioFeatures]:
        return {}


def batched(items: Sequence[Track], size: int) -> List[Sequence[Track]]:
    return [items[i:i + size] for i in range(0, len(items), size)]

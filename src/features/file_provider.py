"""
Audio features from a local JSON file
"""
import json
import logging
from pathlib import Path
from typing import Dict, Sequence

from pydantic import ValidationError

from core.entities import Track
from core.schemas import AudioFeatures
from features.base import FeatureProvider

logger = logging.getLogger(__name__)


class FileFeatureProvider(FeatureProvider):
    """
    Reads a JSON object mapping track id -> audio feature record.
    Useful for offline blends and for replaying cached lookups.
    """

    name = "file"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, dict]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read features file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Features file {self.path} is not a JSON object")
            return {}
        return data

    async def fetch_features(self, tracks: Sequence[Track]) -> Dict[str, AudioFeatures]:
        if not tracks:
            return {}

        raw = self._load()
        features: Dict[str, AudioFeatures] = {}

        for track in tracks:
            record = raw.get(track.id)
            if record is None:
                continue
            try:
                features[track.id] = AudioFeatures.model_validate(record)
            except ValidationError as e:
                logger.debug(f"Invalid features for {track.id}: {e}")

        logger.info(f"Loaded audio features: {len(features)}/{len(tracks)} tracks")
        return features

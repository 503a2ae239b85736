"""
Audio features from the ReccoBeats API
"""
import asyncio
import logging
from typing import Dict, Optional, Sequence

import httpx
from pydantic import ValidationError

from core.entities import Track
from core.schemas import AudioFeatures, ReccoBeatsTrack
from features.base import FeatureProvider, batched

logger = logging.getLogger(__name__)


class ReccoBeatsProvider(FeatureProvider):
    """
    Looks tracks up by ISRC, then fetches their audio features.
    Lookups run concurrently in fixed-size batches with a pause between
    batches to stay under the upstream rate limit.
    """

    name = "reccobeats"
    BASE_URL = "https://api.reccobeats.com/v1"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 10.0,
        batch_size: int = 10,
        batch_delay_ms: int = 100,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.batch_size = max(1, batch_size)
        self.batch_delay_ms = batch_delay_ms
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
            timeout=self.timeout,
            transport=self.transport,
        )

    async def get_track_by_isrc(
        self,
        client: httpx.AsyncClient,
        isrc: str,
    ) -> Optional[ReccoBeatsTrack]:
        try:
            resp = await client.get("/track", params={"ids": isrc})
            resp.raise_for_status()

            content = resp.json().get("content") or []
            if not content:
                return None
            return ReccoBeatsTrack.model_validate(content[0])

        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.debug(f"Failed to get ReccoBeats track for ISRC {isrc}: {e}")
            return None

    async def get_audio_features(
        self,
        client: httpx.AsyncClient,
        reccobeats_id: str,
    ) -> Optional[AudioFeatures]:
        try:
            resp = await client.get(f"/track/{reccobeats_id}/audio-features")
            resp.raise_for_status()
            return AudioFeatures.model_validate(resp.json())

        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.debug(f"Failed to get audio features for {reccobeats_id}: {e}")
            return None

    async def _features_for_track(
        self,
        client: httpx.AsyncClient,
        track: Track,
    ) -> Optional[AudioFeatures]:
        if not track.isrc:
            return None

        try:
            recco_track = await self.get_track_by_isrc(client, track.isrc)
            if recco_track is None:
                return None

            return await self.get_audio_features(client, recco_track.id)

        except Exception as e:
            # One bad payload must not sink the rest of the batch
            logger.debug(f"Failed to get features for track {track.id} (ISRC {track.isrc}): {e}")
            return None

    async def fetch_features(self, tracks: Sequence[Track]) -> Dict[str, AudioFeatures]:
        features: Dict[str, AudioFeatures] = {}
        if not tracks:
            return features

        try:
            async with self._client() as client:
                batches = batched(tracks, self.batch_size)

                for index, batch in enumerate(batches):
                    results = await asyncio.gather(
                        *(self._features_for_track(client, track) for track in batch)
                    )

                    for track, result in zip(batch, results):
                        if result is not None:
                            features[track.id] = result

                    if index < len(batches) - 1 and self.batch_delay_ms > 0:
                        await asyncio.sleep(self.batch_delay_ms / 1000)

        except Exception as e:
            # Keep whatever was fetched before the failure
            logger.warning(f"ReccoBeats feature lookup aborted: {e}")

        logger.info(
            f"Fetched audio features: {len(features)}/{len(tracks)} tracks"
        )
        return features

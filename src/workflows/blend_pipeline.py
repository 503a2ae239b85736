"""
Blend orchestration: quota allocation -> deduplication -> fair interleave
-> optional similarity sequencing.
"""
import asyncio
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from core.entities import BlendResult, Track
from core.modes import ALL_MODES
from core.schemas import AudioFeatures, BlendOptions
from features.base import FeatureProvider
from features.provider_factory import create_feature_provider
from processing.deduplicator import collect_manifests
from processing.interleaver import interleave
from processing.prefilter import filter_sources
from processing.quota import allocate_quotas
from processing.sequencer import smart_sort
from processing.shuffle import Shuffler
from services.config import BlendConfig, Config

logger = logging.getLogger(__name__)

Sources = Union[Mapping[str, Sequence[Track]], Iterable[Tuple[str, Sequence[Track]]]]


class BlendConfigError(ValueError):
    """Raised when blend options are invalid. Nothing has run yet."""


def normalize_sources(sources: Sources) -> Dict[str, List[Track]]:
    """
    Accept a mapping or a sequence of (source_id, tracks) pairs and return an
    ordered dict. Source order decides who gets the remainder tracks.
    """
    pairs = sources.items() if isinstance(sources, Mapping) else sources

    normalized: Dict[str, List[Track]] = {}
    for source_id, tracks in pairs:
        if source_id in normalized:
            raise BlendConfigError(f"Duplicate source id: {source_id}")
        normalized[source_id] = list(tracks)
    return normalized


def resolve_options(options: Union[BlendOptions, Mapping[str, Any], None]) -> BlendOptions:
    if options is None:
        return BlendOptions()
    if isinstance(options, BlendOptions):
        return options
    try:
        return BlendOptions.model_validate(dict(options))
    except (ValidationError, TypeError) as e:
        raise BlendConfigError(f"Invalid blend options: {e}") from e


def blend_tracks(
    sources: Sources,
    total_tracks: int = 100,
    shuffler: Optional[Shuffler] = None,
) -> BlendResult:
    """
    Blend tracks from multiple sources without any feature lookup.

    Args:
        sources: Source id -> ranked candidate tracks (best first)
        total_tracks: Upper bound on the blended length
        shuffler: Random source; pass a seeded one for reproducible output

    Returns:
        BlendResult with the interleaved tracks and per-source contributions
    """
    if isinstance(total_tracks, bool) or not isinstance(total_tracks, int) or total_tracks < 0:
        raise BlendConfigError(f"total_tracks must be a non-negative integer, got {total_tracks!r}")

    normalized = normalize_sources(sources)
    if not normalized:
        return BlendResult()

    shuffler = shuffler or Shuffler()

    quotas = allocate_quotas(normalized.keys(), total_tracks)
    manifests, contributions = collect_manifests(normalized, quotas)
    tracks = interleave(manifests, total_tracks, shuffler)

    logger.debug(f"Blended {len(tracks)} tracks from {len(normalized)} sources: {contributions}")

    return BlendResult(tracks=tracks, contributions=contributions)


async def lookup_features(
    provider: Optional[FeatureProvider],
    tracks: Sequence[Track],
) -> Dict[str, AudioFeatures]:
    """
    Ask the provider for features, degrading to an empty mapping on any
    failure. Only cancellation of the calling task is re-raised.
    """
    if provider is None or not tracks:
        return {}

    task = asyncio.ensure_future(provider.fetch_features(tracks))
    try:
        return await task or {}
    except asyncio.CancelledError:
        current = asyncio.current_task()
        if current is not None and current.cancelling():
            raise
        logger.warning("Feature lookup was cancelled, continuing without features")
        return {}
    except Exception as e:
        logger.warning(f"Feature lookup failed, continuing without features: {e}")
        return {}


async def blend(
    sources: Sources,
    options: Union[BlendOptions, Mapping[str, Any], None] = None,
    *,
    feature_provider: Optional[FeatureProvider] = None,
    shuffler: Optional[Shuffler] = None,
) -> BlendResult:
    """
    Blend tracks from multiple sources into one fair, deduplicated sequence,
    optionally reordered by audio similarity.

    Raises:
        BlendConfigError: If options are invalid
    """
    opts = resolve_options(options)
    # BlendOptions.model_construct skips validation
    mode = ALL_MODES.get(opts.sequencing_mode)
    if mode is None:
        raise BlendConfigError(f"Unknown sequencing mode: {opts.sequencing_mode}")
    shuffler = shuffler or Shuffler()

    normalized = normalize_sources(sources)
    if not normalized:
        return BlendResult()

    if opts.exclude_instrumentals:
        normalized = filter_sources(normalized)

    result = blend_tracks(normalized, opts.total_tracks, shuffler)

    if not mode.uses_features or not result.tracks:
        return result

    features = await lookup_features(feature_provider, result.tracks)

    if not features:
        logger.info("No audio features available, falling back to shuffle")
        result.tracks = shuffler.shuffle(result.tracks)
    else:
        logger.info(f"Smart sorting {len(result.tracks)} tracks ({len(features)} with features)")
        result.tracks = smart_sort(result.tracks, features)

    return result


class BlendPipeline:
    """
    A config-driven blend run. Options not given per call come from the
    BlendConfig passed in.
    """

    def __init__(
        self,
        blend_config: BlendConfig,
        feature_provider: Optional[FeatureProvider] = None,
        shuffler: Optional[Shuffler] = None,
    ):
        self.blend_config = blend_config
        self.feature_provider = feature_provider
        self.shuffler = shuffler

    def options(self, **overrides: Any) -> BlendOptions:
        values = {
            "total_tracks": self.blend_config.total_tracks,
            "sequencing_mode": self.blend_config.sequencing_mode,
            "exclude_instrumentals": self.blend_config.exclude_instrumentals,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return resolve_options(values)

    async def run(
        self,
        sources: Sources,
        options: Union[BlendOptions, Mapping[str, Any], None] = None,
    ) -> BlendResult:
        opts = resolve_options(options) if options is not None else self.options()
        shuffler = self.shuffler or Shuffler(self.blend_config.seed)

        result = await blend(
            sources,
            opts,
            feature_provider=self.feature_provider,
            shuffler=shuffler,
        )

        logger.info(
            f"Blend completed: {len(result.tracks)} tracks, "
            f"mode={opts.sequencing_mode}, contributions={result.contributions}"
        )
        return result


def create_pipeline_from_config(config: Config) -> BlendPipeline:
    """
    Build a BlendPipeline with the configured feature provider.
    A provider that fails to build is logged and left out, which makes
    similarity mode fall back to shuffling.
    """
    provider: Optional[FeatureProvider] = None
    try:
        provider = create_feature_provider(config.features)
    except Exception as e:
        logger.error(f"Failed to create feature provider '{config.features.type}': {e}")

    return BlendPipeline(blend_config=config.blend, feature_provider=provider)

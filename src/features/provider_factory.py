"""
Provider Factory - Creates feature providers from configuration.
"""
import logging

from features.base import FeatureProvider, NullFeatureProvider
from features.file_provider import FileFeatureProvider
from features.reccobeats import ReccoBeatsProvider
from services.config import FeatureProviderConfig

logger = logging.getLogger(__name__)


def create_feature_provider(provider_config: FeatureProviderConfig) -> FeatureProvider:
    """
    Create a feature provider from configuration.

    Args:
        provider_config: Configuration for the provider

    Returns:
        Configured FeatureProvider instance

    Raises:
        ValueError: If provider type is unknown
    """
    provider_type = provider_config.type.lower()

    if provider_type == "reccobeats":
        provider: FeatureProvider = ReccoBeatsProvider(
            base_url=provider_config.base_url,
            timeout=provider_config.timeout,
            batch_size=provider_config.batch_size,
            batch_delay_ms=provider_config.batch_delay_ms,
        )

    elif provider_type == "file":
        if not provider_config.path:
            raise ValueError("File feature provider requires 'path' field")
        provider = FileFeatureProvider(provider_config.path)

    elif provider_type == "none":
        provider = NullFeatureProvider()

    else:
        raise ValueError(f"Unknown feature provider type: {provider_type}")

    logger.info(f"Created {provider.name} feature provider")
    return provider

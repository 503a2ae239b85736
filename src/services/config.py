"""
Loads and handles config from config.yml
Overrides (LOG_LEVEL, RECCOBEATS_BASE_URL) are loaded from .env / the environment
"""
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from core.schemas import SequencingModeName


class BlendConfig(BaseModel):
    """Defaults for a blend run."""
    total_tracks: int = Field(100, ge=0)
    sequencing_mode: SequencingModeName = "shuffle-only"
    exclude_instrumentals: bool = False
    seed: Optional[int] = None  # None = fresh randomness every run


class FeatureProviderConfig(BaseModel):
    """Configuration for the audio feature lookup."""
    type: str = "reccobeats"  # reccobeats, file, none
    base_url: str = "https://api.reccobeats.com/v1"
    timeout: float = 10.0
    batch_size: int = Field(10, ge=1)
    batch_delay_ms: int = Field(100, ge=0)
    path: Optional[str] = None  # For file


class Config(BaseModel):
    LOG_LEVEL: str = "INFO"

    blend: BlendConfig = BlendConfig()
    features: FeatureProviderConfig = FeatureProviderConfig()


def _bool(value: str | bool) -> bool:
    """Convert string or bool to boolean."""
    if isinstance(value, bool):
        return value
    return str(value).lower() in ("1", "true", "yes", "on")


def _get_config_path() -> Optional[str]:
    """Get the path to config.yml, handling different working directories."""
    # Try relative path first
    if os.path.exists('resources/config.yml'):
        return 'resources/config.yml'

    # Try from project root
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    config_path = os.path.join(project_root, 'resources', 'config.yml')
    if os.path.exists(config_path):
        return config_path

    return None


def _parse_blend_config(data: Dict[str, Any]) -> BlendConfig:
    seed = data.get("seed")
    return BlendConfig(
        total_tracks=int(data.get("total_tracks", 100)),
        sequencing_mode=data.get("sequencing_mode", "shuffle-only"),
        exclude_instrumentals=_bool(data.get("exclude_instrumentals", False)),
        seed=int(seed) if seed is not None else None,
    )


def _parse_features_config(data: Dict[str, Any]) -> FeatureProviderConfig:
    return FeatureProviderConfig(
        type=data.get("type", "reccobeats"),
        base_url=os.getenv("RECCOBEATS_BASE_URL") or data.get("base_url", "https://api.reccobeats.com/v1"),
        timeout=float(data.get("timeout", 10.0)),
        batch_size=int(data.get("batch_size", 10)),
        batch_delay_ms=int(data.get("batch_delay_ms", 100)),
        path=data.get("path"),
    )


def load_config(path: Optional[str] = None) -> Config:
    """
    Load configuration from config.yml and overrides from .env.
    Without a config file every setting takes its default.

    Raises:
        FileNotFoundError: If an explicit path does not exist
    """
    load_dotenv()

    if path is not None and not os.path.exists(path):
        raise FileNotFoundError(f"Cannot find config file: {path}")

    config_path = path or _get_config_path()

    config: Dict[str, Any] = {}
    if config_path:
        with open(config_path, 'r', encoding='utf-8') as file:
            config = yaml.safe_load(file) or {}

    return Config(
        LOG_LEVEL=os.getenv("LOG_LEVEL") or config.get("LOG_LEVEL", "INFO"),
        blend=_parse_blend_config(config.get("blend") or {}),
        features=_parse_features_config(config.get("features") or {}),
    )

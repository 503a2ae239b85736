"""
Workflows module - Blend orchestration.
"""
from workflows.blend_pipeline import (
    BlendConfigError,
    BlendPipeline,
    blend,
    blend_tracks,
    create_pipeline_from_config,
)

__all__ = [
    "BlendConfigError",
    "BlendPipeline",
    "blend",
    "blend_tracks",
    "create_pipeline_from_config",
]

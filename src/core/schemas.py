"""
Pydantic schemas for audio features, upstream track records and blend options
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


SequencingModeName = Literal["shuffle-only", "similarity"]


class AudioFeatures(BaseModel):
    """
    Per-track audio feature vector as returned by the feature service.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Optional[str] = None
    href: Optional[str] = None
    isrc: Optional[str] = None

    acousticness: float = Field(..., ge=0.0, le=1.0)
    danceability: float = Field(..., ge=0.0, le=1.0)
    energy: float = Field(..., ge=0.0, le=1.0)
    instrumentalness: float = Field(..., ge=0.0, le=1.0)
    key: int = Field(..., ge=0, le=11)
    liveness: float = Field(..., ge=0.0, le=1.0)
    loudness: float  # dB, usually negative
    mode: int = Field(..., ge=0, le=1)
    speechiness: float = Field(..., ge=0.0, le=1.0)
    tempo: float = Field(..., ge=0.0)  # BPM
    valence: float = Field(..., ge=0.0, le=1.0)


class ReccoBeatsTrack(BaseModel):
    """
    Track record from the ReccoBeats catalogue lookup.
    """
    model_config = ConfigDict(extra="ignore")

    id: str
    trackTitle: str = ""
    isrc: str = ""
    href: str = ""
    popularity: float = 0.0


class BlendOptions(BaseModel):
    """
    Options accepted by the blend orchestrator.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    total_tracks: int = Field(100, ge=0, alias="totalTracks")
    sequencing_mode: SequencingModeName = Field("shuffle-only", alias="sequencingMode")
    exclude_instrumentals: bool = Field(False, alias="excludeInstrumentals")

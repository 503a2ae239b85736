from dataclasses import dataclass


@dataclass(frozen=True)
class SequencingMode:
    """
    Declarative sequencing mode definition.
    """
    name: str
    description: str
    uses_features: bool


SHUFFLE_ONLY = SequencingMode(
    name="shuffle-only",
    description="Fair interleave only, no feature-based reordering",
    uses_features=False,
)

SIMILARITY = SequencingMode(
    name="similarity",
    description="Reorder by audio feature similarity for smooth transitions",
    uses_features=True,
)


ALL_MODES = {
    SHUFFLE_ONLY.name: SHUFFLE_ONLY,
    SIMILARITY.name: SIMILARITY,
}

"""
Dissimilarity score between two tracks' audio features.
Lower means the tracks blend more smoothly.
"""
from typing import Dict

from core.schemas import AudioFeatures

# Typical tempo span (roughly 60-200 BPM). The tempo term is not clamped.
TEMPO_SPAN_BPM = 140.0

KEY_CLASSES = 12

MODE_MISMATCH_PENALTY = 0.5

# Tunable weights, chosen by ear rather than derived. Tempo and key matter most.
DISTANCE_WEIGHTS: Dict[str, float] = {
    "tempo": 0.30,
    "key": 0.25,
    "mode": 0.10,
    "energy": 0.15,
    "valence": 0.10,
    "danceability": 0.10,
}


def key_distance(key_a: int, key_b: int) -> float:
    """Circular distance between two pitch classes, normalised to 0-1."""
    diff = abs(key_a - key_b)
    return min(diff, KEY_CLASSES - diff) / (KEY_CLASSES / 2)


def track_distance(a: AudioFeatures, b: AudioFeatures) -> float:
    terms = {
        "tempo": abs(a.tempo - b.tempo) / TEMPO_SPAN_BPM,
        "key": key_distance(a.key, b.key),
        "mode": MODE_MISMATCH_PENALTY if a.mode != b.mode else 0.0,
        "energy": abs(a.energy - b.energy),
        "valence": abs(a.valence - b.valence),
        "danceability": abs(a.danceability - b.danceability),
    }

    return sum(DISTANCE_WEIGHTS[name] * value for name, value in terms.items())

"""
Shuffle primitive with an injectable random source
"""
import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


class Shuffler:
    """
    Fisher-Yates shuffle over a private random.Random instance.
    Pass a seed (or your own Random) to get reproducible blends.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a shuffled copy; the input is left untouched."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            result[i], result[j] = result[j], result[i]
        return result

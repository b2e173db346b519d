import random
from typing import Optional, Protocol


class RandomService(Protocol):
    """Source of randomness injected into every generation step."""

    def range(self, min_inclusive: int, max_exclusive: int) -> int:
        """Uniform integer in [min_inclusive, max_exclusive)."""
        ...

    def chance(self, probability: float) -> bool:
        """True with the given probability (0.0 never, 1.0 always)."""
        ...


class SeededRandomService:
    """
    RandomService over a private random.Random instance.

    Two services built with the same seed produce the same sequence, which
    is what makes generation reproducible. The module-level random state is
    never touched.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def range(self, min_inclusive: int, max_exclusive: int) -> int:
        if max_exclusive <= min_inclusive:
            raise ValueError(
                f"Empty range [{min_inclusive}, {max_exclusive})"
            )
        return self._rng.randrange(min_inclusive, max_exclusive)

    def chance(self, probability: float) -> bool:
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be in [0, 1], got {probability}")
        return self._rng.random() < probability

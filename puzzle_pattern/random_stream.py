"""Seeded random stream shared by the perturbation and tongue stages."""

import random


class RandomStream:
    """Deterministic random source passed explicitly between pipeline stages.

    Every draw increments ``draws`` so callers can check how much of the
    stream a stage consumed. Two streams built from the same seed and read in
    the same order yield identical values.
    """

    def __init__(self, seed: int):
        """Initialize the stream.

        Args:
            seed: Seed for the underlying generator.
        """
        self.seed = seed
        self.draws = 0
        self._rng = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        """Draw an integer uniformly from [low, high], both inclusive."""
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        self.draws += 1
        return self._rng.randint(low, high)

    def coin(self) -> bool:
        """Draw a fair boolean."""
        self.draws += 1
        return self._rng.random() < 0.5

"""7-bag randomizer"""
import random
from typing import List, Optional

from blockfall_piece import PIECE_TYPES


class BagRandom:
    """Deals every piece type once per bag, in a fresh shuffled order each fill.

    ``rng`` may be any object with ``randint``; pass a seeded
    ``random.Random`` for a reproducible sequence.
    """
    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.bag: List[str] = []

    def _fill(self):
        pieces = list(PIECE_TYPES)
        # Fisher-Yates
        for i in range(len(pieces) - 1, 0, -1):
            j = self.rng.randint(0, i)
            pieces[i], pieces[j] = pieces[j], pieces[i]
        self.bag = pieces

    def next(self) -> str:
        if not self.bag:
            self._fill()
        return self.bag.pop()

    def __len__(self):
        return len(self.bag)

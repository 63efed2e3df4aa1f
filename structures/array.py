"""
array.py — Random input arrays for the sorting engine.
"""

import random
from typing import List, Optional


def generate_random_array(
    size: int,
    min_value: int = 5,
    max_value: int = 100,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> List[int]:
    """`size` integers drawn uniformly from [min_value, max_value] (inclusive)."""
    rng = rng or random.Random(seed)
    return [rng.randint(min_value, max_value) for _ in range(size)]

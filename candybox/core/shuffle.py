"""Box content placement

Builds the candy/bomb sequence for a round and shuffles it with Fisher-Yates.
"""

import random

from .models import ContentType


def shuffle_placement(candy_count: int, bomb_count: int, rng: random.Random) -> list[ContentType]:
    """Return a uniformly shuffled placement sequence.

    Args:
        candy_count: number of candies
        bomb_count: number of bombs
        rng: random source (seed it for reproducible rounds)

    Returns:
        List of candy_count + bomb_count content tags, assigned row-major
    """
    if candy_count < 0 or bomb_count < 0:
        raise ValueError(f"counts must be >= 0, got candy={candy_count} bomb={bomb_count}")

    placement = [ContentType.CANDY] * candy_count + [ContentType.BOMB] * bomb_count

    for i in range(len(placement) - 1, 0, -1):
        j = rng.randrange(i + 1)
        placement[i], placement[j] = placement[j], placement[i]

    return placement

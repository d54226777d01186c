"""
dice.py
Defines the Left-Right-Center die and rolling utilities.
Three faces of the six-sided die pass a chip (left, right, center); the other three keep it.
Related modules:
- engine.py: Uses roll_die for each die a player rolls during a turn.
"""

import random
from typing import List

LEFT = "L"
RIGHT = "R"
CENTER = "C"
KEEP = "."

# faces not listed here keep the chip
FACE_OUTCOMES = {1: LEFT, 2: RIGHT, 3: CENTER}

MAX_DICE = 3


def roll_die(rng: random.Random) -> str:
    """
    Roll a single Left-Right-Center die using the provided random number generator.
    Args:
        rng (random.Random): RNG instance (or any object with randint).
    Returns:
        str: One of LEFT, RIGHT, CENTER, KEEP.
    """
    return FACE_OUTCOMES.get(rng.randint(1, 6), KEEP)


def roll_n(n: int, rng: random.Random) -> List[str]:
    """
    Roll n dice using the provided RNG.
    Args:
        n (int): Number of dice to roll.
        rng (random.Random): RNG instance.
    Returns:
        list[str]: List of outcomes.
    """
    return [roll_die(rng) for _ in range(n)]


def dice_for(chips: int) -> int:
    """Number of dice a player holding `chips` rolls: one per chip, never more than three."""
    return min(chips, MAX_DICE)

"""
Common test fixtures shared by all modules.

Provides factory functions for tree inputs:
- Random alphanumeric strings for stress tests
- Random element lists of a given size
- The literal three-element example
"""

import random
from typing import Optional

# Characters used by generate_random_string
CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

LITERAL_ELEMENTS = ("some", "test", "elements")


def generate_random_string(length: int, rng: Optional[random.Random] = None) -> str:
    """Random string of the given length over CHARSET."""
    rng = rng or random.Random()
    return "".join(rng.choice(CHARSET) for _ in range(length))


def make_random_elements(
    count: int,
    length: int = 10,
    seed: int = 1234,
) -> list[str]:
    """
    Create a reproducible list of random elements.

    Args:
        count: Number of elements
        length: Characters per element
        seed: Seed for the generator, so failures can be replayed

    Returns:
        List of count random strings
    """
    rng = random.Random(seed)
    return [generate_random_string(length, rng) for _ in range(count)]

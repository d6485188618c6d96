"""Bundled word pairs for the Undercover game.

Each pair holds two related but distinct words. One goes to the civilians,
the other to the undercover players; which is which is decided per game.
"""

import random
from typing import Optional, Sequence

WordPair = tuple[str, str]

WORD_PAIRS: tuple[WordPair, ...] = (
    ("Coffee", "Tea"),
    ("Cat", "Dog"),
    ("Beach", "Pool"),
    ("Guitar", "Violin"),
    ("Pizza", "Burger"),
    ("Sun", "Moon"),
    ("Train", "Bus"),
    ("Apple", "Pear"),
    ("Doctor", "Nurse"),
    ("Football", "Rugby"),
    ("Wine", "Beer"),
    ("Piano", "Organ"),
    ("Lion", "Tiger"),
    ("Butter", "Margarine"),
    ("Pen", "Pencil"),
    ("Snow", "Rain"),
    ("Castle", "Palace"),
    ("Shark", "Dolphin"),
    ("Candle", "Lamp"),
    ("Library", "Bookstore"),
    ("Mountain", "Hill"),
    ("Cinema", "Theater"),
    ("Chess", "Checkers"),
    ("Honey", "Syrup"),
    ("Pirate", "Viking"),
    ("Lemon", "Lime"),
    ("Bicycle", "Scooter"),
    ("Wedding", "Birthday"),
    ("Ketchup", "Mustard"),
    ("Knife", "Sword"),
    ("Bee", "Wasp"),
    ("Socks", "Gloves"),
    ("Airport", "Station"),
    ("Ghost", "Zombie"),
    ("Pillow", "Blanket"),
    ("Rose", "Tulip"),
    ("Soap", "Shampoo"),
    ("Owl", "Eagle"),
    ("Jacket", "Coat"),
    ("Painter", "Sculptor"),
)


def validate_word_pairs(pairs: Sequence[Sequence[str]]) -> list[WordPair]:
    """Check that every entry is a pair of two different, non-blank words.

    Args:
        pairs: Candidate pairs, e.g. loaded from a config file.

    Returns:
        The pairs as tuples, with surrounding whitespace stripped.
    """
    validated: list[WordPair] = []
    for pair in pairs:
        if len(pair) != 2:
            raise ValueError(f"Word pair must have exactly two words: {list(pair)}")
        first, second = (str(word).strip() for word in pair)
        if not first or not second:
            raise ValueError(f"Word pair contains a blank word: {list(pair)}")
        if first.lower() == second.lower():
            raise ValueError(f"Word pair words must differ: {list(pair)}")
        validated.append((first, second))
    return validated


def pick_word_pair(
    rng: Optional[random.Random] = None,
    pairs: Sequence[WordPair] = WORD_PAIRS,
) -> WordPair:
    """Draw a pair and decide its orientation.

    Returns:
        (civilian_word, undercover_word). The pair is chosen uniformly and
        flipped with probability 1/2, so a word's position in the table says
        nothing about which side gets it.
    """
    rng = rng or random
    if not pairs:
        raise ValueError("No word pairs available")
    first, second = rng.choice(pairs)
    if rng.random() < 0.5:
        return first, second
    return second, first

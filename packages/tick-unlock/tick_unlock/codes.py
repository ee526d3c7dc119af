"""Secret code generation."""
from __future__ import annotations

import random
import string
from typing import Container

from tick_unlock.types import Rarity

CODE_ALPHABET = string.ascii_letters + string.digits


def generate_code(rarity: Rarity, rng: random.Random) -> str:
    """Draw a random alphanumeric code whose length follows *rarity*."""
    return "".join(rng.choice(CODE_ALPHABET) for _ in range(rarity.code_length))


def generate_unique_code(
    rarity: Rarity, rng: random.Random, taken: Container[str]
) -> str:
    """Like ``generate_code`` but redraws until the code is not in *taken*."""
    while True:
        code = generate_code(rarity, rng)
        if code not in taken:
            return code


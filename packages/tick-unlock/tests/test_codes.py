"""Tests for tick_unlock.codes — secret code generation."""
from __future__ import annotations

from random import Random

from tick_unlock.codes import CODE_ALPHABET, generate_code, generate_unique_code
from tick_unlock.types import Rarity


class TestGenerateCode:
    def test_length_follows_rarity(self) -> None:
        rng = Random(7)
        for rarity in Rarity:
            for _ in range(50):
                assert len(generate_code(rarity, rng)) == rarity.code_length

    def test_only_alphanumeric(self) -> None:
        rng = Random(7)
        for rarity in Rarity:
            for _ in range(50):
                code = generate_code(rarity, rng)
                assert code.isascii() and code.isalnum()
                assert set(code) <= set(CODE_ALPHABET)

    def test_alphabet(self) -> None:
        assert len(CODE_ALPHABET) == 62
        assert len(set(CODE_ALPHABET)) == 62

    def test_same_seed_same_codes(self) -> None:
        a = [generate_code(Rarity.RARE, r) for r in [Random(3)] for _ in range(10)]
        b = [generate_code(Rarity.RARE, r) for r in [Random(3)] for _ in range(10)]
        assert a == b


class TestGenerateUniqueCode:
    def test_skips_taken_codes(self) -> None:
        # Replay the first draw so it is known to be taken.
        first = generate_code(Rarity.COMMON, Random(11))
        code = generate_unique_code(Rarity.COMMON, Random(11), {first})
        assert code != first
        assert len(code) == 4

    def test_returns_first_draw_when_free(self) -> None:
        first = generate_code(Rarity.LEGENDARY, Random(5))
        assert generate_unique_code(Rarity.LEGENDARY, Random(5), set()) == first

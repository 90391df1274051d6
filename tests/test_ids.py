"""Tests for wxr.ids — id generators."""

from wxr.ids import MAX_ID, random_id, seeded, sequence


class TestRandomId:
    """random_id — uniform ids in [0, MAX_ID)."""

    def test_range(self) -> None:
        for _ in range(1_000):
            value = random_id()
            assert isinstance(value, int)
            assert 0 <= value < MAX_ID

    def test_max_id(self) -> None:
        assert MAX_ID == 100_000


class TestSeeded:
    """seeded — reproducible random ids."""

    def test_same_seed_same_sequence(self) -> None:
        a, b = seeded(7), seeded(7)
        assert [a() for _ in range(10)] == [b() for _ in range(10)]

    def test_independent_of_global_rng(self) -> None:
        import random

        a = seeded("site")
        first = [a() for _ in range(5)]
        random.seed(0)
        b = seeded("site")
        assert [b() for _ in range(5)] == first

    def test_range(self) -> None:
        gen = seeded(1)
        assert all(0 <= gen() < MAX_ID for _ in range(500))


class TestSequence:
    """sequence — counting ids."""

    def test_counts_from_start(self) -> None:
        gen = sequence(10)
        assert [gen(), gen(), gen()] == [10, 11, 12]

    def test_default_start(self) -> None:
        assert sequence()() == 1

    def test_stays_in_range(self) -> None:
        gen = sequence(MAX_ID - 1)
        assert [gen(), gen()] == [MAX_ID - 1, 0]

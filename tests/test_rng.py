"""7-bag randomizer tests."""

import random

from tower_piece import PieceKind
from tower_rng import SevenBag


def test_each_bag_aligned_group_is_a_permutation():
    bag = SevenBag(random.Random(1234))
    draws = [bag.next() for _ in range(7 * 20)]
    for i in range(0, len(draws), 7):
        assert sorted(draws[i:i + 7]) == sorted(PieceKind)


def test_same_seed_reproduces_sequence():
    a = SevenBag(random.Random(42))
    b = SevenBag(random.Random(42))
    assert [a.next() for _ in range(30)] == [b.next() for _ in range(30)]


def test_identity_shuffle_gives_catalog_order(ordered_rng):
    bag = SevenBag(ordered_rng)
    assert [bag.next() for _ in range(8)] == list(PieceKind) + [PieceKind.I]


def test_remaining_tracks_current_bag():
    bag = SevenBag(random.Random(7))
    assert bag.remaining == ()
    first = bag.next()
    assert len(bag.remaining) == 6
    assert first not in bag.remaining
    for _ in range(6):
        bag.next()
    assert bag.remaining == ()

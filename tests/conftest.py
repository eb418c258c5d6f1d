"""Shared fixtures: deterministic random sources for bag-driven tests."""

import random

import pytest


class NoShuffle(random.Random):
    """Random source whose shuffle is the identity, so bags come out I,O,T,S,Z,J,L."""

    def shuffle(self, x):
        pass


@pytest.fixture
def ordered_rng():
    return NoShuffle(0)

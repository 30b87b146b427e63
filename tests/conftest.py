"""Shared fixtures for dpalign tests."""

import numpy as np
import pytest

from dpalign import ScoringModel


def _random_dna(rng, length):
    return "".join(rng.choice(list("ACGT"), size=length))


@pytest.fixture
def default_scoring():
    return ScoringModel()


@pytest.fixture
def random_pairs():
    """Twenty seeded (target, query) DNA pairs, lengths 0 to 24, empty pairs included."""
    rng = np.random.default_rng(42)
    pairs = [("", ""), ("", "ACG"), ("TTA", "")]
    for _ in range(17):
        pairs.append((
            _random_dna(rng, int(rng.integers(1, 25))),
            _random_dna(rng, int(rng.integers(1, 25))),
        ))
    return pairs

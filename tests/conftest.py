import pytest
from perfect_hash_store import Grid, UnorderedPairs


class ForwardOnly:
    """Identity hash over range(n) without an inverse."""

    def __init__(self, n):
        self.n = n

    def hash(self, key):
        return key

    def size(self):
        return self.n

    def __repr__(self):
        return f"ForwardOnly({self.n})"


@pytest.fixture
def cuboid():
    return Grid(10, 20, 30)

@pytest.fixture
def pairs10():
    return UnorderedPairs(10)

@pytest.fixture
def pairs4():
    return UnorderedPairs(4)

@pytest.fixture
def forward_only():
    return ForwardOnly(8)

@pytest.fixture
def forward_only3():
    return ForwardOnly(3)

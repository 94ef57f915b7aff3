import pytest

from invasion.common.errors import EmptySelectionError
from invasion.engine.selection import RandomSelector


def test_empty_candidates_rejected():
    with pytest.raises(EmptySelectionError):
        RandomSelector(seed=1).pick_one([])


def test_same_seed_same_picks():
    candidates = list(range(50))
    a = RandomSelector(seed=7)
    b = RandomSelector(seed=7)
    assert [a.pick_one(candidates) for _ in range(20)] == [
        b.pick_one(candidates) for _ in range(20)
    ]


def test_successive_picks_vary_and_cover_candidates():
    selector = RandomSelector(seed=3)
    picks = [selector.pick_one(["a", "b", "c", "d"]) for _ in range(400)]
    assert set(picks) == {"a", "b", "c", "d"}
    for value in "abcd":
        assert 50 < picks.count(value) < 150

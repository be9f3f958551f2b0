import random

import pytest

from taskbook.rainwater import trapped_water


def test_known_example():
    assert trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_single_basin():
    assert trapped_water([3, 0, 3]) == 3


def test_empty_and_single():
    assert trapped_water([]) == 0
    assert trapped_water([4]) == 0


@pytest.mark.parametrize("seed", range(5))
def test_monotone_holds_nothing(seed):
    rng = random.Random(seed)
    heights = sorted(rng.randint(0, 20) for _ in range(30))
    assert trapped_water(heights) == 0
    assert trapped_water(heights[::-1]) == 0


@pytest.mark.parametrize("seed", range(5))
def test_mirror_symmetry_and_bounds(seed):
    rng = random.Random(seed)
    heights = [rng.randint(0, 20) for _ in range(40)]
    water = trapped_water(heights)
    assert water == trapped_water(heights[::-1])
    assert 0 <= water <= max(heights) * len(heights) - sum(heights)


def test_filling_water_leaves_nothing():
    heights = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    water = trapped_water(heights)
    filled = [max(h, min(max(heights[: i + 1]), max(heights[i:]))) for i, h in enumerate(heights)]
    assert sum(filled) - sum(heights) == water
    assert trapped_water(filled) == 0
import random

import pytest

from lzss_parallel.params import LZSSParams


@pytest.fixture
def small_params():
    # short window keeps the pure-Python search fast
    return LZSSParams(window_size=64, max_match=18, min_match=3)


@pytest.fixture
def mixed_data():
    rng = random.Random(7)
    return bytes(rng.choice(b"ab c") for _ in range(300)) + b"hello hello hello" * 4

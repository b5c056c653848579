import pytest

from lzss_parallel.errors import InvalidParametersError
from lzss_parallel.params import DEFAULT_PARAMS, LZSSParams


def test_defaults():
    assert DEFAULT_PARAMS == LZSSParams(4096, 18, 3)


@pytest.mark.parametrize("kwargs", [
    {"window_size": 0},
    {"window_size": 32768},
    {"min_match": 0, "max_match": 5},
    {"max_match": 2},
    {"max_match": 259},
])
def test_invalid(kwargs):
    with pytest.raises(InvalidParametersError):
        LZSSParams(**kwargs)


def test_format_extremes_allowed():
    params = LZSSParams(window_size=32767, max_match=258, min_match=3)
    assert params.max_match == 258

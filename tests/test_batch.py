import numpy as np
import pytest

import lzss_parallel.batch as batch
from lzss_parallel.batch import _search_span, compress_batch, compute_all, span_window
from lzss_parallel.encoder import assemble, encode
from lzss_parallel.errors import OversizeInputError
from lzss_parallel.matcher import find_best_match
from lzss_parallel.params import LZSSParams
from lzss_parallel.tokens import serialize_tokens


def _expected(data, params):
    found = [find_best_match(data, p, params.window_size, params.max_match) for p in range(len(data))]
    return [c.length for c in found], [c.distance for c in found]


@pytest.mark.parametrize("backend", ["numpy", "thread"])
def test_matches_per_position_search(backend, small_params, mixed_data):
    lengths, distances = compute_all(mixed_data, small_params, backend=backend, workers=3)
    exp_lengths, exp_distances = _expected(mixed_data, small_params)
    assert lengths.tolist() == exp_lengths
    assert distances.tolist() == exp_distances


def test_process_backend(small_params):
    data = b"abracadabra abracadabra"
    lengths, distances = compute_all(data, small_params, backend="process", workers=2)
    exp_lengths, exp_distances = _expected(data, small_params)
    assert lengths.tolist() == exp_lengths
    assert distances.tolist() == exp_distances


def test_numpy_tie_break_farthest():
    lengths, distances = compute_all(b"abcXabcYabc", LZSSParams())
    assert lengths[8] == 3
    assert distances[8] == 8


def test_numpy_respects_window_and_cap():
    params = LZSSParams(window_size=5, max_match=4)
    data = b"Z" * 20
    lengths, distances = compute_all(data, params)
    assert lengths[0] == 0 and distances[0] == 0
    assert lengths.max() == 4
    assert distances.max() <= 5
    assert lengths[-1] == 1


def test_empty_and_single_byte():
    for data in (b"", b"q"):
        lengths, distances = compute_all(data)
        assert lengths.shape == (len(data),)
        assert not lengths.any() and not distances.any()


def test_assemble_same_as_encode(small_params, mixed_data):
    lengths, distances = compute_all(mixed_data, small_params)
    assert assemble(mixed_data, lengths, distances, small_params) == encode(mixed_data, small_params)


def test_assemble_rejects_short_arrays():
    with pytest.raises(ValueError):
        assemble(b"abc", np.zeros(2, dtype=np.int32), np.zeros(3, dtype=np.int32))


def test_compress_batch_equals_sequential(small_params, mixed_data):
    expected = serialize_tokens(encode(mixed_data, small_params), small_params.min_match)
    assert compress_batch(mixed_data, small_params) == expected


def test_oversize_input(monkeypatch):
    monkeypatch.setattr(batch, "MAX_BATCH_POSITIONS", 10)
    with pytest.raises(OversizeInputError) as exc:
        compute_all(b"x" * 11)
    assert exc.value.size == 11
    assert exc.value.limit == 10


def test_unknown_backend():
    with pytest.raises(ValueError):
        compute_all(b"abc", backend="cuda")


def test_span_window_bounds():
    assert span_window(1000, 0, 100, 64, 18) == (0, 118)
    assert span_window(1000, 500, 600, 64, 18) == (436, 618)
    assert span_window(1000, 950, 1000, 64, 18) == (886, 1000)


def test_span_searched_on_its_own_slice(small_params, mixed_data):
    n = len(mixed_data)
    start, stop = 150, 220
    lo, hi = span_window(n, start, stop, small_params.window_size, small_params.max_match)
    got = _search_span(mixed_data[lo:hi], lo, start, stop,
                       small_params.window_size, small_params.max_match)
    exp_lengths, exp_distances = _expected(mixed_data, small_params)
    assert got == (start, exp_lengths[start:stop], exp_distances[start:stop])


def test_process_backend_with_sliced_spans(small_params, mixed_data):
    lengths, distances = compute_all(mixed_data, small_params, backend="process", workers=2)
    exp_lengths, exp_distances = _expected(mixed_data, small_params)
    assert lengths.tolist() == exp_lengths
    assert distances.tolist() == exp_distances

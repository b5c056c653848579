from lzss_parallel.matcher import NO_MATCH, MatchCandidate, find_best_match


def test_no_match_at_start():
    assert find_best_match(b"abc", 0) == NO_MATCH


def test_no_byte_matches():
    assert find_best_match(b"abcd", 3) == MatchCandidate(0, 0)


def test_short_match_still_reported():
    # below the minimum match length, but the search itself does not filter
    assert find_best_match(b"abxab", 3) == MatchCandidate(2, 3)


def test_overlapping_run():
    assert find_best_match(b"AAAA", 1) == MatchCandidate(3, 1)
    assert find_best_match(b"A" * 12, 1) == MatchCandidate(11, 1)


def test_capped_at_max_match():
    data = b"A" * 100
    assert find_best_match(data, 50, window_size=4096, max_match=18) == MatchCandidate(18, 50)


def test_capped_at_end_of_buffer():
    data = b"xyzxy"
    assert find_best_match(data, 3) == MatchCandidate(2, 3)


def test_tie_prefers_farthest_distance():
    data = b"abcXabcYabc"
    assert find_best_match(data, 8) == MatchCandidate(3, 8)


def test_longer_nearer_match_wins():
    data = b"abcQabcdQabcd"
    assert find_best_match(data, 9) == MatchCandidate(4, 5)


def test_window_limits_distance():
    data = b"abcd" + b"x" * 20 + b"abcd"
    assert find_best_match(data, 24, window_size=30) == MatchCandidate(4, 24)
    assert find_best_match(data, 24, window_size=10).length < 3

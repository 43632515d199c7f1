from __future__ import annotations

import pytest

from mcp_syslog_codec.core.chash import jump


def test_single_bucket() -> None:
    for key in (0, 1, 42, 2**63, 2**64 - 1):
        assert jump(key, 1) == 0


def test_zero_key_stays_in_first_bucket() -> None:
    for buckets in (1, 2, 10, 1000):
        assert jump(0, buckets) == 0


def test_result_in_range() -> None:
    for key in range(500):
        for buckets in (2, 3, 7, 64):
            assert 0 <= jump(key, buckets) < buckets


def test_deterministic() -> None:
    assert [jump(k, 16) for k in range(50)] == [jump(k, 16) for k in range(50)]


def test_growing_only_moves_keys_to_new_bucket() -> None:
    for key in range(1000):
        before = jump(key, 10)
        after = jump(key, 11)
        assert after == before or after == 10


def test_spread_is_roughly_uniform() -> None:
    counts = [0] * 4
    for key in range(4000):
        counts[jump(key, 4)] += 1
    assert all(700 < c < 1300 for c in counts)


def test_bucket_count_must_be_positive() -> None:
    with pytest.raises(ValueError):
        jump(1, 0)

import pytest
from hypothesis import given, strategies as st

from rastared.memory_pool import (
    BLOCK_SIZE,
    MAX_BLOCKS,
    BlockPool,
    PoolExhaustedError,
)


def test_default_pool_matches_documented_limits():
    pool = BlockPool()
    assert pool.max_blocks == MAX_BLOCKS == 100
    assert pool.block_size == BLOCK_SIZE == 256


def test_allocate_returns_block_of_block_size():
    pool = BlockPool(4, 32)
    block = pool.allocate(10, 7)
    assert len(block) == 32
    assert pool.used_count() == 1
    assert pool.location_of(block) == 7


def test_allocations_are_distinct_until_exhausted():
    pool = BlockPool(3, 8)
    blocks = [pool.allocate(8, i) for i in range(3)]
    assert len({id(b) for b in blocks}) == 3
    with pytest.raises(PoolExhaustedError):
        pool.allocate(1, 99)


def test_first_fit_reuses_lowest_freed_block():
    pool = BlockPool(3, 8)
    first, second, third = (pool.allocate(1, i) for i in range(3))
    pool.free(second)
    pool.free(first)
    again = pool.allocate(1, 42)
    assert again is first
    assert pool.location_of(again) == 42
    assert pool.used_count() == 2
    assert pool.location_of(third) == 2


def test_freed_block_has_no_location():
    pool = BlockPool(2, 8)
    block = pool.allocate(4, 5)
    pool.free(block)
    assert pool.location_of(block) is None
    assert pool.used_count() == 0


def test_free_none_is_ignored():
    pool = BlockPool(2, 8)
    pool.allocate(1, 1)
    pool.free(None)
    assert pool.used_count() == 1


def test_free_foreign_block_raises():
    pool = BlockPool(2, 8)
    with pytest.raises(ValueError):
        pool.free(bytearray(8))


def test_oversized_request_raises():
    pool = BlockPool(2, 8)
    with pytest.raises(ValueError):
        pool.allocate(9, 1)


def test_invalid_pool_shape_raises():
    with pytest.raises(ValueError):
        BlockPool(0, 8)
    with pytest.raises(ValueError):
        BlockPool(2, 0)


@given(st.lists(st.booleans(), max_size=60))
def test_used_count_tracks_allocations(ops):
    pool = BlockPool(10, 4)
    held = []
    for allocate in ops:
        if allocate:
            if len(held) < 10:
                held.append(pool.allocate(1, len(held)))
            else:
                with pytest.raises(PoolExhaustedError):
                    pool.allocate(1, 0)
        elif held:
            pool.free(held.pop(0))
        assert pool.used_count() == len(held)
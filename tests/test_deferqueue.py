import pytest
from hypothesis import given, strategies as st

from rastared.deferqueue import DeferQueue, RedundancyPacket


def _packet(seq, data=b"payload"):
    return RedundancyPacket(sequence_number=seq, data=data)


def test_add_and_get_round_trip():
    queue = DeferQueue(4)
    packet = _packet(5, b"abc")
    assert queue.add(packet, 1000) is True
    assert 5 in queue
    assert queue.get(5) == packet
    assert queue.get_ts(5) == 1000
    assert len(queue) == 1


def test_duplicate_sequence_number_is_not_added():
    queue = DeferQueue(4)
    queue.add(_packet(3, b"first"), 10)
    assert queue.add(_packet(3, b"second"), 20) is False
    assert queue.get(3).data == b"first"
    assert queue.get_ts(3) == 10
    assert len(queue) == 1


def test_full_queue_rejects_new_packets():
    queue = DeferQueue(2)
    queue.add(_packet(1), 1)
    queue.add(_packet(2), 2)
    assert queue.is_full()
    assert queue.add(_packet(3), 3) is False
    assert 3 not in queue
    assert len(queue) == 2


def test_remove_and_missing_remove():
    queue = DeferQueue(3)
    queue.add(_packet(7), 1)
    queue.remove(7)
    queue.remove(8)
    assert 7 not in queue
    assert len(queue) == 0


def test_get_missing_raises_and_ts_is_zero():
    queue = DeferQueue(3)
    with pytest.raises(KeyError):
        queue.get(1)
    assert queue.get_ts(1) == 0


def test_smallest_seqnr():
    queue = DeferQueue(5)
    for seq in (9, 4, 12):
        queue.add(_packet(seq), seq)
    assert queue.smallest_seqnr() == 4
    queue.remove(4)
    assert queue.smallest_seqnr() == 9


def test_smallest_seqnr_on_empty_raises():
    with pytest.raises(ValueError):
        DeferQueue(2).smallest_seqnr()


def test_clear_empties_queue():
    queue = DeferQueue(3)
    queue.add(_packet(1), 1)
    queue.add(_packet(2), 2)
    queue.clear()
    assert len(queue) == 0
    assert not queue.is_full()
    assert queue.add(_packet(1), 5) is True


def test_zero_capacity_is_always_full():
    queue = DeferQueue(0)
    assert queue.is_full()
    assert queue.add(_packet(0), 0) is False


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        DeferQueue(-1)


@given(st.lists(st.integers(min_value=0, max_value=50), max_size=40), st.integers(1, 10))
def test_queue_never_exceeds_capacity_and_keeps_unique(seqs, capacity):
    queue = DeferQueue(capacity)
    for seq in seqs:
        queue.add(_packet(seq), seq)
    assert len(queue) <= capacity
    assert len(queue) == min(capacity, len(set(seqs)))
    if len(queue):
        assert queue.smallest_seqnr() in seqs
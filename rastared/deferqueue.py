"""The defer queue of the redundancy layer, keyed by PDU sequence number."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RedundancyPacket:
    """A redundancy layer PDU: sequence number, carried SR layer bytes and CRC state."""

    sequence_number: int
    data: bytes = b""
    checksum_correct: bool = True
    reserve: int = 0


class DeferQueue:
    """Bounded store of out-of-order PDUs, each held with its receive time.

    The sequence number identifies an entry: a PDU whose sequence number is
    already queued is not added again, and nothing is added to a full queue.
    """

    def __init__(self, max_count: int) -> None:
        if max_count < 0:
            raise ValueError("max_count must not be negative")
        self.max_count = max_count
        self._entries: dict[int, tuple[RedundancyPacket, int]] = {}

    def add(self, packet: RedundancyPacket, received_timestamp: int) -> bool:
        """Queue ``packet``; return False if the queue is full or already holds it."""
        if self.is_full() or packet.sequence_number in self._entries:
            return False
        self._entries[packet.sequence_number] = (packet, received_timestamp)
        return True

    def remove(self, seq_nr: int) -> None:
        """Drop the PDU with ``seq_nr`` if it is queued."""
        self._entries.pop(seq_nr, None)

    def __contains__(self, seq_nr: object) -> bool:
        return seq_nr in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def is_full(self) -> bool:
        """True once the queue holds ``max_count`` PDUs."""
        return len(self._entries) >= self.max_count

    def smallest_seqnr(self) -> int:
        """The smallest queued sequence number."""
        if not self._entries:
            raise ValueError("the defer queue is empty")
        return min(self._entries)

    def get(self, seq_nr: int) -> RedundancyPacket:
        """The queued PDU with ``seq_nr``; KeyError if there is none."""
        try:
            return self._entries[seq_nr][0]
        except KeyError:
            raise KeyError(f"sequence number {seq_nr} is not in the defer queue") from None

    def get_ts(self, seq_nr: int) -> int:
        """Receive time of the PDU with ``seq_nr``, or 0 if it is not queued."""
        entry = self._entries.get(seq_nr)
        return 0 if entry is None else entry[1]

    def clear(self) -> None:
        """Remove every queued PDU."""
        self._entries.clear()
"""Redundancy channel of the redundancy layer: ordering and de-duplication of PDUs."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from .deferqueue import DeferQueue, RedundancyPacket
from .util import current_ts

_log = logging.getLogger(__name__)

# PDUs further ahead than this many times the defer queue size are discarded.
_ACCEPT_WINDOW_FACTOR = 10


class RedundancyState(Enum):
    """State of a redundancy channel."""

    UP = "up"
    CLOSED = "closed"


@dataclass
class DiagnosticsData:
    """Diagnostic counters of one transport channel."""

    start_time: int = 0
    n_missed: int = 0
    t_drift: int = 0
    t_drift2: int = 0
    received_packets: int = 0


@dataclass
class TransportChannel:
    """A remote transport channel: IPv4 address, port and its diagnostics."""

    ip_address: str
    port: int
    diagnostics_data: DiagnosticsData = field(default_factory=DiagnosticsData)


@dataclass(frozen=True)
class RedundancyConfig:
    """Configuration values of the redundancy layer."""

    n_deferqueue_size: int
    t_seq: int = 0
    n_diagnose: int = 0


class RedundancyChannel:
    """Receives PDUs from several transport channels and delivers them once, in order.

    Delivered SR layer PDUs are kept in a bounded receive buffer of
    ``n_deferqueue_size`` entries; when it is full further PDUs are dropped.
    """

    def __init__(
        self,
        associated_id: int,
        config: RedundancyConfig,
        transport_channel_count: int,
    ) -> None:
        if transport_channel_count < 0:
            raise ValueError("transport_channel_count must not be negative")
        self.associated_id = associated_id
        self.config = config
        self.current_state = RedundancyState.CLOSED
        self.is_open = False
        self.seq_rx = 0
        self.seq_tx = 0
        self.defer_queue = DeferQueue(config.n_deferqueue_size)
        self.transport_channel_count = transport_channel_count
        self.connected_channels: list[TransportChannel] = []
        self._received: deque[bytes] = deque()
        _log.debug("space for %d connected channels", transport_channel_count)

    @property
    def received_count(self) -> int:
        """Number of PDUs waiting in the receive buffer."""
        return len(self._received)

    def _push_received(self, data: bytes) -> None:
        if len(self._received) >= self.config.n_deferqueue_size:
            _log.debug("receive buffer full, dropping PDU")
            return
        self._received.append(data)

    def _deliver_defer_queue(self) -> None:
        while self.seq_rx in self.defer_queue:
            _log.debug("defer queue contains seq_pdu=%d", self.seq_rx)
            self._push_received(self.defer_queue.get(self.seq_rx).data)
            self.defer_queue.remove(self.seq_rx)
            self.seq_rx += 1
        _log.debug("defer queue does not contain seq_pdu=%d", self.seq_rx)

    def receive(self, packet: RedundancyPacket, channel_id: int) -> None:
        """Handle a PDU that arrived on transport channel ``channel_id``."""
        if not 0 <= channel_id < self.transport_channel_count:
            raise IndexError(f"no transport channel with index {channel_id}")

        if not packet.checksum_correct:
            _log.debug("channel %d: packet checksum incorrect", channel_id)
            return

        if channel_id < len(self.connected_channels):
            self.connected_channels[channel_id].diagnostics_data.received_packets += 1

        seq = packet.sequence_number
        if self.seq_rx == 0 and self.seq_tx == 0 and seq != 0:
            _log.debug("channel %d: first seq_pdu != 0", channel_id)
            return

        window_end = self.seq_rx + self.config.n_deferqueue_size * _ACCEPT_WINDOW_FACTOR
        if seq < self.seq_rx:
            _log.debug("channel %d: seq_pdu < seq_rx, discarding", channel_id)
        elif seq == self.seq_rx:
            self.seq_rx += 1
            _log.debug("channel %d: correct seq. nr. %d, delivering", channel_id, seq)
            self._push_received(packet.data)
            self._deliver_defer_queue()
        elif seq <= window_end:
            if seq in self.defer_queue:
                _log.debug("channel %d: seq %d already deferred", channel_id, seq)
            elif self.defer_queue.is_full():
                _log.debug("channel %d: defer queue full", channel_id)
            else:
                self.defer_queue.add(packet, current_ts())
        else:
            _log.debug("channel %d: seq_pdu beyond accept window", channel_id)

    def defer_timeout(self) -> None:
        """Skip ahead to the smallest deferred PDU and deliver what follows it.

        Raises ValueError if nothing is deferred.
        """
        self.seq_rx = self.defer_queue.smallest_seqnr()
        _log.debug("defer timeout, seq_rx set to %d", self.seq_rx)
        self._deliver_defer_queue()

    def add_transport_channel(self, ip: str, port: int) -> TransportChannel:
        """Register a discovered remote transport channel."""
        if len(self.connected_channels) >= self.transport_channel_count:
            raise ValueError(
                f"all {self.transport_channel_count} transport channels are already known"
            )
        channel = TransportChannel(ip, port)
        self.connected_channels.append(channel)
        return channel

    def pop_received(self) -> bytes | None:
        """Take the oldest delivered SR layer PDU, or None if there is none."""
        return self._received.popleft() if self._received else None

    def cleanup(self) -> None:
        """Drop all queued data and forget the transport channels."""
        self.defer_queue.clear()
        self.connected_channels.clear()
        self.transport_channel_count = 0
        self._received.clear()
        self.is_open = False
        self.current_state = RedundancyState.CLOSED
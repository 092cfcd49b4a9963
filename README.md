# rastared

Building blocks for the redundancy layer of the RaSTA safety protocol. The
package is plain Python and has no third-party dependencies.

## Modules

- `rastared.siphash`
  - `siphash(data, key, outlen)`: SipHash-2-4 with a 16-byte key. It returns
    8 or 16 bytes.
  - `halfsiphash(data, key, outlen)`: HalfSipHash-2-4 with an 8-byte key. It
    returns 4 or 8 bytes.
  - `generate_siphash24(data, key, hash_type)`: the SR-layer safety code.
    Hash type 1 gives an 8-byte HalfSipHash. Hash type 2 gives a 16-byte
    SipHash. Any other type gives 8 zero bytes.
  - An output length that is not allowed, or a key that is too short, raises
    `ValueError`.
- `rastared.util`
  - `current_ts()`: the monotonic clock in milliseconds, cut to 32 bits.
  - `is_big_endian()`: tells whether the host stores integers big-endian.
  - `long_to_bytes(value)` and `bytes_to_long(data)`: 32-bit integer/byte
    conversion in host byte order. `bytes_to_long` raises `ValueError` when it
    gets fewer than 4 bytes.
- `rastared.memory_pool`
  - `BlockPool(max_blocks, block_size)`: a fixed set of equal-sized
    `bytearray` blocks. The defaults are 100 blocks of 256 bytes.
  - `allocate(size, location)` hands out the lowest free block and tags it
    with `location`.
  - `free(block)` returns a block to the pool.
  - `used_count()` and `location_of(block)` show which blocks are in use and
    what they are tagged with.
  - When every block is in use, `allocate` raises `PoolExhaustedError`, a
    subclass of `MemoryError`.
- `rastared.udp`
  - `UdpSocket`: an IPv4 UDP socket with `bind(port, ip)`,
    `receive(max_len)`, `send(message, host, port)` and `close()`. It can be
    used as a context manager.
  - `send` raises `ValueError` when `host` is not an IPv4 address, and so
    does `bind` when `ip` is not one.
- `rastared.deferqueue`
  - `RedundancyPacket`: a frozen dataclass with `sequence_number`, `data`,
    `checksum_correct` and `reserve`.
  - `DeferQueue(max_count)`: a bounded store of packets keyed by sequence
    number. It records the time each packet arrived (`get_ts`).
  - `add` returns `False` when the queue is full or already holds that
    sequence number.
  - It also has `remove`, `get`, `smallest_seqnr`, `is_full` and `clear`, and
    supports `in` and `len()`.
- `rastared.redundancy`: `RedundancyChannel`, together with
  `RedundancyConfig`, `TransportChannel`, `DiagnosticsData` and
  `RedundancyState`. `RedundancyChannel.receive(packet, channel_id)` works as
  follows:
  - It discards packets whose checksum is marked incorrect.
  - Until something has been received, it accepts only sequence number 0 as
    the first packet.
  - It drops duplicates and late packets.
  - It delivers packets in sequence order.
  - It keeps packets that arrive early in the defer queue. A packet is kept
    only if it lies within ten times `n_deferqueue_size` of the next expected
    number.
  - Delivered data goes into a receive buffer of `n_deferqueue_size` entries.
    `pop_received()` takes entries out of that buffer. When the buffer is
    full, further data is dropped.
  - `defer_timeout()` jumps to the smallest deferred sequence number and
    delivers from there. It raises `ValueError` when nothing is deferred.
  - `add_transport_channel(ip, port)` registers a remote channel. It raises
    `ValueError` once all channels are known.
  - `cleanup()` clears everything.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from rastared.siphash import generate_siphash24

hash_key = bytes(range(16))
code = generate_siphash24(b"payload", hash_key, 2)
assert len(code) == 16
```

```python
from rastared.deferqueue import RedundancyPacket
from rastared.redundancy import RedundancyChannel, RedundancyConfig

channel = RedundancyChannel(0x61, RedundancyConfig(n_deferqueue_size=4), 2)
channel.receive(RedundancyPacket(0, b"a"), 0)
channel.receive(RedundancyPacket(2, b"c"), 1)  # early: deferred
channel.receive(RedundancyPacket(1, b"b"), 0)  # fills the gap
assert [channel.pop_received() for _ in range(3)] == [b"a", b"b", b"c"]
```

```python
from rastared.udp import UdpSocket

with UdpSocket() as sock:
    sock.bind(0, "127.0.0.1")
    ...
```

## What it does not do

This package provides building blocks only. It does not cover:

- the safety and retransmission (SR) layer: no connection handshake,
  heartbeats or retransmission;
- encoding or decoding of PDUs on the wire, including CRC calculation for
  redundancy packets;
- a multiplexer or event loop that joins `UdpSocket` and `RedundancyChannel`;
- configuration file loading;
- any command-line program.
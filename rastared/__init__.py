"""RaSTA redundancy layer building blocks: SipHash safety codes, defer queue, redundancy channels, block pool and UDP sockets."""

__version__ = "0.1.0"

__all__ = ["deferqueue", "memory_pool", "redundancy", "siphash", "udp", "util"]
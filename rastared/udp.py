"""A small IPv4 UDP socket wrapper."""

from __future__ import annotations

import errno
import socket


class UdpSocket:
    """An IPv4 UDP socket that can bind, send to a dotted address and receive."""

    def __init__(self) -> None:
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        self._closed = False

    def bind(self, port: int, ip: str | None = None) -> None:
        """Bind to ``port`` on the interface ``ip``, or on all interfaces."""
        if ip is not None:
            self._check_ipv4(ip)
        self._sock.bind(("" if ip is None else ip, port))

    def receive(self, max_len: int) -> tuple[bytes, tuple[str, int]]:
        """Block until a datagram arrives; return its data and the sender address."""
        data, sender = self._sock.recvfrom(max_len)
        return data, (sender[0], sender[1])

    def send(self, message: bytes, host: str, port: int) -> None:
        """Send ``message`` to the IPv4 address ``host`` at ``port``."""
        self._check_ipv4(host)
        self._sock.sendto(bytes(message), (host, port))

    def close(self) -> None:
        """Shut the socket down and release it; closing twice is harmless."""
        if self._closed:
            return
        self._closed = True
        try:
            self._sock.shutdown(socket.SHUT_RDWR)
        except OSError as exc:
            if exc.errno not in (errno.ENOTCONN, errno.EINVAL):
                self._sock.close()
                raise
        self._sock.close()

    def __enter__(self) -> UdpSocket:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def _check_ipv4(host: str) -> None:
        try:
            socket.inet_aton(host)
        except (OSError, TypeError) as err:
            raise ValueError(f"not an IPv4 address: {host!r}") from err
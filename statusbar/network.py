"""Network throughput counters and interface addresses."""

from __future__ import annotations

import fcntl
import ipaddress
import socket
import struct
from pathlib import Path

from .util import StatusError, fmt_human, read_int

NET_ROOT = "/sys/class/net"
IF_INET6 = "/proc/net/if_inet6"

_SIOCGIFADDR = 0x8915
_IFNAMSIZ = 16


class NetSpeed:
    """Turns successive byte counters into per-second transfer rates."""

    def __init__(self, interval: int = 1000, root: str = NET_ROOT) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.root = root
        self._last: dict[tuple[str, str], int] = {}

    def _speed(self, interface: str, direction: str) -> str:
        key = (direction, interface)
        old = self._last.get(key, 0)
        path = Path(self.root) / interface / "statistics" / f"{direction}_bytes"
        new = read_int(path)
        self._last[key] = new
        if old == 0:
            raise StatusError(f"no previous {direction} sample for '{interface}'")
        return fmt_human((new - old) * 1000 // self.interval, 1024)

    def rx(self, interface: str) -> str:
        """Return the receive rate of ``interface`` since the last call."""
        return self._speed(interface, "rx")

    def tx(self, interface: str) -> str:
        """Return the transmit rate of ``interface`` since the last call."""
        return self._speed(interface, "tx")


def ipv4(interface: str) -> str:
    """Return the IPv4 address assigned to ``interface``."""
    name = interface.encode()
    if not name or len(name) >= _IFNAMSIZ or b"\0" in name:
        raise StatusError(f"invalid interface name '{interface}'")
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            request = struct.pack("256s", name)
            reply = fcntl.ioctl(sock.fileno(), _SIOCGIFADDR, request)
    except OSError as exc:
        raise StatusError(f"ioctl 'SIOCGIFADDR' '{interface}': {exc.strerror}") from exc
    return socket.inet_ntoa(reply[20:24])


def parse_if_inet6(text: str, interface: str) -> str:
    """Return the first IPv6 address listed for ``interface`` in if_inet6 text."""
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 6 or fields[5] != interface:
            continue
        try:
            address = ipaddress.IPv6Address(int(fields[0], 16))
        except ValueError as exc:
            raise StatusError(f"malformed address '{fields[0]}'") from exc
        if address.is_link_local:
            return f"{address.compressed}%{interface}"
        return address.compressed
    raise StatusError(f"no IPv6 address for '{interface}'")


def ipv6(interface: str, path: str = IF_INET6) -> str:
    """Return the IPv6 address assigned to ``interface``."""
    try:
        with open(path, encoding="ascii", errors="replace") as fh:
            text = fh.read()
    except OSError as exc:
        raise StatusError(f"fopen '{path}': {exc.strerror}") from exc
    return parse_if_inet6(text, interface)
"""Wireless link quality, ESSID and OSS mixer volume."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct
from pathlib import Path

from .util import StatusError

NET_ROOT = "/sys/class/net"
PROC_NET_WIRELESS = "/proc/net/wireless"

# Link quality in /proc/net/wireless tops out at 70.
_MAX_QUALITY = 70
_WIRELESS_DATA_LINE = 2
_QUALITY = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")

_SIOCGIWESSID = 0x8B1B
_IW_ESSID_MAX_SIZE = 32
_IFNAMSIZ = 16
_IWREQ_SIZE = 32

_SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)
_SOUND_MIXER_DEVMASK = 0xFE


def _mixer_read(number: int) -> int:
    """Encode _IOR('M', number, int)."""
    return 0x80044D00 | number


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0..100 percent."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def parse_wireless_quality(text: str, interface: str) -> str:
    """Return the link quality percentage of ``interface`` from /proc/net/wireless text."""
    lines = text.splitlines(keepends=True)
    if len(lines) <= _WIRELESS_DATA_LINE:
        raise StatusError("no wireless data line")
    line = lines[_WIRELESS_DATA_LINE]
    position = line.find(interface)
    if position < 0:
        raise StatusError(f"'{interface}' not listed as wireless")
    match = _QUALITY.match(line[position + len(interface) + 2 :])
    if match is None:
        raise StatusError(f"malformed wireless data for '{interface}'")
    quality = int(match.group(1))
    return str(int(quality / _MAX_QUALITY * 100))


def wifi_perc(
    interface: str,
    root: str = NET_ROOT,
    wireless_path: str = PROC_NET_WIRELESS,
) -> str:
    """Return the link quality of an interface that is up, in percent."""
    operstate = Path(root) / interface / "operstate"
    try:
        with open(operstate, encoding="ascii", errors="replace") as fh:
            status = fh.readline(4)
    except OSError as exc:
        raise StatusError(f"fopen '{operstate}': {exc.strerror}") from exc
    if status != "up\n":
        raise StatusError(f"'{interface}' is not up")

    try:
        with open(wireless_path, encoding="ascii", errors="replace") as fh:
            text = fh.read()
    except OSError as exc:
        raise StatusError(f"fopen '{wireless_path}': {exc.strerror}") from exc
    return parse_wireless_quality(text, interface)


def wifi_essid(interface: str) -> str:
    """Return the ESSID the interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ or b"\0" in name:
        raise StatusError(f"invalid interface name '{interface}'")

    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address, length = essid.buffer_info()
    request = bytearray(_IWREQ_SIZE)
    struct.pack_into("16sPHH", request, 0, name, address, length, 0)

    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request, True)
    except OSError as exc:
        raise StatusError(f"ioctl 'SIOCGIWESSID': {exc.strerror}") from exc

    value = essid.tobytes().split(b"\0", 1)[0]
    if not value:
        raise StatusError(f"'{interface}' has no ESSID")
    return value.decode("utf-8", errors="replace")


def _ioctl_int(fd: int, request: int, label: str) -> int:
    try:
        reply = fcntl.ioctl(fd, request, struct.pack("i", 0))
    except OSError as exc:
        raise StatusError(f"ioctl '{label}': {exc.strerror}") from exc
    return struct.unpack("i", reply)[0]


def vol_perc(card: str = "/dev/mixer") -> str:
    """Return the master volume of an OSS mixer device, in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        raise StatusError(f"open '{card}': {exc.strerror}") from exc

    volume = None
    try:
        devmask = _ioctl_int(
            fd, _mixer_read(_SOUND_MIXER_DEVMASK), "SOUND_MIXER_READ_DEVMASK"
        )
        for index, name in enumerate(_SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                volume = _ioctl_int(fd, _mixer_read(index), f"MIXER_READ({index})")
    finally:
        os.close(fd)

    if volume is None:
        raise StatusError(f"mixer '{card}' has no volume control")
    return str(volume & 0xFF)
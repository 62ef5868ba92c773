"""General system values: time, disks, entropy, host, load, files, uptime, user."""

from __future__ import annotations

import os
import pwd
import socket
import sys
import time

from .util import StatusError, fmt_human, read_int

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"
_DATETIME_BUFFER = 1024


def datetime_str(fmt: str = "%F %T") -> str:
    """Format the current local time with strftime."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _DATETIME_BUFFER:
        raise StatusError("strftime: Result string exceeds buffer size")
    return result


def _statvfs(path: str) -> os.statvfs_result:
    try:
        return os.statvfs(path)
    except OSError as exc:
        raise StatusError(f"statvfs '{path}': {exc.strerror}") from exc


def disk_free(path: str = "/") -> str:
    """Return the space available to unprivileged users."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str = "/") -> str:
    """Return the used share of the filesystem in whole percent."""
    fs = _statvfs(path)
    if fs.f_blocks == 0:
        raise StatusError(f"filesystem at '{path}' has no blocks")
    return str(int(100 * (1.0 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str = "/") -> str:
    """Return the size of the filesystem."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str = "/") -> str:
    """Return the space in use on the filesystem."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def entropy(path: str = ENTROPY_AVAIL) -> str:
    """Return the available kernel entropy."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    return str(read_int(path))


def hostname() -> str:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        raise StatusError(f"gethostname: {exc.strerror}") from exc


def kernel_release() -> str:
    """Return the kernel release, as `uname -r` prints it."""
    try:
        return os.uname().release
    except OSError as exc:
        raise StatusError(f"uname: {exc.strerror}") from exc


def load_avg() -> str:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError as exc:
        raise StatusError("getloadavg: Failed to obtain load average") from exc
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def num_files(path: str) -> str:
    """Return the number of entries in a directory, not counting . and .."""
    try:
        with os.scandir(path) as entries:
            return str(sum(1 for _ in entries))
    except OSError as exc:
        raise StatusError(f"opendir '{path}': {exc.strerror}") from exc


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    raise StatusError("no uptime clock available")


def format_uptime(seconds: int) -> str:
    """Format a number of seconds as 'Hh Mm'."""
    seconds = int(seconds)
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def uptime() -> str:
    """Return the system uptime as 'Hh Mm'."""
    clock = _uptime_clock()
    try:
        return format_uptime(int(time.clock_gettime(clock)))
    except OSError as exc:
        raise StatusError(f"clock_gettime {clock}") from exc


def gid() -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid() -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username() -> str:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError as exc:
        raise StatusError(f"getpwuid '{euid}'") from exc